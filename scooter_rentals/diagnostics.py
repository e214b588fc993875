# scooter_rentals/diagnostics.py
from typing import List, Dict, Any
import numpy as np
from .config import OPTIMAL_RENTAL_PRICE
from .models import DayPlan


class Diagnostics:
    def __init__(self, agent_name: str):
        self.agent_name = agent_name

        # Tracking Data
        self.history = []
        self.plans: List[DayPlan] = []

        # Metrics
        self.total_rented = 0
        self.total_broken = 0
        self.total_repairs = 0
        self.scooters_bought = 0
        self.adverts_bought = 0

    def record_step(self, obs: Dict[str, Any], plan: DayPlan):
        """Record a single simulated day from the observation ScooterGame.step returned."""
        yesterday = obs['yesterday']
        step_data = {
            'day': obs['day'] - 1,
            'cash': obs['cash'],
            'nbv': obs['_internal_metrics']['nbv'],
            'daily_profit': obs['_internal_metrics']['daily_profit'],
            'rented': yesterday['rented'],
            'broken': yesterday['broken'],
            'scooters_working': obs['scooters_working'],
            'price': plan.rental_price,
            'utilisation': yesterday['rented'] / yesterday['available'] if yesterday['available'] else 0.0,
        }
        self.history.append(step_data)
        self.plans.append(plan)

        # Update Aggregate Metrics
        self.total_rented += yesterday['rented']
        self.total_broken += yesterday['broken']
        self.total_repairs += max(0, plan.repair_scooters)
        self.scooters_bought += max(0, plan.buy_scooters)
        self.adverts_bought += max(0, plan.advertisements)

    def classify_strategy(self) -> str:
        """Classify the agent's strategy based on behavior"""
        if not self.history:
            return "Unknown"

        avg_price = np.mean([d['price'] for d in self.history])

        if self.total_broken > 0 and self.total_repairs == 0:
            return "Run Into The Ground"
        elif avg_price > OPTIMAL_RENTAL_PRICE * 1.5:
            return "Premium Pricing"
        elif avg_price < OPTIMAL_RENTAL_PRICE * 0.5:
            return "Discount Volume"
        elif self.scooters_bought > 0:
            return "Fleet Builder"
        elif self.adverts_bought > len(self.history):
            return "Marketing Heavy"
        else:
            return "Steady Operator"

    def generate_report(self) -> Dict[str, Any]:
        """Generate final diagnostic report"""
        return {
            'agent': self.agent_name,
            'strategy': self.classify_strategy(),
            'final_cash': self.history[-1]['cash'] if self.history else 0,
            'final_nbv': self.history[-1]['nbv'] if self.history else 0,
            'survival_days': len(self.history),
            'metrics': {
                'total_profit': round(sum(d['daily_profit'] for d in self.history), 2),
                'rented': self.total_rented,
                'broken': self.total_broken,
                'repairs': self.total_repairs,
                'mean_utilisation': float(np.mean([d['utilisation'] for d in self.history])) if self.history else 0.0,
            }
        }
