# scooter_rentals/baselines.py
import numpy as np
from typing import Dict, Any, Optional
from .config import OPTIMAL_RENTAL_PRICE, PRICE_OF_PARTS, PRICE_OF_SCOOTERS, PRICE_OF_ADVERTS
from .mechanics import RENTAL_DEMAND_TABLE
from .models import DayPlan, WeatherType


def random_agent(obs: Dict[str, Any], rng: Optional[np.random.RandomState] = None) -> DayPlan:
    """
    Agent 1: Random
    Charges a random price around optimal and fixes what it can afford to.
    """
    rng = rng if rng is not None else np.random.RandomState()
    price = round(rng.uniform(OPTIMAL_RENTAL_PRICE * 0.5, OPTIMAL_RENTAL_PRICE * 1.5), 2)

    buy_parts = 0
    if obs['scooters_broken'] > obs['scooter_parts']:
        buy_parts = obs['scooters_broken'] - obs['scooter_parts']

    # Random Marketing
    adverts = 0
    if rng.random() < 0.1:
        adverts = 2

    return DayPlan(
        rental_price=price,
        buy_parts=buy_parts,
        repair_scooters=obs['scooters_broken'],
        advertisements=adverts,
    )


def fixed_price_agent(obs: Dict[str, Any]) -> DayPlan:
    """
    Agent 2: Fixed Price
    - Always charges the optimal price.
    - Repairs every broken scooter, buying parts as needed.
    - Never advertises or grows the fleet.
    """
    broken = obs['scooters_broken']
    return DayPlan(
        rental_price=OPTIMAL_RENTAL_PRICE,
        buy_parts=max(0, broken - obs['scooter_parts']),
        repair_scooters=broken,
    )


def greedy_agent(obs: Dict[str, Any]) -> DayPlan:
    """
    Agent 3: Greedy
    - Charges double the optimal price.
    - Never repairs, never advertises.
    - Lets broken scooters pile up.
    """
    return DayPlan(rental_price=OPTIMAL_RENTAL_PRICE * 2)


class SmartAgent:
    def __init__(self, cash_reserve: float = 50.0):
        self.cash_reserve = cash_reserve

    def act(self, obs: Dict[str, Any]) -> DayPlan:
        # 1. Pricing: discount on poor days to win back demand
        demand = RENTAL_DEMAND_TABLE.get(obs['temperature'], {}).get(obs['weather'], 0.0)
        if demand >= 0.9:
            price = OPTIMAL_RENTAL_PRICE + 2.0
        elif demand >= 0.5:
            price = OPTIMAL_RENTAL_PRICE
        else:
            price = OPTIMAL_RENTAL_PRICE - 5.0

        cash = obs['cash']

        # 2. Repairs come first
        broken = obs['scooters_broken']
        parts_needed = max(0, broken - obs['scooter_parts'])
        cash -= parts_needed * PRICE_OF_PARTS

        # 3. Advertise for tomorrow when it looks rentable
        adverts = 0
        if obs['forecast'] in (WeatherType.SUNNY, WeatherType.CLOUDY):
            adverts = min(obs['scooters_working'] + broken, 3)
            if cash - adverts * PRICE_OF_ADVERTS < self.cash_reserve:
                adverts = 0
        cash -= adverts * PRICE_OF_ADVERTS

        # 4. Grow the fleet with whatever is left over the reserve
        buy = max(0, int((cash - self.cash_reserve) // PRICE_OF_SCOOTERS))

        return DayPlan(
            rental_price=price,
            buy_parts=parts_needed,
            repair_scooters=broken,
            advertisements=adverts,
            buy_scooters=buy,
        )

