# scooter_rentals/engine.py
import numpy as np
from typing import Dict, Any, List, Optional
from .business import Business
from .weather import Weather
from .models import DayPlan, ForecastTime, Receipt, WeatherType
from .savefile import SaveFile
from .errors import ManagementError
from .config import *
from .scorer import calculate_net_business_value


def multiples_within(val_within: float, val_to_fit: float) -> int:
    """How many whole `val_to_fit` fit into `val_within`."""
    if val_to_fit <= 0:
        return 0
    return max(0, int(val_within // val_to_fit))


class ScooterGame:
    """
    One playthrough: the ledger, the weather and the day counter.

    A day runs rent() -> apply_plan() -> next_day(). The ledger's adverts
    are spent by the day's rentals, so adverts bought while managing the
    shop count toward the next rental. That reset happens straight after
    renting rather than at the start of the next turn.
    """

    def __init__(self,
                 business: Business,
                 weather: Weather,
                 day_num: int = 1):
        self.business = business
        self.weather = weather
        self.day_num = day_num
        self.daily_logs: List[str] = []

    @classmethod
    def new(cls, name: str, seed: Optional[int] = None) -> 'ScooterGame':
        rng = np.random.RandomState(seed)
        return cls(Business(name, rng=rng), Weather(rng=rng), day_num=1)

    @classmethod
    def from_save_file(cls, save: SaveFile, seed: Optional[int] = None) -> 'ScooterGame':
        rng = np.random.RandomState(seed)
        return cls(save.to_business(rng), save.to_weather(rng), day_num=save.day_num)

    def to_save_file(self) -> SaveFile:
        return SaveFile.from_game(self.day_num, self.business, self.weather)

    def rent(self, cost_per: float) -> Receipt:
        """Rent at today's weather. Snow shuts the shop for the day."""
        if self.weather.current == WeatherType.SNOWY:
            self.daily_logs.append("CRITICAL: Snow day. The roads are closed and no scooters went out.")
            receipt = Receipt(profit=0.0, broken_scooters=0, rented_scooters=0)
        else:
            receipt = self.business.rent_scooters(cost_per, self.weather.temperature, self.weather.current)

        # Adverts only last for one day of rentals
        self.business.advance_day()
        self._collect_business_logs()
        return receipt

    def apply_plan(self, plan: DayPlan) -> List[str]:
        """
        Management phase. Quantities are trimmed to what the shop can afford
        or has on hand; anything the ledger still rejects is declined and logged.
        """
        b = self.business
        # (label, requested, most allowed right now, ledger call)
        ops = [
            ('sell scooters', plan.sell_scooters,
             lambda: b.working_scooters,
             lambda n: b.sell_working_scooters(n, RESALE_PRICE)),
            ('buy scooters', plan.buy_scooters,
             lambda: multiples_within(b.cash, PRICE_OF_SCOOTERS),
             lambda n: b.buy_scooters(n, PRICE_OF_SCOOTERS)),
            ('buy parts', plan.buy_parts,
             lambda: multiples_within(b.cash, PRICE_OF_PARTS),
             lambda n: b.buy_scooter_parts(n, PRICE_OF_PARTS)),
            ('repair scooters', plan.repair_scooters,
             lambda: min(b.broken_scooters, b.scooter_parts),
             b.repair_scooters),
            ('buy adverts', plan.advertisements,
             lambda: multiples_within(b.cash, PRICE_OF_ADVERTS),
             lambda n: b.buy_advertisements(n, PRICE_OF_ADVERTS)),
        ]

        start = len(self.daily_logs)
        for label, requested, allowed, op in ops:
            if requested == 0:
                continue
            num = min(requested, allowed())
            if num == 0:
                self.daily_logs.append(f"DECLINED: Could not {label}. None affordable or available.")
                continue
            try:
                op(num)
            except ManagementError as e:
                self.daily_logs.append(f"DECLINED: Could not {label}. {e}")
            self._collect_business_logs()
        return self.daily_logs[start:]

    def next_day(self):
        season = self.weather.season
        self.weather.advance_day()
        self.day_num += 1
        self.daily_logs = []

        if self.weather.season != season:
            self.daily_logs.append(f"NEWS: {self.weather.season.describe().capitalize()} has arrived.")

    def step(self, plan: DayPlan) -> Dict[str, Any]:
        """Play a whole day from a plan and report the outcome."""
        cash_before = self.business.cash
        available = self.business.working_scooters

        receipt = self.rent(plan.rental_price)
        self.apply_plan(plan)
        day_logs = list(self.daily_logs)
        self.next_day()

        obs = self.observe()
        obs['yesterday'] = {
            'available': available,
            'rented': receipt.rented_scooters,
            'broken': receipt.broken_scooters,
            'revenue': receipt.profit,
            'logs': day_logs,
        }
        obs['_internal_metrics'] = {
            'daily_profit': round(self.business.cash - cash_before, 2),
            'nbv': calculate_net_business_value(self.business),
        }
        return obs

    def observe(self) -> Dict[str, Any]:
        b, w = self.business, self.weather
        return {
            'day': self.day_num,
            'name': b.name,
            'cash': b.cash,
            'scooters_working': b.working_scooters,
            'scooters_broken': b.broken_scooters,
            'scooter_parts': b.scooter_parts,
            'advertisements': b.advertisements,
            'temperature': w.temperature,
            'weather': w.current,
            'forecast': w.forecast,
            'season': w.season,
            'today': w.describe(ForecastTime.TODAY),
            'tomorrow': w.describe(ForecastTime.TOMORROW),
            'daily_logs': list(self.daily_logs),
        }

    def pop_logs(self) -> List[str]:
        """Drain today's logs, including anything the ledger logged directly."""
        self._collect_business_logs()
        logs, self.daily_logs = self.daily_logs, []
        return logs

    def _collect_business_logs(self):
        self.daily_logs.extend(self.business.pop_logs())
