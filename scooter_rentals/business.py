# scooter_rentals/business.py
import numpy as np
from typing import List, Optional
from .config import STARTING_CASH, STARTING_SCOOTERS, CHANCE_SCOOTER_BREAKS
from .errors import (
    InsufficientWorkingScooters, InsufficientBrokenScooters,
    InsufficientParts, NotEnoughMoney, InvalidParameter,
)
from .mechanics import combined_modifier, price_modifier, rental_count, count_breakages
from .models import Receipt, Temperature, WeatherType


class Business:
    """
    The scooter shop's books: cash, fleet, spare parts and adverts.

    Every mutator validates first and raises a ManagementError before touching
    any field, so a rejected call leaves the ledger exactly as it was.
    """

    def __init__(self,
                 name: str,
                 cash: float = STARTING_CASH,
                 scooters_working: int = STARTING_SCOOTERS,
                 scooters_broken: int = 0,
                 scooter_parts: int = 0,
                 num_advertisements: int = 0,
                 rng: Optional[np.random.RandomState] = None,
                 break_chance: float = CHANCE_SCOOTER_BREAKS):
        self._name = name
        self._cash = float(cash)
        self._scooters_working = scooters_working
        self._scooters_broken = scooters_broken
        self._scooter_parts = scooter_parts
        self._num_advertisements = num_advertisements

        self.rng = rng if rng is not None else np.random.RandomState()
        self.break_chance = break_chance
        self.log_history: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def cash(self) -> float:
        return self._cash

    @property
    def working_scooters(self) -> int:
        return self._scooters_working

    @property
    def broken_scooters(self) -> int:
        return self._scooters_broken

    @property
    def scooter_parts(self) -> int:
        return self._scooter_parts

    @property
    def advertisements(self) -> int:
        return self._num_advertisements

    @property
    def fleet_size(self) -> int:
        return self._scooters_working + self._scooters_broken

    def pop_logs(self) -> List[str]:
        logs, self.log_history = self.log_history, []
        return logs

    def _check_count(self, num: int):
        if num < 0:
            raise InvalidParameter(f"Can't deal in a negative number of items ({num}).")

    def _check_cost(self, cost_per: float):
        if cost_per < 0 or not np.isfinite(cost_per):
            raise InvalidParameter(f"Cost per item must be a non-negative amount (got ${cost_per}).")

    def _check_affordable(self, cost: float):
        if cost > self._cash:
            raise NotEnoughMoney(f"Need ${cost:.2f} but only have ${self._cash:.2f}.")

    def buy_scooters(self, num: int, cost_per: float):
        self._check_count(num)
        self._check_cost(cost_per)
        cost = num * cost_per
        self._check_affordable(cost)

        self._scooters_working += num
        self._cash -= cost
        self.log_history.append(f"FLEET: Bought {num} scooters for ${cost:.2f}.")

    def sell_working_scooters(self, num: int, cost_per: float):
        self._check_count(num)
        self._check_cost(cost_per)
        if num > self._scooters_working:
            raise InsufficientWorkingScooters(
                f"Can't sell {num} scooters, only {self._scooters_working} are working."
            )

        income = num * cost_per
        self._scooters_working -= num
        self._cash += income
        self.log_history.append(f"FLEET: Sold {num} scooters for ${income:.2f}.")

    def buy_scooter_parts(self, num: int, cost_per: float):
        self._check_count(num)
        self._check_cost(cost_per)
        cost = num * cost_per
        self._check_affordable(cost)

        self._scooter_parts += num
        self._cash -= cost
        self.log_history.append(f"ORDER: Bought {num} parts for ${cost:.2f}.")

    def repair_scooters(self, num: int):
        self._check_count(num)
        if num > self._scooter_parts:
            raise InsufficientParts(f"Repairing {num} scooters needs {num} parts, have {self._scooter_parts}.")
        if num > self._scooters_broken:
            raise InsufficientBrokenScooters(f"Only {self._scooters_broken} scooters are broken.")

        self._scooters_broken -= num
        self._scooters_working += num
        self._scooter_parts -= num
        self.log_history.append(f"MAINT: Repaired {num} scooters.")

    def buy_advertisements(self, num: int, cost_per: float):
        """Replaces any adverts already bought for the day rather than adding to them."""
        self._check_count(num)
        self._check_cost(cost_per)
        cost = num * cost_per
        self._check_affordable(cost)

        self._num_advertisements = num
        self._cash -= cost
        self.log_history.append(f"MARKETING: {num} adverts booked for ${cost:.2f}.")

    def advance_day(self):
        self._num_advertisements = 0

    def rent_scooters(self,
                      cost_per: float,
                      temperature: Temperature,
                      weather: WeatherType) -> Receipt:
        """
        Rent out the working fleet for one day at `cost_per` each.

        Temperature and weather decide what share of the fleet is wanted,
        nudged by adverts and by how far the price sits from optimal.
        Raises InvalidParameter on a negative or non-finite price and
        UnaccountedConditionsError on a pairing the demand table lacks.
        """
        if cost_per < 0 or not np.isfinite(cost_per):
            raise InvalidParameter(f"Rental price must be a non-negative amount (got ${cost_per}).")
        num = self._scooters_working

        # 1. Demand
        combined_mod = combined_modifier(
            temperature, weather, cost_per,
            self._num_advertisements, num, self.rng
        )
        price_mod = price_modifier(cost_per)
        rented = rental_count(num, combined_mod, price_mod)

        # 2. Takings
        profit = rented * cost_per
        self._cash += profit

        # 3. Wear and tear
        broken = count_breakages(rented, self.rng, self.break_chance)
        self._scooters_working -= broken
        self._scooters_broken += broken

        self.log_history.append(
            f"RENTAL: {rented} of {num} scooters rented at ${cost_per:.2f} for ${profit:.2f}."
        )
        if broken:
            self.log_history.append(f"CRITICAL: {broken} scooters came back broken.")

        return Receipt(profit=profit, broken_scooters=broken, rented_scooters=rented)
