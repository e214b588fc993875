# scooter_rentals/models.py
from enum import Enum
from pydantic import BaseModel, Field
from .config import OPTIMAL_RENTAL_PRICE


class WeatherType(str, Enum):
    SUNNY = 'sunny'
    CLOUDY = 'cloudy'
    RAINY = 'rainy'
    STORMY = 'stormy'
    SNOWY = 'snowy'

    def describe(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, desc: str) -> 'WeatherType':
        """Unknown strings decode to SUNNY."""
        try:
            return cls(desc)
        except ValueError:
            return cls.SUNNY


class Temperature(str, Enum):
    # Declared hottest to coldest
    SCORCHING = 'scorching'
    HOT = 'hot'
    WARM = 'warm'
    COOL = 'cool'
    COLD = 'cold'
    FREEZING = 'freezing'

    def describe(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, desc: str) -> 'Temperature':
        """Unknown strings decode to WARM, the start-of-game temperature."""
        try:
            return cls(desc)
        except ValueError:
            return cls.WARM


class Season(str, Enum):
    SPRING = 'spring'
    SUMMER = 'summer'
    FALL = 'fall'
    WINTER = 'winter'

    def describe(self) -> str:
        return self.value

    def next(self) -> 'Season':
        cycle = list(Season)
        return cycle[(cycle.index(self) + 1) % len(cycle)]

    @classmethod
    def from_str(cls, desc: str) -> 'Season':
        """Unknown strings decode to SPRING."""
        try:
            return cls(desc)
        except ValueError:
            return cls.SPRING


class ForecastTime(str, Enum):
    TODAY = 'today'
    TOMORROW = 'tomorrow'

    def describe(self) -> str:
        return self.value


class Receipt(BaseModel):
    """Outcome of one day's rentals."""
    profit: float
    broken_scooters: int
    rented_scooters: int = 0


class DayPlan(BaseModel):
    rental_price: float = OPTIMAL_RENTAL_PRICE
    sell_scooters: int = 0
    buy_scooters: int = 0
    buy_parts: int = 0
    repair_scooters: int = 0
    advertisements: int = Field(default=0, description="Adverts for the next rental day")
