# scooter_rentals/savefile.py
import json
import numpy as np
from typing import Optional
from pydantic import BaseModel, Field
from .business import Business
from .weather import Weather
from .models import Season, Temperature, WeatherType


class SaveFile(BaseModel):
    """Flat record of a game in progress. Enums are stored as their lowercase names."""
    # general
    day_num: int = Field(ge=0)
    # business
    name: str
    cash: float = Field(allow_inf_nan=False)
    scooters_working: int = Field(ge=0)
    scooters_broken: int = Field(ge=0)
    scooter_parts: int = Field(ge=0)
    num_advertisements: int = Field(ge=0)
    # weather
    current: str
    forecast: str
    temperature: str
    season: str
    days_of_season: int = Field(ge=0)

    @classmethod
    def from_game(cls, day_num: int, business: Business, weather: Weather) -> 'SaveFile':
        return cls(
            day_num=day_num,
            name=business.name,
            cash=business.cash,
            scooters_working=business.working_scooters,
            scooters_broken=business.broken_scooters,
            scooter_parts=business.scooter_parts,
            num_advertisements=business.advertisements,
            current=weather.current.describe(),
            forecast=weather.forecast.describe(),
            temperature=weather.temperature.describe(),
            season=weather.season.describe(),
            days_of_season=weather.days_of_season,
        )

    def to_business(self, rng: Optional[np.random.RandomState] = None) -> Business:
        return Business(
            self.name,
            cash=self.cash,
            scooters_working=self.scooters_working,
            scooters_broken=self.scooters_broken,
            scooter_parts=self.scooter_parts,
            num_advertisements=self.num_advertisements,
            rng=rng,
        )

    def to_weather(self, rng: Optional[np.random.RandomState] = None) -> Weather:
        return Weather(
            current=WeatherType.from_str(self.current),
            forecast=WeatherType.from_str(self.forecast),
            temperature=Temperature.from_str(self.temperature),
            season=Season.from_str(self.season),
            days_of_season=self.days_of_season,
            rng=rng,
        )


def load_save_file(file_path: str) -> SaveFile:
    """
    Raises OSError if the file can't be read and ValueError if it isn't a
    valid save (bad JSON or a field failing validation).
    """
    with open(file_path, 'r') as f:
        data = json.load(f)
    return SaveFile.model_validate(data)


def write_save_file(save: SaveFile, file_path: str):
    with open(file_path, 'w') as f:
        json.dump(save.model_dump(), f, indent=2)
