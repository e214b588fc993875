# scooter_rentals/weather.py
import numpy as np
from typing import Optional
from .config import DAYS_PER_SEASON, FORECAST_ACCURACY
from .mechanics import choose_temperature, choose_weather
from .models import ForecastTime, Season, Temperature, WeatherType


class Weather:
    def __init__(self,
                 current: WeatherType = WeatherType.SUNNY,
                 forecast: WeatherType = WeatherType.SUNNY,
                 temperature: Temperature = Temperature.WARM,
                 season: Season = Season.SPRING,
                 days_of_season: int = 0,
                 rng: Optional[np.random.RandomState] = None,
                 days_per_season: int = DAYS_PER_SEASON,
                 forecast_accuracy: float = FORECAST_ACCURACY):
        if days_per_season <= 0:
            raise ValueError("days_per_season must be positive")

        self._current = current
        self._forecast = forecast
        self._temperature = temperature
        self._season = season
        self._days_of_season = days_of_season

        self.rng = rng if rng is not None else np.random.RandomState()
        self.days_per_season = days_per_season
        self.forecast_accuracy = forecast_accuracy

    @property
    def current(self) -> WeatherType:
        return self._current

    @property
    def forecast(self) -> WeatherType:
        return self._forecast

    @property
    def temperature(self) -> Temperature:
        return self._temperature

    @property
    def season(self) -> Season:
        return self._season

    @property
    def days_of_season(self) -> int:
        return self._days_of_season

    def advance_day(self):
        """
        Roll the weather over to the next day.

        Yesterday's forecast comes true unless the accuracy roll fails, in
        which case a fresh draw replaces it first. Tomorrow's forecast is
        always redrawn.
        """
        # Today
        if self.rng.random() > self.forecast_accuracy:
            self._new_forecast()
        self._current = self._forecast
        self._temperature = choose_temperature(self._season, self.rng)

        # Tomorrow
        self._new_forecast()

        # Days Tracking
        self._days_of_season += 1
        if self._days_of_season > self.days_per_season:
            self._days_of_season = 1
            self._season = self._season.next()

    def describe(self, forecast_time: ForecastTime) -> str:
        if forecast_time == ForecastTime.TODAY:
            verb, weather = "is", self._current
        else:
            verb, weather = "might be", self._forecast
        return (
            f"It {verb} a {self._temperature.describe()} {weather.describe()} "
            f"{self._season.describe()} day, {forecast_time.describe()}."
        )

    def _new_forecast(self):
        self._forecast = choose_weather(self._season, self.rng)
