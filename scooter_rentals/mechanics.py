# scooter_rentals/mechanics.py
import numpy as np
from typing import Dict, List
from .models import Temperature, WeatherType, Season
from .errors import UnaccountedConditionsError
from .config import (
    ADVERT_EFFECT, CHANCE_SCOOTER_BREAKS, DEMAND_NOISE,
    OPTIMAL_RENTAL_PRICE, PRICE_EFFECT_SCALE,
)

# Share of demand left after the weather. Snow has no entry for any temperature.
RENTAL_DEMAND_TABLE: Dict[Temperature, Dict[WeatherType, float]] = {
    Temperature.SCORCHING: {
        WeatherType.SUNNY: 0.05,
        WeatherType.CLOUDY: 0.25,
        WeatherType.RAINY: 0.10,
        WeatherType.STORMY: 0.00,
    },
    Temperature.HOT: {
        WeatherType.SUNNY: 0.50,
        WeatherType.CLOUDY: 0.60,
        WeatherType.RAINY: 0.10,
        WeatherType.STORMY: 0.05,
    },
    Temperature.WARM: {
        WeatherType.SUNNY: 1.00,
        WeatherType.CLOUDY: 0.90,
        WeatherType.RAINY: 0.20,
        WeatherType.STORMY: 0.05,
    },
    Temperature.COOL: {
        WeatherType.SUNNY: 1.00,
        WeatherType.CLOUDY: 0.90,
        WeatherType.RAINY: 0.20,
        WeatherType.STORMY: 0.05,
    },
    Temperature.COLD: {
        WeatherType.SUNNY: 0.60,
        WeatherType.CLOUDY: 0.50,
        WeatherType.RAINY: 0.10,
        WeatherType.STORMY: 0.05,
    },
    Temperature.FREEZING: {
        WeatherType.SUNNY: 0.25,
        WeatherType.CLOUDY: 0.10,
        WeatherType.RAINY: 0.05,
        WeatherType.STORMY: 0.00,
    },
}

SEASON_TEMPERATURES: Dict[Season, List[Temperature]] = {
    Season.SPRING: [Temperature.COOL, Temperature.WARM, Temperature.HOT],
    Season.SUMMER: [Temperature.WARM, Temperature.HOT, Temperature.SCORCHING],
    Season.FALL: [Temperature.WARM, Temperature.COOL, Temperature.COLD],
    Season.WINTER: [Temperature.COOL, Temperature.COLD, Temperature.FREEZING],
}


def weather_multiplier(temperature: Temperature, weather: WeatherType) -> float:
    try:
        return RENTAL_DEMAND_TABLE[temperature][weather]
    except KeyError:
        raise UnaccountedConditionsError(
            f"The temp ({temperature.describe()}) and weather ({weather.describe()}) "
            f"was not accounted for."
        ) from None


def combined_modifier(temperature: Temperature,
                      weather: WeatherType,
                      cost_per: float,
                      num_advertisements: int,
                      scooters_working: int,
                      rng: np.random.RandomState) -> float:
    """
    Fraction of the working fleet that customers want today, in [0, 1].
    Adverts stop helping once there is one per scooter.
    """
    advert_effect = ADVERT_EFFECT * min(num_advertisements, scooters_working)
    cost_effect = float(np.clip((OPTIMAL_RENTAL_PRICE - cost_per) / PRICE_EFFECT_SCALE, -1.0, 1.0))

    val = (1.0 + advert_effect + cost_effect) * weather_multiplier(temperature, weather)

    # Random flux
    noise = rng.uniform(-DEMAND_NOISE, DEMAND_NOISE)

    return float(np.clip(val + noise, 0.0, 1.0))


def price_modifier(cost_per: float) -> float:
    """Unbounded as the price approaches zero. A free rental is infinite demand."""
    if cost_per == 0:
        return np.inf
    return OPTIMAL_RENTAL_PRICE / cost_per


def rental_count(scooters_working: int, combined_mod: float, price_mod: float) -> int:
    demand = scooters_working * combined_mod * price_mod
    # 0 * inf: nobody wants a free scooter on a day nobody rents
    if np.isnan(demand):
        return 0
    return int(min(max(np.floor(demand), 0), scooters_working))


def count_breakages(rented: int,
                    rng: np.random.RandomState,
                    chance: float = CHANCE_SCOOTER_BREAKS) -> int:
    """Each rented scooter rolls for breakage on its own."""
    broken = 0
    for _ in range(rented):
        if rng.random() < chance:
            broken += 1
    return broken


def choose_temperature(season: Season, rng: np.random.RandomState) -> Temperature:
    candidates = SEASON_TEMPERATURES[season]
    return candidates[rng.randint(0, len(candidates))]


def choose_weather(season: Season, rng: np.random.RandomState) -> WeatherType:
    rnd = rng.random()
    if rnd < 0.3:
        return WeatherType.SUNNY
    elif rnd < 0.6:
        return WeatherType.CLOUDY
    elif rnd < 0.8:
        # Rain falls as snow in winter
        if season == Season.WINTER:
            return WeatherType.SNOWY
        return WeatherType.RAINY
    else:
        return WeatherType.STORMY
