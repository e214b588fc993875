import numpy as np
import pytest
from conftest import ScriptedRng
from scooter_rentals.errors import UnaccountedConditionsError
from scooter_rentals.mechanics import (
    RENTAL_DEMAND_TABLE, SEASON_TEMPERATURES, choose_temperature, choose_weather,
    combined_modifier, count_breakages, price_modifier, rental_count, weather_multiplier,
)
from scooter_rentals.models import Season, Temperature, WeatherType

DEFINED_PAIRS = [(t, w) for t, row in RENTAL_DEMAND_TABLE.items() for w in row]


def test_table_covers_everything_but_snow():
    assert len(DEFINED_PAIRS) == 24
    for temperature in Temperature:
        assert set(RENTAL_DEMAND_TABLE[temperature]) == set(WeatherType) - {WeatherType.SNOWY}


def test_table_values_are_fractions():
    for t, w in DEFINED_PAIRS:
        assert 0.0 <= RENTAL_DEMAND_TABLE[t][w] <= 1.0


def test_snow_has_no_multiplier():
    with pytest.raises(UnaccountedConditionsError, match="snowy"):
        weather_multiplier(Temperature.COLD, WeatherType.SNOWY)


@pytest.mark.parametrize("temperature,weather", DEFINED_PAIRS)
@pytest.mark.parametrize("noise", [-0.1, -0.05, 0.0, 0.0999])
def test_combined_modifier_stays_in_bounds(temperature, weather, noise):
    for cost_per in [0.0, 0.01, 5.0, 15.0, 25.0, 1000.0]:
        for ads in [0, 3, 10, 500]:
            rng = ScriptedRng(uniforms=[noise])
            val = combined_modifier(temperature, weather, cost_per, ads, 10, rng)
            assert 0.0 <= val <= 1.0


def test_adverts_saturate_at_fleet_size():
    few = combined_modifier(Temperature.COLD, WeatherType.RAINY, 15.0, 4, 4, ScriptedRng())
    many = combined_modifier(Temperature.COLD, WeatherType.RAINY, 15.0, 400, 4, ScriptedRng())
    # (1 + 0.4) * 0.1
    assert few == pytest.approx(0.14)
    assert many == few


def test_price_effect_is_capped():
    cheap = combined_modifier(Temperature.FREEZING, WeatherType.RAINY, 0.0, 0, 10, ScriptedRng())
    very_cheap = combined_modifier(Temperature.FREEZING, WeatherType.RAINY, -100.0, 0, 10, ScriptedRng())
    assert cheap == pytest.approx(0.10)
    assert very_cheap == cheap


def test_noise_is_added_last():
    val = combined_modifier(Temperature.HOT, WeatherType.RAINY, 15.0, 0, 10, ScriptedRng(uniforms=[0.07]))
    assert val == pytest.approx(0.17)


def test_price_modifier():
    assert price_modifier(15.0) == 1.0
    assert price_modifier(30.0) == 0.5
    assert price_modifier(0.001) == pytest.approx(15000.0)
    assert price_modifier(0.0) == np.inf


@pytest.mark.parametrize("working,combined,price_mod,expected", [
    (10, 1.0, 1.0, 10),
    (10, 0.5, 0.75, 3),
    (10, 0.99, 1.0, 9),
    (10, 0.5, 1500.0, 10),
    (10, 0.3, np.inf, 10),
    (10, 0.0, np.inf, 0),
    (0, 1.0, np.inf, 0),
    (0, 1.0, 1.0, 0),
])
def test_rental_count(working, combined, price_mod, expected):
    assert rental_count(working, combined, price_mod) == expected


def test_each_rental_rolls_for_breakage():
    rng = ScriptedRng(randoms=[0.049, 0.05, 0.0, 0.9])
    assert count_breakages(4, rng) == 2
    assert rng.randoms == []


def test_breakage_rate_is_about_right():
    rng = np.random.RandomState(3)
    broken = count_breakages(20_000, rng)
    assert 800 < broken < 1200


@pytest.mark.parametrize("season", list(Season))
def test_temperature_choices(season):
    picks = [choose_temperature(season, ScriptedRng(randints=[i])) for i in range(3)]
    assert picks == SEASON_TEMPERATURES[season]


def test_season_temperatures():
    assert SEASON_TEMPERATURES[Season.SPRING] == [Temperature.COOL, Temperature.WARM, Temperature.HOT]
    assert SEASON_TEMPERATURES[Season.SUMMER] == [Temperature.WARM, Temperature.HOT, Temperature.SCORCHING]
    assert SEASON_TEMPERATURES[Season.FALL] == [Temperature.WARM, Temperature.COOL, Temperature.COLD]
    assert SEASON_TEMPERATURES[Season.WINTER] == [Temperature.COOL, Temperature.COLD, Temperature.FREEZING]


@pytest.mark.parametrize("rnd,expected", [
    (0.0, WeatherType.SUNNY),
    (0.29, WeatherType.SUNNY),
    (0.3, WeatherType.CLOUDY),
    (0.59, WeatherType.CLOUDY),
    (0.6, WeatherType.RAINY),
    (0.79, WeatherType.RAINY),
    (0.8, WeatherType.STORMY),
    (0.999, WeatherType.STORMY),
])
def test_weather_bands(rnd, expected):
    assert choose_weather(Season.SUMMER, ScriptedRng(randoms=[rnd])) == expected


def test_it_snows_instead_of_raining_in_winter():
    assert choose_weather(Season.WINTER, ScriptedRng(randoms=[0.7])) == WeatherType.SNOWY
    assert choose_weather(Season.WINTER, ScriptedRng(randoms=[0.1])) == WeatherType.SUNNY
    for season in (Season.SPRING, Season.SUMMER, Season.FALL):
        assert choose_weather(season, ScriptedRng(randoms=[0.7])) == WeatherType.RAINY
