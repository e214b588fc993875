import numpy as np
import pytest
from conftest import ScriptedRng
from scooter_rentals.mechanics import SEASON_TEMPERATURES
from scooter_rentals.models import ForecastTime, Season, Temperature, WeatherType
from scooter_rentals.weather import Weather


def test_default_weather():
    w = Weather(rng=ScriptedRng())
    assert w.current == WeatherType.SUNNY
    assert w.forecast == WeatherType.SUNNY
    assert w.temperature == Temperature.WARM
    assert w.season == Season.SPRING
    assert w.days_of_season == 0


def test_describe_today():
    text = Weather(rng=ScriptedRng()).describe(ForecastTime.TODAY)
    assert text == "It is a warm sunny spring day, today."
    for word in ("warm", "sunny", "spring", "today"):
        assert word in text


def test_describe_tomorrow_uses_the_forecast():
    w = Weather(current=WeatherType.SUNNY, forecast=WeatherType.STORMY,
                temperature=Temperature.COLD, season=Season.FALL, rng=ScriptedRng())
    assert w.describe(ForecastTime.TOMORROW) == "It might be a cold stormy fall day, tomorrow."
    assert w.describe(ForecastTime.TODAY) == "It is a cold sunny fall day, today."


def test_accurate_forecast_comes_true():
    # accuracy roll, then tomorrow's forecast
    rng = ScriptedRng(randoms=[0.5, 0.65], randints=[0])
    w = Weather(forecast=WeatherType.CLOUDY, rng=rng)
    w.advance_day()
    assert w.current == WeatherType.CLOUDY
    assert w.temperature == Temperature.COOL
    assert w.forecast == WeatherType.RAINY
    assert w.days_of_season == 1


def test_accuracy_roll_on_the_boundary_still_comes_true():
    rng = ScriptedRng(randoms=[0.7, 0.1], randints=[1])
    w = Weather(forecast=WeatherType.CLOUDY, rng=rng)
    w.advance_day()
    assert w.current == WeatherType.CLOUDY
    assert w.temperature == Temperature.WARM


def test_bad_forecast_is_replaced_before_it_comes_true():
    # accuracy roll fails, redraw today as stormy, then tomorrow as sunny
    rng = ScriptedRng(randoms=[0.9, 0.85, 0.1], randints=[2])
    w = Weather(forecast=WeatherType.CLOUDY, rng=rng)
    w.advance_day()
    assert w.current == WeatherType.STORMY
    assert w.temperature == Temperature.HOT
    assert w.forecast == WeatherType.SUNNY
    assert rng.randoms == []


def test_forecast_is_always_redrawn():
    rng = ScriptedRng(randoms=[0.0, 0.9], randints=[0])
    w = Weather(forecast=WeatherType.SUNNY, rng=rng)
    w.advance_day()
    assert w.current == WeatherType.SUNNY
    assert w.forecast == WeatherType.STORMY


def test_season_holds_until_the_last_day():
    w = Weather(season=Season.SPRING, days_of_season=5, rng=ScriptedRng(randoms=[0.0]))
    w.advance_day()
    assert w.season == Season.SPRING
    assert w.days_of_season == 6


@pytest.mark.parametrize("season,following", [
    (Season.SPRING, Season.SUMMER),
    (Season.SUMMER, Season.FALL),
    (Season.FALL, Season.WINTER),
    (Season.WINTER, Season.SPRING),
])
def test_season_changes_after_the_last_day(season, following):
    w = Weather(season=season, days_of_season=6, rng=ScriptedRng(randoms=[0.0]))
    w.advance_day()
    assert w.season == following
    assert w.days_of_season == 1


def test_temperature_is_drawn_from_the_current_season():
    rng = ScriptedRng(randoms=[0.0], randints=[2])
    w = Weather(season=Season.WINTER, days_of_season=2, rng=rng)
    w.advance_day()
    assert w.temperature == Temperature.FREEZING


def test_custom_season_length():
    w = Weather(days_per_season=2, rng=ScriptedRng(randoms=[0.0]))
    seasons = []
    for _ in range(9):
        w.advance_day()
        seasons.append((w.season, w.days_of_season))
    assert seasons == [
        (Season.SPRING, 1), (Season.SPRING, 2),
        (Season.SUMMER, 1), (Season.SUMMER, 2),
        (Season.FALL, 1), (Season.FALL, 2),
        (Season.WINTER, 1), (Season.WINTER, 2),
        (Season.SPRING, 1),
    ]


def test_season_length_must_be_positive():
    with pytest.raises(ValueError):
        Weather(days_per_season=0)


def test_a_year_of_real_weather():
    w = Weather(days_of_season=1, rng=np.random.RandomState(11))
    seen = set()
    for _ in range(4 * 6 * 5):
        season = w.season
        w.advance_day()
        assert 1 <= w.days_of_season <= 6
        if w.days_of_season == 1:
            assert w.season == season.next()
        else:
            assert w.season == season
        assert w.temperature in SEASON_TEMPERATURES[season]
        if w.forecast == WeatherType.SNOWY:
            assert season == Season.WINTER
        seen.add(w.season)
    assert seen == set(Season)
