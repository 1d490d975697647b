import logging

from runulator.factory import create_with_distance_and_duration
from runulator.metrics import STANDARD_DISTANCES, forecast_distances, forecast_table
from runulator.models import HALF_MARATHON, MARATHON
from tests._factories import RunFactory


def test_forecast_distances_include_standard_races(run_factory: RunFactory):
    assert forecast_distances(run_factory.make()) == [5.0, 10.0, HALF_MARATHON, MARATHON]


def test_forecast_distances_add_own_and_favorite_distances(run_factory: RunFactory):
    run = run_factory.make({"distance": 7.5})
    favorites = [run_factory.make({"distance": 15}), run_factory.make({"distance": 5})]
    assert forecast_distances(run, favorites, extra=[3]) == [
        3,
        5.0,
        7.5,
        10.0,
        15,
        HALF_MARATHON,
        MARATHON,
    ]


def test_forecast_table(run_factory: RunFactory):
    run = run_factory.make()
    table = forecast_table(run)
    assert [forecast.distance for forecast in table] == list(STANDARD_DISTANCES)
    assert table[1] == run
    durations = [forecast.duration for forecast in table]
    assert durations == sorted(durations)
    # Longer races are run slower.
    assert table[0].pace < table[1].pace < table[2].pace < table[3].pace


def test_forecast_table_without_fatigue_keeps_the_pace(run_factory: RunFactory):
    table = forecast_table(run_factory.make(), fatigue_coefficient=1.0)
    assert {forecast.pace for forecast in table} == {300}


def test_forecast_table_skips_distances_too_short_to_forecast(
    run_factory: RunFactory, caplog
):
    # 50:00 for 10 km forecasts about 0.15 s for 1 m, which rounds to 0.
    tiny = create_with_distance_and_duration(0.001, 1)
    with caplog.at_level(logging.WARNING):
        table = forecast_table(run_factory.make(), favorites=[tiny])
    assert [forecast.distance for forecast in table] == list(STANDARD_DISTANCES)
    assert "0.001 km" in caplog.text
