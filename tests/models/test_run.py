import pytest

from runulator.errors import InvalidArgumentError
from runulator.factory import (
    create_with_distance_and_duration,
    create_with_distance_and_speed,
    create_with_duration_and_speed,
)
from runulator.models import HALF_MARATHON, MARATHON, ParameterType, Run, Unit
from tests._factories import RunFactory


def test_getters_in_kilometers(run_factory: RunFactory):
    run = run_factory.make()
    assert run.get_distance() == "10.0"
    assert run.get_duration() == "50:00"
    assert run.get_pace() == "5:00"
    assert run.get_speed() == "12.0"
    assert run.get_distance_as_number(Unit.KM) == 10.0
    assert run.get_duration_as_number() == 3000
    assert run.get_pace_as_number(Unit.MIN_KM) == 300
    assert run.get_speed_as_number(Unit.KM_H) == 12.0


def test_getters_in_miles():
    run = create_with_duration_and_speed(7200, 11)
    assert run.get_distance(Unit.KM) == "22.0"
    assert run.get_distance(Unit.MILE) == "13.6702"
    assert run.get_pace(Unit.MIN_KM) == "5:27"
    assert run.get_pace(Unit.MIN_MILE) == "8:46"
    assert run.get_speed(Unit.MPH) == "6.84"


@pytest.mark.parametrize(
    "distance,expected",
    [
        (10, "10.0"),
        (10.0, "10.0"),
        (10.75, "10.75"),
        (21.0975, "21.0975"),
        (34.34344334, "34.3434"),
    ],
)
def test_get_distance_keeps_at_most_four_decimals(distance: float, expected: str):
    assert create_with_distance_and_speed(distance, 10).get_distance() == expected


@pytest.mark.parametrize(
    "speed,expected", [(10, "10.0"), (10.5, "10.5"), (10.91, "10.91"), (9.999, "10.00")]
)
def test_get_speed_uses_one_or_two_decimals(speed: float, expected: str):
    assert create_with_distance_and_speed(10, speed).get_speed() == expected


def test_run_is_immutable(run_factory: RunFactory):
    run = run_factory.make()
    with pytest.raises(Exception):
        run.distance = 5.0  # type: ignore[misc]


def test_equality_uses_distance_and_duration_only():
    by_duration = create_with_distance_and_duration(10, 3300)
    by_speed = create_with_distance_and_speed(10, 10.91)
    assert by_duration.duration == by_speed.duration
    assert by_duration.speed != by_speed.speed
    assert by_duration == by_speed
    assert hash(by_duration) == hash(by_speed)
    assert len({by_duration, by_speed}) == 1


def test_runs_with_different_durations_differ():
    assert create_with_distance_and_duration(10, 3000) != create_with_distance_and_duration(
        10, 3001
    )
    assert create_with_distance_and_duration(10, 3000) != "10.0 km"


def test_run_remembers_its_parameters(run_factory: RunFactory):
    assert run_factory.make().parameters == (
        ParameterType.DISTANCE,
        ParameterType.DURATION,
    )
    assert run_factory.make({"duration": 7200, "speed": 11}).parameters == (
        ParameterType.DURATION,
        ParameterType.SPEED,
    )


def test_str(run_factory: RunFactory):
    assert str(run_factory.make()) == "10.0KM in 50:00\n(5:00min/km; 12.0km/h)"


def test_calculate_calories(run_factory: RunFactory):
    assert run_factory.make().calculate_calories(80) == "~720"
    assert run_factory.make({"distance": 5.5}).calculate_calories(75) == "~371"


@pytest.mark.parametrize(
    "speed,height,expected",
    [(12, 170, 175), (12, 180, 170), (10, 175, 168), (6, 170, 160)],
)
def test_calculate_cadence_count(speed: float, height: float, expected: int):
    run = create_with_distance_and_speed(10, speed)
    assert run.calculate_cadence_count(height) == expected


@pytest.mark.parametrize("height", [-1, 0, 100, 272, 300])
def test_calculate_cadence_count_rejects_unrealistic_heights(
    run_factory: RunFactory, height: float
):
    with pytest.raises(InvalidArgumentError):
        run_factory.make().calculate_cadence_count(height)


def test_calculate_cadence_count_accepts_heights_inside_bounds(
    run_factory: RunFactory,
):
    run = run_factory.make()
    assert run.calculate_cadence_count(100.5) > 0
    assert run.calculate_cadence_count(271.5) > 0


def test_forecast_for_same_distance_is_same_run(run_factory: RunFactory):
    run = run_factory.make()
    assert run.get_forecast_run(10) == run


def test_forecast_uses_riegel_formula(run_factory: RunFactory):
    run = run_factory.make()
    forecast = run.get_forecast_run(HALF_MARATHON, 1.06)
    expected = round(3000 * (HALF_MARATHON / 10) ** 1.06)
    assert forecast.distance == HALF_MARATHON
    assert forecast.duration == expected
    assert forecast.parameters == (ParameterType.DISTANCE, ParameterType.DURATION)


def test_forecast_default_coefficient(run_factory: RunFactory):
    forecast = run_factory.make().get_forecast_run(MARATHON)
    assert forecast.duration == round(3000 * (MARATHON / 10) ** 1.0759)
    assert forecast.get_duration().startswith("3:55:")


@pytest.mark.parametrize("distance", [0, -5])
def test_forecast_rejects_non_positive_distance(run_factory: RunFactory, distance):
    with pytest.raises(InvalidArgumentError):
        run_factory.make().get_forecast_run(distance)


def test_direct_construction_validates_positivity():
    with pytest.raises(ValueError):
        Run(distance=-1, duration=3000, pace=300, speed=12)
