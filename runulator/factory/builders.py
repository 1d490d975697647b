"""Build complete runs from any two of distance, duration, pace and speed."""

import logging
from typing import Callable

from runulator.errors import InvalidArgumentError, UnsupportedCombinationError
from runulator.models import ParameterType, Run
from runulator.utils.numbers import round_half_up
from runulator.utils.time_codec import HOUR

logger = logging.getLogger(__name__)

DISTANCE = ParameterType.DISTANCE
DURATION = ParameterType.DURATION
PACE = ParameterType.PACE
SPEED = ParameterType.SPEED


def _require_positive(first: float, second: float) -> None:
    if first <= 0 or second <= 0:
        raise InvalidArgumentError("values must be greater than 0")


def _seconds(value: float) -> int:
    """Durations and paces are whole seconds, and must not round down to 0."""
    seconds = value if isinstance(value, int) else round_half_up(value)
    if seconds <= 0:
        raise InvalidArgumentError("values are too small to calculate a run")
    return seconds


def _build(
    distance: float,
    duration: int,
    pace: int,
    speed: float,
    parameters: tuple[ParameterType, ParameterType],
) -> Run:
    # Rounding can push a derived value of a tiny run down to 0.
    if duration <= 0 or pace <= 0:
        raise InvalidArgumentError("values are too small to calculate a run")
    run = Run(
        distance=distance,
        duration=duration,
        pace=pace,
        speed=speed,
        parameters=parameters,
    )
    logger.debug(f"Built run from {parameters[0].key} and {parameters[1].key}: {run!r}")
    return run


def create_with_distance_and_duration(distance: float, duration: int) -> Run:
    """
    Create a run from the distance in km and the duration in seconds.

    Raises:
        InvalidArgumentError: If a value is not greater than 0.
    """
    _require_positive(distance, duration)
    duration = _seconds(duration)
    pace = round_half_up(duration / distance)
    speed = distance * HOUR / duration
    return _build(distance, duration, pace, speed, (DISTANCE, DURATION))


def create_with_distance_and_pace(distance: float, pace: int) -> Run:
    """
    Create a run from the distance in km and the pace in seconds per km.

    Raises:
        InvalidArgumentError: If a value is not greater than 0.
    """
    _require_positive(distance, pace)
    pace = _seconds(pace)
    duration = round_half_up(distance * pace)
    speed = HOUR / pace
    return _build(distance, duration, pace, speed, (DISTANCE, PACE))


def create_with_distance_and_speed(distance: float, speed: float) -> Run:
    """
    Create a run from the distance in km and the speed in km/h.

    Raises:
        InvalidArgumentError: If a value is not greater than 0.
    """
    _require_positive(distance, speed)
    speed = float(speed)
    duration = round_half_up(distance / speed * HOUR)
    pace = round_half_up(HOUR / speed)
    return _build(distance, duration, pace, speed, (DISTANCE, SPEED))


def create_with_duration_and_pace(duration: int, pace: int) -> Run:
    """
    Create a run from the duration in seconds and the pace in seconds per km.

    Raises:
        InvalidArgumentError: If a value is not greater than 0.
    """
    _require_positive(duration, pace)
    duration = _seconds(duration)
    pace = _seconds(pace)
    distance = duration / pace
    speed = HOUR / pace
    return _build(distance, duration, pace, speed, (DURATION, PACE))


def create_with_duration_and_speed(duration: int, speed: float) -> Run:
    """
    Create a run from the duration in seconds and the speed in km/h.

    Raises:
        InvalidArgumentError: If a value is not greater than 0.
    """
    _require_positive(duration, speed)
    duration = _seconds(duration)
    speed = float(speed)
    distance = duration * speed / HOUR
    pace = round_half_up(HOUR / speed)
    return _build(distance, duration, pace, speed, (DURATION, SPEED))


Builder = Callable[[float, float], Run]

# Builders keyed by their (ordered) parameter pair.
BUILDERS: dict[tuple[ParameterType, ParameterType], Builder] = {
    (DISTANCE, DURATION): create_with_distance_and_duration,
    (DISTANCE, PACE): create_with_distance_and_pace,
    (DISTANCE, SPEED): create_with_distance_and_speed,
    (DURATION, PACE): create_with_duration_and_pace,
    (DURATION, SPEED): create_with_duration_and_speed,
}


def get_builder(
    first: ParameterType, second: ParameterType
) -> tuple[tuple[ParameterType, ParameterType], Builder]:
    """
    Look up the builder for a parameter pair, in either order.

    Returns the pair in the builder's argument order along with the builder.

    Raises:
        UnsupportedCombinationError: For pace and speed (no absolute quantity) and for
            pairs that aren't run parameters.
    """
    for pair in ((first, second), (second, first)):
        if pair in BUILDERS:
            return pair, BUILDERS[pair]
    if {first, second} == {PACE, SPEED}:
        raise UnsupportedCombinationError(
            "A run can't be calculated from pace and speed alone; "
            "distance or duration is needed."
        )
    raise UnsupportedCombinationError(
        f"A run can't be calculated from {first.key} and {second.key}."
    )


def create_with(
    first: ParameterType,
    first_value: float,
    second: ParameterType,
    second_value: float,
) -> Run:
    """Create a run from any supported pair of parameters (base units)."""
    pair, builder = get_builder(first, second)
    values = {first: first_value, second: second_value}
    return builder(values[pair[0]], values[pair[1]])
