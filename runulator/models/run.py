from __future__ import annotations
import logging
import math

from pydantic import BaseModel, Field

from runulator.config.defaults import DEFAULT_FATIGUE_COEFFICIENT
from runulator.errors import InvalidArgumentError
from runulator.utils.numbers import decimal_places, round_half_up
from runulator.utils.time_codec import format_seconds_to_time
from .parameter import ParameterPair
from .unit import Unit

logger = logging.getLogger(__name__)

HALF_MARATHON = 21.0975  # in km
MARATHON = 42.195  # in km

MIN_HEIGHT_CM = 100
MAX_HEIGHT_CM = 272


class Run(BaseModel):
    """
    A run described by distance, duration, pace and speed.

    Runs are built by the functions in `runulator.factory`, which derive the two
    missing values from the two given ones. Two runs are equal when distance and
    duration match; pace and speed are derived and don't take part.
    """

    model_config = {"frozen": True}

    distance: float = Field(gt=0)  # in km
    duration: int = Field(gt=0)  # in seconds
    pace: int = Field(gt=0)  # in seconds per km
    speed: float = Field(gt=0)  # in km/h
    # The two parameters the run was built from, if known.
    parameters: ParameterPair | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Run):
            return NotImplemented
        return self.distance == other.distance and self.duration == other.duration

    def __hash__(self) -> int:
        return hash((self.distance, self.duration))

    def __str__(self) -> str:
        return (
            f"{self.get_distance(Unit.KM)}KM in {self.get_duration()}\n"
            f"({self.get_pace(Unit.MIN_KM)}min/km; {self.get_speed(Unit.KM_H)}km/h)"
        )

    # ---------------------------------------------------------------------------
    # getters
    # ---------------------------------------------------------------------------

    def get_distance(self, unit: Unit = Unit.KM) -> str:
        """The distance with as many decimals as it has, but at most 4."""
        distance = self.get_distance_as_number(unit)
        places = min(4, decimal_places(distance))
        return f"{distance:.{places}f}"

    def get_distance_as_number(self, unit: Unit = Unit.KM) -> float:
        return unit.km_to(self.distance)

    def get_duration(self) -> str:
        return format_seconds_to_time(self.duration)

    def get_duration_as_number(self) -> int:
        return self.duration

    def get_pace(self, unit: Unit = Unit.MIN_KM) -> str:
        return format_seconds_to_time(self.get_pace_as_number(unit))

    def get_pace_as_number(self, unit: Unit = Unit.MIN_KM) -> int:
        return round_half_up(unit.sec_per_km_to(self.pace))

    def get_speed(self, unit: Unit = Unit.KM_H) -> str:
        """The speed with one decimal if that's exact, two otherwise."""
        speed = self.get_speed_as_number(unit)
        places = 1 if decimal_places(speed) <= 1 else 2
        return f"{speed:.{places}f}"

    def get_speed_as_number(self, unit: Unit = Unit.KM_H) -> float:
        return unit.km_per_hour_to(self.speed)

    # ---------------------------------------------------------------------------
    # derived metrics
    # ---------------------------------------------------------------------------

    def calculate_calories(self, weight_kg: float) -> str:
        """Estimate the burned calories, e.g. "~810"."""
        return f"~{math.floor(self.distance * weight_kg * 0.9)}"

    def calculate_cadence_count(self, height_cm: float) -> int:
        """
        Recommended steps per minute for the speed of this run and the runner's height.

        Raises:
            InvalidArgumentError: If the height isn't between 100 and 272 cm (exclusive).
        """
        if not MIN_HEIGHT_CM < height_cm < MAX_HEIGHT_CM:
            raise InvalidArgumentError(f"You're not {height_cm}cm tall.")
        return math.ceil(160 + (self.speed - 6) * 2.5 - (height_cm - 170) / 2)

    def get_forecast_run(
        self,
        forecast_distance: float,
        fatigue_coefficient: float = DEFAULT_FATIGUE_COEFFICIENT,
    ) -> Run:
        """
        Predict a run over `forecast_distance` km using Riegel's formula.

        t2 = t1 * (d2 / d1) ^ fatigue_coefficient

        Raises:
            InvalidArgumentError: If the forecast distance is not greater than 0.
        """
        # Avoid a circular import; the builders depend on this model.
        from runulator.factory.builders import create_with_distance_and_duration

        if forecast_distance <= 0:
            raise InvalidArgumentError("values must be greater than 0")
        ratio = forecast_distance / self.distance
        duration = round_half_up(self.duration * ratio**fatigue_coefficient)
        logger.debug(
            f"Forecast {forecast_distance} km from {self.distance} km "
            f"in {self.duration} s: {duration} s"
        )
        return create_with_distance_and_duration(forecast_distance, duration)
