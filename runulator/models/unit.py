from __future__ import annotations
from enum import Enum
from typing import Literal
import logging

from pydantic import BaseModel

from runulator.errors import InvalidArgumentError, UnsupportedConversionError
from runulator.utils.time_codec import HOUR, format_seconds_to_time

logger = logging.getLogger(__name__)

UnitCategory = Literal["weight", "length", "pace", "speed", "time"]

POUNDS_PER_KG = 2.20462
CM_PER_KM = 1000 * 100
FEET_PER_KM = 3280.84
INCHES_PER_KM = 39370.1
KM_PER_MILE = 1.60934


class UnitSpec(BaseModel):
    """Symbol, label and conversion factor of a single unit."""

    model_config = {"frozen": True}

    symbol: str
    label: str | None  # Translation key; None if the symbol is the label
    category: UnitCategory
    per_base: float  # How many of this unit make one base unit of the category


class Unit(Enum):
    # weight
    KG = "KG"
    LB = "LB"
    # length
    CM = "CM"
    FEET = "FEET"
    INCH = "INCH"
    KM = "KM"
    MILE = "MILE"
    # pace, on seconds level
    MIN_KM = "MIN_KM"
    MIN_MILE = "MIN_MILE"
    # speed
    KM_H = "KM_H"
    MPH = "MPH"
    # time, on seconds level
    HOUR = "HOUR"
    MINUTE = "MINUTE"

    @property
    def spec(self) -> UnitSpec:
        return UNIT_SPECS[self]

    @property
    def symbol(self) -> str:
        return self.spec.symbol

    @property
    def label(self) -> str:
        """The translation key of the unit, falling back to its symbol."""
        return self.spec.label if self.spec.label is not None else self.spec.symbol

    @property
    def category(self) -> UnitCategory:
        return self.spec.category

    def __str__(self) -> str:
        return self.symbol

    # ---------------------------------------------------------------------------
    # generic conversion
    # ---------------------------------------------------------------------------

    def to_base(self, value: float) -> float:
        """Convert a value in this unit to the base unit of its category."""
        if self.category == "pace":
            return self.to_sec_per_km(value)
        if self.category == "speed":
            return self.to_km_per_hour(value)
        return value / self.spec.per_base

    def from_base(self, value: float) -> float:
        """Convert a value in the base unit of this category to this unit."""
        if self.category == "pace":
            return self.sec_per_km_to(value)
        if self.category == "speed":
            return self.km_per_hour_to(value)
        return value * self.spec.per_base

    def convert(self, value: float, target: Unit) -> float:
        """Convert a value in this unit to `target`, which must share the category."""
        if target.category != self.category:
            raise UnsupportedConversionError(
                f"conversion from {self.symbol} to {target.symbol} is not supported"
            )
        return target.from_base(self.to_base(value))

    def format(self, value: float) -> str:
        """Format a value with the symbol of the unit."""
        if self.category in ("pace", "time"):
            return f"{format_seconds_to_time(value)} {self.symbol}"
        return f"{value} {self.symbol}"

    # ---------------------------------------------------------------------------
    # weight and length
    # ---------------------------------------------------------------------------

    def to_kg(self, weight: float) -> float:
        self._require("weight", "kg")
        return weight / self.spec.per_base

    def kg_to(self, kg: float) -> float:
        self._require("weight", "kg")
        return kg * self.spec.per_base

    def to_km(self, length: float) -> float:
        self._require("length", "km")
        return length / self.spec.per_base

    def km_to(self, km: float) -> float:
        self._require("length", "km")
        return km * self.spec.per_base

    def to_cm(self, length: float) -> float:
        self._require("length", "cm")
        if self is Unit.CM:
            return length
        return self.to_km(length) * CM_PER_KM

    def cm_to(self, cm: float) -> float:
        self._require("length", "cm")
        if self is Unit.CM:
            return cm
        return self.km_to(cm / CM_PER_KM)

    # ---------------------------------------------------------------------------
    # pace and speed
    #
    # Pace and speed are reciprocal, so both families accept both kinds of unit.
    # Negative values are rejected, as is zero when a reciprocal is taken.
    # ---------------------------------------------------------------------------

    def to_sec_per_km(self, pace_or_speed: float) -> float:
        """Convert a pace or speed in this unit to seconds per km."""
        _reject_negative(pace_or_speed)
        if self.category == "pace":
            return pace_or_speed / self.spec.per_base
        if self.category == "speed":
            return _reciprocal(pace_or_speed / self.spec.per_base)
        raise self._unsupported("seconds per km")

    def sec_per_km_to(self, pace: float) -> float:
        """Convert a pace in seconds per km to this pace or speed unit."""
        _reject_negative(pace)
        if self.category == "pace":
            return pace * self.spec.per_base
        if self.category == "speed":
            return _reciprocal(pace) * self.spec.per_base
        raise self._unsupported("seconds per km")

    def to_km_per_hour(self, speed_or_pace: float) -> float:
        """Convert a speed or pace in this unit to km/h."""
        _reject_negative(speed_or_pace)
        if self.category == "speed":
            return speed_or_pace / self.spec.per_base
        if self.category == "pace":
            return _reciprocal(speed_or_pace / self.spec.per_base)
        raise self._unsupported("km/h")

    def km_per_hour_to(self, speed: float) -> float:
        """Convert a speed in km/h to this speed or pace unit."""
        _reject_negative(speed)
        if self.category == "speed":
            return speed * self.spec.per_base
        if self.category == "pace":
            return _reciprocal(speed) * self.spec.per_base
        raise self._unsupported("km/h")

    # ---------------------------------------------------------------------------
    # unit lists
    # ---------------------------------------------------------------------------

    @classmethod
    def weight_units(cls) -> list[Unit]:
        return [cls.KG, cls.LB]

    @classmethod
    def height_units(cls) -> list[Unit]:
        return [cls.CM, cls.FEET, cls.INCH]

    @classmethod
    def distance_units(cls) -> list[Unit]:
        return [cls.KM, cls.MILE]

    @classmethod
    def pace_units(cls) -> list[Unit]:
        return [cls.MIN_KM, cls.MIN_MILE]

    @classmethod
    def speed_units(cls) -> list[Unit]:
        return [cls.KM_H, cls.MPH]

    @classmethod
    def of_category(cls, category: UnitCategory) -> list[Unit]:
        return [unit for unit in cls if unit.category == category]

    def _require(self, category: UnitCategory, target: str) -> None:
        if self.category != category:
            raise self._unsupported(target)

    def _unsupported(self, target: str) -> UnsupportedConversionError:
        logger.debug(f"Rejected conversion from {self.name} to {target}")
        return UnsupportedConversionError(
            f"conversion from {self.symbol} to {target} is not supported"
        )


def _reject_negative(value: float) -> None:
    if value < 0:
        raise InvalidArgumentError(f"speed or pace {value} must be greater than 0")


def _reciprocal(value: float) -> float:
    """Turn seconds per km into km/h and vice versa."""
    if value == 0:
        raise InvalidArgumentError("speed or pace must be greater than 0")
    return HOUR / value


UNIT_SPECS: dict[Unit, UnitSpec] = {
    Unit.KG: UnitSpec(symbol="kg", label="kilogram", category="weight", per_base=1),
    Unit.LB: UnitSpec(
        symbol="lb", label="pound", category="weight", per_base=POUNDS_PER_KG
    ),
    Unit.CM: UnitSpec(
        symbol="cm", label="centimeter", category="length", per_base=CM_PER_KM
    ),
    Unit.FEET: UnitSpec(
        symbol="ft", label="feet", category="length", per_base=FEET_PER_KM
    ),
    Unit.INCH: UnitSpec(
        symbol="in", label="inch", category="length", per_base=INCHES_PER_KM
    ),
    Unit.KM: UnitSpec(symbol="km", label="kilometer", category="length", per_base=1),
    Unit.MILE: UnitSpec(
        symbol="mi", label="mile", category="length", per_base=1 / KM_PER_MILE
    ),
    Unit.MIN_KM: UnitSpec(
        symbol="min:sec/km", label="minutes_per_km", category="pace", per_base=1
    ),
    Unit.MIN_MILE: UnitSpec(
        symbol="min:sec/mi",
        label="minutes_per_mile",
        category="pace",
        per_base=KM_PER_MILE,
    ),
    Unit.KM_H: UnitSpec(
        symbol="km/h", label="kilometer_per_hour", category="speed", per_base=1
    ),
    Unit.MPH: UnitSpec(
        symbol="mph", label="miles_per_hour", category="speed", per_base=1 / KM_PER_MILE
    ),
    Unit.HOUR: UnitSpec(symbol="h:min:sec", label=None, category="time", per_base=1),
    Unit.MINUTE: UnitSpec(symbol="min:sec", label=None, category="time", per_base=1),
}
