from __future__ import annotations
from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from runulator.config.defaults import (
    DEFAULT_DISTANCE,
    DEFAULT_DURATION,
    DEFAULT_HEIGHT,
    DEFAULT_WEIGHT,
)
from runulator.utils.dates import calculate_age
from .unit import Unit, UnitCategory


class UserProfile(BaseModel):
    """Body measurements in base units, as consumed by the health metrics."""

    model_config = {"frozen": True}

    weight_kg: float
    height_cm: float
    age: int


def unit_of(category: UnitCategory):
    """Build a validator accepting a unit (or unit name) of the given category."""

    def validate(v: Unit | str) -> Unit:
        if isinstance(v, str):
            try:
                v = Unit[v.upper()]
            except KeyError:
                raise ValueError(f"Unknown unit: {v!r}") from None
        if v.category != category:
            raise ValueError(f"{v.name} is not a {category} unit")
        return v

    return validate


WeightUnit = Annotated[Unit, BeforeValidator(unit_of("weight"))]
LengthUnit = Annotated[Unit, BeforeValidator(unit_of("length"))]
PaceUnit = Annotated[Unit, BeforeValidator(unit_of("pace"))]
SpeedUnit = Annotated[Unit, BeforeValidator(unit_of("speed"))]


class UserSettings(BaseModel):
    """
    The user's preferences and body measurements.

    This is an explicit value handed to the calculator by the caller. Units can be
    given as `Unit` members or by name (e.g. "MILE").
    """

    model_config = {"frozen": True}

    distance_unit: LengthUnit = Unit.KM
    pace_unit: PaceUnit = Unit.MIN_KM
    speed_unit: SpeedUnit = Unit.KM_H
    weight: float = DEFAULT_WEIGHT
    weight_unit: WeightUnit = Unit.KG
    height: float = DEFAULT_HEIGHT
    height_unit: LengthUnit = Unit.CM
    birthday: date | None = None
    # The last entered run
    distance: float = Field(default=DEFAULT_DISTANCE, gt=0)  # in km
    duration: int = Field(default=DEFAULT_DURATION, gt=0)  # in seconds

    @property
    def weight_kg(self) -> float:
        return self.weight_unit.to_kg(self.weight)

    @property
    def height_cm(self) -> float:
        return self.height_unit.to_cm(self.height)

    def age(self, today: date | None = None) -> int | None:
        if self.birthday is None:
            return None
        return calculate_age(self.birthday, today)

    def profile(self, today: date | None = None) -> UserProfile:
        """Build the profile for the health metrics. Without a birthday the age is 0."""
        return UserProfile(
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age(today) or 0,
        )
