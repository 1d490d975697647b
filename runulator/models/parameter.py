from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING

from .unit import Unit

if TYPE_CHECKING:
    from .profile import UserSettings


class ParameterType(Enum):
    """The quantities a user can enter. The value doubles as the storage key."""

    DISTANCE = "distance"
    DURATION = "duration"
    PACE = "pace"
    SPEED = "speed"
    WEIGHT = "weight"
    HEIGHT = "height"

    @property
    def key(self) -> str:
        return self.value

    def unit(self, settings: UserSettings) -> Unit:
        """The unit the user prefers for this parameter."""
        match self:
            case ParameterType.DISTANCE:
                return settings.distance_unit
            case ParameterType.DURATION:
                return Unit.HOUR
            case ParameterType.PACE:
                return settings.pace_unit
            case ParameterType.SPEED:
                return settings.speed_unit
            case ParameterType.WEIGHT:
                return settings.weight_unit
            case ParameterType.HEIGHT:
                return settings.height_unit


# The parameters that describe a run, in storage priority order.
RUN_PARAMETERS = (
    ParameterType.DISTANCE,
    ParameterType.DURATION,
    ParameterType.PACE,
    ParameterType.SPEED,
)

ParameterPair = tuple[ParameterType, ParameterType]
