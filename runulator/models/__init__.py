from .unit import Unit, UnitCategory, UnitSpec, UNIT_SPECS
from .parameter import ParameterType, ParameterPair, RUN_PARAMETERS
from .run import Run, HALF_MARATHON, MARATHON, DEFAULT_FATIGUE_COEFFICIENT
from .profile import UserProfile, UserSettings

__all__ = [
    "Unit",
    "UnitCategory",
    "UnitSpec",
    "UNIT_SPECS",
    "ParameterType",
    "ParameterPair",
    "RUN_PARAMETERS",
    "Run",
    "HALF_MARATHON",
    "MARATHON",
    "DEFAULT_FATIGUE_COEFFICIENT",
    "UserProfile",
    "UserSettings",
]
