"""
Health figures derived from the user's profile.

Heart rate zones follow the common 220 - age estimate of the maximal heart rate.
"""

import math

from pydantic import BaseModel

from runulator.models import UserProfile
from runulator.utils.numbers import round_half_up

FAT_BURNING = 0.65
BUILDING_CONDITION = 0.75
MAX_PERFORMANCE = 0.85


class HeartRateZones(BaseModel):
    max_heart_rate: int
    fat_burning: int
    building_condition: int
    max_performance: int


class HealthSummary(BaseModel):
    bmi: float
    heart_rate_zones: HeartRateZones


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate the body mass index.

    A height of 0 gives infinity (NaN if the weight is 0 as well) instead of an error.
    """
    height_m_squared = (height_cm / 100) ** 2
    if height_m_squared == 0:
        if weight_kg == 0:
            return math.nan
        return math.copysign(math.inf, weight_kg)
    return weight_kg / height_m_squared


def calculate_max_heart_rate(age: int) -> int:
    return 220 - age


def calculate_heart_rate_fat_burning(age: int) -> int:
    return round_half_up(calculate_max_heart_rate(age) * FAT_BURNING)


def calculate_heart_rate_building_condition(age: int) -> int:
    return round_half_up(calculate_max_heart_rate(age) * BUILDING_CONDITION)


def calculate_heart_rate_max_performance(age: int) -> int:
    return round_half_up(calculate_max_heart_rate(age) * MAX_PERFORMANCE)


def calculate_heart_rate_zones(age: int) -> HeartRateZones:
    return HeartRateZones(
        max_heart_rate=calculate_max_heart_rate(age),
        fat_burning=calculate_heart_rate_fat_burning(age),
        building_condition=calculate_heart_rate_building_condition(age),
        max_performance=calculate_heart_rate_max_performance(age),
    )


def health_summary(profile: UserProfile) -> HealthSummary:
    """Bundle BMI and heart rate zones for a profile."""
    return HealthSummary(
        bmi=calculate_bmi(profile.weight_kg, profile.height_cm),
        heart_rate_zones=calculate_heart_rate_zones(profile.age),
    )
