from runulator.utils.dates import calculate_age
from .health import (
    HeartRateZones,
    HealthSummary,
    calculate_bmi,
    calculate_max_heart_rate,
    calculate_heart_rate_fat_burning,
    calculate_heart_rate_building_condition,
    calculate_heart_rate_max_performance,
    calculate_heart_rate_zones,
    health_summary,
)
from .forecast import STANDARD_DISTANCES, forecast_distances, forecast_table

__all__ = [
    "HeartRateZones",
    "HealthSummary",
    "calculate_age",
    "calculate_bmi",
    "calculate_max_heart_rate",
    "calculate_heart_rate_fat_burning",
    "calculate_heart_rate_building_condition",
    "calculate_heart_rate_max_performance",
    "calculate_heart_rate_zones",
    "health_summary",
    "STANDARD_DISTANCES",
    "forecast_distances",
    "forecast_table",
]
