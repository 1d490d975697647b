"""Load default settings from environment variables.

For local use, variables can also come from a .env file (RUNULATOR_ENV_FILE or the
path passed in). Variables already set in the environment take precedence.
"""

import logging
import os
from datetime import date

from dotenv import load_dotenv
from pydantic import ValidationError

from runulator.models import UserSettings
from .defaults import DEFAULT_FATIGUE_COEFFICIENT

logger = logging.getLogger(__name__)

# Settings field for each environment variable.
SETTINGS_ENV_VARS = {
    "RUNULATOR_DISTANCE_UNIT": "distance_unit",
    "RUNULATOR_PACE_UNIT": "pace_unit",
    "RUNULATOR_SPEED_UNIT": "speed_unit",
    "RUNULATOR_WEIGHT": "weight",
    "RUNULATOR_WEIGHT_UNIT": "weight_unit",
    "RUNULATOR_HEIGHT": "height",
    "RUNULATOR_HEIGHT_UNIT": "height_unit",
    "RUNULATOR_BIRTHDAY": "birthday",
}


def load_env(env_file: str | None = None) -> None:
    """Load a .env file if one exists, without overriding set variables."""
    env_file = env_file or os.getenv("RUNULATOR_ENV_FILE", ".env")
    if load_dotenv(env_file):
        logger.info(f"Loaded environment variables from {env_file}")


def load_settings_from_env(env_file: str | None = None) -> UserSettings:
    """
    Build settings from RUNULATOR_* environment variables.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_env(env_file)
    data = {}
    for var, field in SETTINGS_ENV_VARS.items():
        value = os.getenv(var)
        if value is None or value == "":
            continue
        if field == "birthday":
            try:
                data[field] = date.fromisoformat(value)
            except ValueError:
                raise ValueError(
                    f"Invalid {var} value: {value}. Must be a date (YYYY-MM-DD)."
                ) from None
        else:
            data[field] = value
    try:
        return UserSettings.model_validate(data)
    except ValidationError as e:
        invalid = [str(error["loc"][0]) for error in e.errors()]
        names = [var for var, field in SETTINGS_ENV_VARS.items() if field in invalid]
        raise ValueError(f"Invalid settings in {', '.join(names)}: {e}") from e


def get_fatigue_coefficient() -> float:
    """The forecast exponent from RUNULATOR_FATIGUE_COEFFICIENT, or the default."""
    value = os.getenv("RUNULATOR_FATIGUE_COEFFICIENT")
    if value is None or value == "":
        return DEFAULT_FATIGUE_COEFFICIENT
    try:
        coefficient = float(value)
    except ValueError:
        raise ValueError(
            f"Invalid RUNULATOR_FATIGUE_COEFFICIENT value: {value}. Must be a number."
        ) from None
    if coefficient <= 0:
        raise ValueError(
            f"Invalid RUNULATOR_FATIGUE_COEFFICIENT value: {value}. Must be positive."
        )
    return coefficient


def configure_logging() -> None:
    """Set the level of the runulator loggers from RUNULATOR_LOG_LEVEL, if set."""
    if "RUNULATOR_LOG_LEVEL" not in os.environ:
        return
    match os.environ["RUNULATOR_LOG_LEVEL"].upper():
        case "DEBUG":
            log_level = logging.DEBUG
        case "INFO":
            log_level = logging.INFO
        case "WARNING":
            log_level = logging.WARNING
        case "ERROR":
            log_level = logging.ERROR
        case "CRITICAL":
            log_level = logging.CRITICAL
        case _:
            raise ValueError(
                f"Invalid log level: {os.environ['RUNULATOR_LOG_LEVEL']}"
            )
    logging.getLogger("runulator").setLevel(log_level)
