"""Persist the user's settings and current run in the key-value store."""

from datetime import date
import logging

from pydantic import ValidationError

from runulator.config.defaults import (
    DEFAULT_DISTANCE,
    DEFAULT_DURATION,
    FALLBACK_DISTANCE,
    FALLBACK_DURATION,
)
from runulator.errors import ParseError, RunulatorError
from runulator.factory.builders import create_with_distance_and_duration
from runulator.models import Run, Unit, UserSettings
from .base import KeyValueStore

logger = logging.getLogger(__name__)

KEY_DISTANCE = "distance"
KEY_DISTANCE_UNIT = "distance_unit"
KEY_DURATION = "duration"
KEY_PACE_UNIT = "pace_unit"
KEY_SPEED_UNIT = "speed_unit"
KEY_WEIGHT = "weight"
KEY_WEIGHT_UNIT = "weight_unit"
KEY_HEIGHT = "height"
KEY_HEIGHT_UNIT = "height_unit"
KEY_BIRTHDAY = "birthday"

# Store key for each settings field.
FIELD_KEYS = {
    "distance": KEY_DISTANCE,
    "distance_unit": KEY_DISTANCE_UNIT,
    "duration": KEY_DURATION,
    "pace_unit": KEY_PACE_UNIT,
    "speed_unit": KEY_SPEED_UNIT,
    "weight": KEY_WEIGHT,
    "weight_unit": KEY_WEIGHT_UNIT,
    "height": KEY_HEIGHT,
    "height_unit": KEY_HEIGHT_UNIT,
    "birthday": KEY_BIRTHDAY,
}


class SettingsRepository:
    """Reads and writes `UserSettings`; missing keys fall back to the defaults."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self) -> UserSettings:
        """
        Load the settings.

        Raises:
            ParseError: If a stored value is invalid.
        """
        data = {}
        for field, key in FIELD_KEYS.items():
            value = self.store.get(key)
            if value is not None:
                data[field] = value
        try:
            return UserSettings.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Stored settings are invalid: {e}") from e

    def save(self, settings: UserSettings) -> None:
        for field, key in FIELD_KEYS.items():
            value = getattr(settings, field)
            if value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, Unit):
                value = value.name
            self.store.set(key, value)
        logger.debug("Saved settings")

    def save_run(self, run: Run) -> None:
        """Remember the run by its distance and duration."""
        self.store.set(KEY_DISTANCE, run.distance)
        self.store.set(KEY_DURATION, run.duration)

    def load_run(self) -> Run:
        """Load the remembered run, or 10 km in 55:00 if it can't be built."""
        distance = self.store.get(KEY_DISTANCE, DEFAULT_DISTANCE)
        duration = self.store.get(KEY_DURATION, DEFAULT_DURATION)
        try:
            return create_with_distance_and_duration(distance, duration)
        except (RunulatorError, TypeError) as e:
            logger.error(f"Can not load run ({distance}, {duration}): {e}")
            return create_with_distance_and_duration(
                FALLBACK_DISTANCE, FALLBACK_DURATION
            )
