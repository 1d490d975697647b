"""
Storage form of runs.

Runs are stored as single-quoted, JSON-like text, e.g.
{'distance':22.0,'duration':7200,'pace':327,'speed':11.0}. The compact form only
holds the two parameters a run was entered with, e.g. {'distance':10.0,'duration':3000}.
Reading always rebuilds the run from two parameters, so stored derived values are
never trusted.
"""

from collections.abc import Iterable
import logging

from pydantic import BaseModel, ValidationError, model_validator

from runulator.errors import (
    InvalidArgumentError,
    ParseError,
    RunulatorError,
    UnsupportedCombinationError,
)
from runulator.models import RUN_PARAMETERS, ParameterType, Run
from .builders import BUILDERS, DISTANCE, DURATION, PACE, SPEED

logger = logging.getLogger(__name__)


class StoredRun(BaseModel):
    """The parameters found in a stored run. Keys are matched case-insensitively."""

    distance: float | None = None  # in km
    duration: int | None = None  # in seconds
    pace: int | None = None  # in seconds per km
    speed: float | None = None  # in km/h

    @model_validator(mode="before")
    @classmethod
    def lowercase_keys(cls, data):
        # Older records were written with upper-case keys ('DISTANCE').
        if isinstance(data, dict):
            return {str(key).lower(): value for key, value in data.items()}
        return data

    def present(self) -> list[ParameterType]:
        return [p for p in RUN_PARAMETERS if getattr(self, p.key) is not None]


def _format_number(parameter: ParameterType, value: int | float) -> str:
    # Durations and paces are whole seconds, distances and speeds always floats.
    if parameter in (DURATION, PACE):
        return str(int(value))
    return repr(float(value))


def _format(items: Iterable[tuple[ParameterType, int | float]]) -> str:
    return "{" + ",".join(f"'{p.key}':{_format_number(p, v)}" for p, v in items) + "}"


def to_storage_form(run: Run, compact: bool = False) -> str:
    """
    Convert a run to its storage form.

    The canonical form holds all four values. With `compact`, only the two
    parameters the run was built from are written (distance and duration if unknown).
    """
    if compact:
        parameters = run.parameters or (DISTANCE, DURATION)
    else:
        parameters = RUN_PARAMETERS
    return _format((p, getattr(run, p.key)) for p in parameters)


def _two_key_form(
    first: tuple[ParameterType, int | float], second: tuple[ParameterType, int | float]
) -> str:
    if first[1] <= 0 or second[1] <= 0:
        raise InvalidArgumentError("values must be greater than 0")
    return _format([first, second])


def storage_form_with_distance_and_duration(distance: float, duration: int) -> str:
    return _two_key_form((DISTANCE, float(distance)), (DURATION, int(duration)))


def storage_form_with_distance_and_pace(distance: float, pace: int) -> str:
    return _two_key_form((DISTANCE, float(distance)), (PACE, int(pace)))


def storage_form_with_distance_and_speed(distance: float, speed: float) -> str:
    return _two_key_form((DISTANCE, float(distance)), (SPEED, float(speed)))


def storage_form_with_duration_and_pace(duration: int, pace: int) -> str:
    return _two_key_form((DURATION, int(duration)), (PACE, int(pace)))


def storage_form_with_duration_and_speed(duration: int, speed: float) -> str:
    return _two_key_form((DURATION, int(duration)), (SPEED, float(speed)))


def parse_storage_form(text: str) -> StoredRun:
    """
    Parse stored text without building a run.

    Raises:
        ParseError: If the text is not a stored run.
    """
    if not text:
        raise ParseError("No run to load.")
    try:
        return StoredRun.model_validate_json(text.replace("'", '"'))
    except ValidationError as e:
        raise ParseError(f"Can not load run {text!r}.") from e


def from_storage_form(text: str) -> Run:
    """
    Rebuild a run from its storage form.

    The first available pair, in the order distance+duration, distance+pace,
    distance+speed, duration+pace, duration+speed, defines the run.

    Raises:
        ParseError: If the text is malformed or holds fewer than two parameters.
        UnsupportedCombinationError: If only pace and speed are stored.
        InvalidArgumentError: If a stored value is not greater than 0.
    """
    stored = parse_storage_form(text)
    present = stored.present()
    for pair, builder in BUILDERS.items():
        if pair[0] in present and pair[1] in present:
            return builder(getattr(stored, pair[0].key), getattr(stored, pair[1].key))
    if set(present) == {PACE, SPEED}:
        raise UnsupportedCombinationError(
            f"Can not load run {text!r}: pace and speed alone don't define a run."
        )
    raise ParseError(
        f"Can not load run {text!r}: two of distance, duration, pace and speed "
        "are needed."
    )


def runs_to_storage(runs: Iterable[Run], compact: bool = False) -> set[str]:
    """Convert runs to a set of storage forms."""
    return {to_storage_form(run, compact=compact) for run in runs}


def runs_from_storage(records: Iterable[str], skip_invalid: bool = False) -> list[Run]:
    """
    Rebuild runs from storage forms.

    By default the first bad record raises. With `skip_invalid`, bad records are
    logged and left out.
    """
    runs = []
    for record in records:
        try:
            runs.append(from_storage_form(record))
        except RunulatorError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping stored run {record!r}: {e.message}")
    return runs
