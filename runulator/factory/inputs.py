"""Build runs from raw text entered in the user's preferred units."""

from runulator.errors import UnsupportedCombinationError
from runulator.models import RUN_PARAMETERS, ParameterType, Run, UserSettings
from runulator.utils.numbers import parse_to_float
from runulator.utils.time_codec import parse_time_to_seconds
from .builders import create_with


def parse_parameter(
    parameter: ParameterType, text: str, settings: UserSettings
) -> float:
    """
    Parse a raw run parameter and convert it to its base unit.

    Distance and speed are numbers ("10,5" works too), duration and pace are times
    ("1:05:00"). The unit comes from the settings, e.g. a pace of "8:03" with
    MIN_MILE preferred becomes roughly 300 seconds per km.

    Raises:
        ParseError: If the text can't be parsed.
        UnsupportedCombinationError: If `parameter` doesn't describe a run.
    """
    unit = parameter.unit(settings)
    match parameter:
        case ParameterType.DISTANCE:
            return unit.to_km(parse_to_float(text))
        case ParameterType.DURATION:
            return parse_time_to_seconds(text)
        case ParameterType.PACE:
            return unit.to_sec_per_km(parse_time_to_seconds(text))
        case ParameterType.SPEED:
            return unit.to_km_per_hour(parse_to_float(text))
    raise UnsupportedCombinationError(
        f"{parameter.key} is not one of "
        f"{', '.join(p.key for p in RUN_PARAMETERS)}."
    )


def create_from_input(
    first: ParameterType,
    first_text: str,
    second: ParameterType,
    second_text: str,
    settings: UserSettings,
) -> Run:
    """Create a run from two raw parameters entered in the preferred units."""
    return create_with(
        first,
        parse_parameter(first, first_text, settings),
        second,
        parse_parameter(second, second_text, settings),
    )
