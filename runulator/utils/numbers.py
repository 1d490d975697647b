"""Parsing and rounding helpers for user-entered numbers."""

import math
import re
from decimal import Decimal

from runulator.errors import ParseError

_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_to_float(text: str | None) -> float:
    """
    Parse a distance or speed entered by the user.

    A comma is accepted as decimal separator ("10,5" is 10.5).

    Raises:
        ParseError: If the text is not a number.
    """
    if text is None:
        raise ParseError("No number given.")
    normalized = text.replace(",", ".")
    if not _NUMBER_PATTERN.fullmatch(normalized):
        raise ParseError(f"{text} is not a number.")
    return float(normalized)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def decimal_places(value: float) -> int:
    """
    Count the fractional digits in the shortest representation of `value`.

    Whole numbers count as one decimal place, matching how they're written ("22.0").
    """
    exponent = Decimal(repr(float(value))).as_tuple().exponent
    if not isinstance(exponent, int):
        # inf / nan
        return 1
    return max(1, -exponent)
