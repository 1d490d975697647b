"""Conversion between human time strings (h:mm:ss, m:ss, s) and seconds."""

import logging
import re

from runulator.errors import ParseError

logger = logging.getLogger(__name__)

SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_SEGMENT_PATTERN = re.compile(r"[+-]?\d+")


def parse_time_to_seconds(text: str | None) -> int:
    """
    Parse a time string to a number of seconds.

    The last segment holds seconds and the one before it minutes. Every other
    leading segment is added to the hours. Segments are not range checked, so
    "70:00" is 4200 seconds and "1:120:00" is three hours. Empty input is 0.

    Raises:
        ParseError: If any segment is not an integer.
    """
    if text is None or text == "":
        return 0

    segments = text.split(":")
    seconds = 0
    for position, segment in enumerate(reversed(segments)):
        if not _SEGMENT_PATTERN.fullmatch(segment):
            raise ParseError(f"Can not parse time {text!r}.")
        # Anything left of the minutes counts as hours.
        seconds += int(segment) * 60 ** min(position, 2)
    logger.debug(f"Parsed time {text!r} to {seconds} seconds")
    return seconds


def format_seconds_to_time(seconds: int | float) -> str:
    """
    Format seconds as h:mm:ss, m:ss or s.

    Hours are only shown when present, in which case minutes and seconds are both
    zero padded. Without hours the minutes are unpadded and, without minutes, the
    seconds are too. Zero and negative values render as "0".
    """
    seconds = int(seconds)
    if seconds <= 0:
        return "0"
    hours, remainder = divmod(seconds, HOUR)
    minutes, secs = divmod(remainder, MINUTE)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    if minutes > 0:
        return f"{minutes}:{secs:02d}"
    return str(secs)
