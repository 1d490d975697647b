import pytest

from runulator.errors import ParseError
from runulator.utils.time_codec import (
    HOUR,
    MINUTE,
    SECOND,
    format_seconds_to_time,
    parse_time_to_seconds,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", 0),
        ("00:00", 0),
        ("59", MINUTE - SECOND),
        ("1:00", MINUTE),
        ("1:01", MINUTE + SECOND),
        ("1:09", MINUTE + 9 * SECOND),
        ("9:59", 10 * MINUTE - SECOND),
        ("10:00", 10 * MINUTE),
        ("59:59", HOUR - SECOND),
        ("0:59:59", HOUR - SECOND),
        ("00:59:59", HOUR - SECOND),
        ("1:00:00", HOUR),
        ("1:00:01", HOUR + SECOND),
        ("1:01:01", HOUR + MINUTE + SECOND),
        ("10:00:00", 10 * HOUR),
        ("100:59:59", 101 * HOUR - SECOND),
    ],
)
def test_parse_time_to_seconds(text: str, expected: int):
    assert parse_time_to_seconds(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("70:00", HOUR + 10 * MINUTE),
        ("1:120:00", 3 * HOUR),
        ("4200", HOUR + 10 * MINUTE),
        ("0:0:4200", HOUR + 10 * MINUTE),
        ("1:120:10800", 6 * HOUR),
    ],
)
def test_parse_time_to_seconds_does_not_normalize_segments(text: str, expected: int):
    assert parse_time_to_seconds(text) == expected


def test_parse_time_to_seconds_sums_leading_segments_into_hours():
    assert parse_time_to_seconds("1:1:00:00") == 2 * HOUR


@pytest.mark.parametrize("text", ["", None])
def test_parse_time_to_seconds_empty_is_zero(text):
    assert parse_time_to_seconds(text) == 0


@pytest.mark.parametrize(
    "text", ["::00", ":::", "weer24", "1,45,11", "1:", "1.5", " 5", "1_000"]
)
def test_parse_time_to_seconds_rejects_garbage(text: str):
    with pytest.raises(ParseError):
        parse_time_to_seconds(text)


def test_parse_error_has_title_and_message():
    with pytest.raises(ParseError) as exc_info:
        parse_time_to_seconds("weer24")
    assert exc_info.value.title == "Parse error"
    assert "weer24" in exc_info.value.message


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (-5, "0"),
        (-1, "0"),
        (0, "0"),
        (MINUTE - SECOND, "59"),
        (MINUTE, "1:00"),
        (MINUTE + SECOND, "1:01"),
        (MINUTE + 9 * SECOND, "1:09"),
        (10 * MINUTE, "10:00"),
        (HOUR - SECOND, "59:59"),
        (HOUR, "1:00:00"),
        (HOUR + SECOND, "1:00:01"),
        (HOUR + MINUTE + SECOND, "1:01:01"),
        (10 * HOUR - SECOND, "9:59:59"),
        (10 * HOUR + SECOND, "10:00:01"),
        (101 * HOUR - SECOND, "100:59:59"),
    ],
)
def test_format_seconds_to_time(seconds: int, expected: str):
    assert format_seconds_to_time(seconds) == expected
