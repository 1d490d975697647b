"""Errors raised by the run calculator.

Every error carries a short `title` and a human-readable `message` so callers can
show a transient notice without inspecting the exception type.
"""


class RunulatorError(Exception):
    """Base class for all calculator errors."""

    default_title = "Error"

    def __init__(self, message: str, title: str | None = None):
        super().__init__(message)
        self.message = message
        self.title = title if title is not None else self.default_title

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(RunulatorError, ValueError):
    """Raised when a numeric input is out of range (usually not greater than 0)."""

    default_title = "Invalid value"


class ParseError(RunulatorError, ValueError):
    """Raised when a time, number or stored run cannot be parsed."""

    default_title = "Parse error"


class UnsupportedConversionError(RunulatorError):
    """Raised when a unit is used outside of its category."""

    default_title = "Unsupported conversion"


class UnsupportedCombinationError(UnsupportedConversionError):
    """Raised when a run is requested from a parameter pair that can't define it."""

    default_title = "Unsupported combination"
