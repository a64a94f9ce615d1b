"""Exceptions raised by the spacing engine and the timeline host."""


class TimelineError(Exception):
    """Base class for all timeline layout errors."""


class EmptyInputError(TimelineError):
    """Raised when a layout is requested for zero events."""


class ConfigurationError(TimelineError):
    """Raised when the spacing constraints contradict each other."""


class InvalidDateError(TimelineError):
    """Raised when a value cannot be interpreted as a calendar date."""


class LengthMismatchError(TimelineError):
    """Raised when index-aligned inputs have different lengths."""


class UnsortedInputError(TimelineError):
    """Raised when event dates are not in ascending order."""
