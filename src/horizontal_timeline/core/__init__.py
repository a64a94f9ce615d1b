"""
Core package for event spacing.
Contains the pure offset computation and the exceptions it raises.
"""

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    InvalidDateError,
    LengthMismatchError,
    TimelineError,
    UnsortedInputError,
)
from .spacing import compute_offsets, cumulative_separation, day_difference, zip_values

__all__ = [
    "compute_offsets",
    "cumulative_separation",
    "day_difference",
    "zip_values",
    "TimelineError",
    "EmptyInputError",
    "ConfigurationError",
    "InvalidDateError",
    "LengthMismatchError",
    "UnsortedInputError",
]
