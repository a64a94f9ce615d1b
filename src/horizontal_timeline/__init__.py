"""
Horizontal timeline layout.

Places dated events along a line so that their spacing reflects the time
elapsed between them, within minimum and maximum gap constraints.
"""

from horizontal_timeline.core import (
    ConfigurationError,
    EmptyInputError,
    InvalidDateError,
    LengthMismatchError,
    TimelineError,
    UnsortedInputError,
    compute_offsets,
    cumulative_separation,
    day_difference,
)
from horizontal_timeline.models import EventsBarProps, TimelineEvent, TimelineSettings
from horizontal_timeline.services import TimelineLayoutService

__version__ = "0.1.0"

__all__ = [
    "compute_offsets",
    "cumulative_separation",
    "day_difference",
    "EventsBarProps",
    "TimelineEvent",
    "TimelineSettings",
    "TimelineLayoutService",
    "TimelineError",
    "EmptyInputError",
    "ConfigurationError",
    "InvalidDateError",
    "LengthMismatchError",
    "UnsortedInputError",
]
