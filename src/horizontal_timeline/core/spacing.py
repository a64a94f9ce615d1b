"""
Event spacing for the horizontal timeline.

Turns chronologically ordered dates into cumulative pixel offsets. Each gap
between neighbours is the label footprint plus a time-proportional padding
clamped to ``[min_event_padding, max_event_padding]``. The first event sits at
``line_padding``.
"""

import math
from datetime import date, datetime, timezone
from typing import List, Sequence, Tuple, Union

from structlog import get_logger

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    InvalidDateError,
    LengthMismatchError,
)

logger = get_logger(__name__)

DateLike = Union[date, datetime]

SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc_datetime(value: DateLike) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise InvalidDateError(f"Expected a date or datetime, got {value!r}")


def day_difference(first: DateLike, second: DateLike) -> int:
    """
    Return the absolute number of whole days between two dates.

    Args:
        first: The earlier (or later) date
        second: The other date

    Returns:
        int: Days between the two values, rounded to the nearest day

    Raises:
        InvalidDateError: If either value is not a date or datetime
    """
    delta = _as_utc_datetime(second) - _as_utc_datetime(first)
    # Half days round up.
    return math.floor(abs(delta.total_seconds()) / SECONDS_PER_DAY + 0.5)


def zip_values(*sequences: Sequence) -> List[Tuple]:
    """Pair up index-aligned sequences, refusing to silently truncate."""
    lengths = {len(sequence) for sequence in sequences}
    if len(lengths) > 1:
        raise LengthMismatchError(
            f"Sequences must have equal lengths, got {[len(s) for s in sequences]}"
        )
    return list(zip(*sequences))


def _validate_constraints(
    label_width: float,
    min_event_padding: float,
    max_event_padding: float,
    line_padding: float,
) -> None:
    for name, value in (
        ("label_width", label_width),
        ("min_event_padding", min_event_padding),
        ("max_event_padding", max_event_padding),
        ("line_padding", line_padding),
    ):
        if not math.isfinite(value):
            raise ConfigurationError(f"{name} must be a finite number, got {value}")
        if value < 0:
            raise ConfigurationError(f"{name} must not be negative, got {value}")

    if min_event_padding > max_event_padding:
        raise ConfigurationError(
            f"min_event_padding ({min_event_padding}) exceeds "
            f"max_event_padding ({max_event_padding})"
        )

    # Every gap must be positive for offsets to increase strictly.
    if label_width + min_event_padding <= 0:
        raise ConfigurationError(
            "label_width + min_event_padding must be positive so events never overlap"
        )


def cumulative_separation(
    dates: Sequence[DateLike],
    label_width: float,
    min_event_padding: float,
    max_event_padding: float,
    line_padding: float,
) -> List[float]:
    """
    Compute the distance of every event from the origin of the timeline.

    The largest elapsed-day gap is mapped onto ``max_event_padding`` and the
    others are scaled linearly against it. When every gap is the same the
    common gap is mapped onto ``min_event_padding`` instead. Scaled gaps are
    then clamped into the padding band and the label width is added.

    Args:
        dates: Event dates in ascending order
        label_width: Horizontal footprint reserved for every label
        min_event_padding: Smallest padding added between two labels
        max_event_padding: Largest padding added between two labels
        line_padding: Offset of the first event from the start of the line

    Returns:
        List[float]: One cumulative offset per date

    Raises:
        EmptyInputError: If ``dates`` is empty
        ConfigurationError: If the constraints are inconsistent
        InvalidDateError: If an element of ``dates`` is not a date
    """
    if not dates:
        raise EmptyInputError("Cannot compute distances for an empty timeline")

    _validate_constraints(label_width, min_event_padding, max_event_padding, line_padding)

    distances = [float(line_padding)]
    if len(dates) == 1:
        _as_utc_datetime(dates[0])
        return distances

    day_gaps = [
        day_difference(dates[index - 1], dates[index])
        for index in range(1, len(dates))
    ]

    largest_gap = max(day_gaps)
    if min(day_gaps) == largest_gap:
        target_padding = min_event_padding
    else:
        target_padding = max_event_padding

    for gap in day_gaps:
        scaled = gap * target_padding / largest_gap if largest_gap else 0.0
        padding = min(max(scaled, min_event_padding), max_event_padding)
        distances.append(distances[-1] + label_width + padding)

    return distances


def compute_offsets(
    dates: Sequence[DateLike],
    label_width: float,
    min_event_padding: float,
    max_event_padding: float,
    line_padding: float,
) -> List[float]:
    """Public entry point used by the host; see :func:`cumulative_separation`."""
    offsets = cumulative_separation(
        dates, label_width, min_event_padding, max_event_padding, line_padding
    )
    logger.debug(
        "Computed event offsets",
        event_count=len(offsets),
        first=offsets[0],
        last=offsets[-1],
    )
    return offsets
