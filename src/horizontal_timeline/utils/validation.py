import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence


@dataclass
class ValidationResult:
    is_valid: bool
    error_message: Optional[str] = None


def validate_event_inputs(values: Sequence, names: Sequence) -> ValidationResult:
    """
    Validate the index-aligned event inputs of a timeline.

    Args:
        values: The event date values
        names: The event names

    Returns:
        ValidationResult: Contains validation result and error message if invalid
    """
    if not values:
        return ValidationResult(False, "Timeline needs at least one event.")

    if len(values) != len(names):
        return ValidationResult(
            False,
            f"Got {len(values)} dates but {len(names)} names; they must match.",
        )

    return ValidationResult(True)


def validate_chronological(dates: Sequence[datetime]) -> ValidationResult:
    """
    Check that parsed dates are in ascending order.

    Args:
        dates: Parsed event dates

    Returns:
        ValidationResult: Names the first out-of-order index if invalid
    """
    for index in range(1, len(dates)):
        if dates[index] < dates[index - 1]:
            return ValidationResult(
                False,
                f"Event {index} ({dates[index].date().isoformat()}) is earlier "
                f"than event {index - 1} ({dates[index - 1].date().isoformat()}).",
            )
    return ValidationResult(True)


def validate_spacing_constraints(
    label_width: float,
    min_event_padding: float,
    max_event_padding: float,
    line_padding: float,
) -> ValidationResult:
    """Check the four spacing constraints before a layout pass."""
    constraints = (label_width, min_event_padding, max_event_padding, line_padding)
    if not all(math.isfinite(value) for value in constraints):
        return ValidationResult(False, "Spacing constraints must be finite numbers.")

    if min(constraints) < 0:
        return ValidationResult(False, "Spacing constraints cannot be negative.")

    if min_event_padding > max_event_padding:
        return ValidationResult(
            False,
            f"Minimum event padding ({min_event_padding}) cannot exceed "
            f"maximum event padding ({max_event_padding}).",
        )

    if label_width + min_event_padding <= 0:
        return ValidationResult(
            False, "Label width plus minimum event padding must be positive."
        )

    return ValidationResult(True)
