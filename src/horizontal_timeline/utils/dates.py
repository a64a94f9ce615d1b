from datetime import date, datetime, timezone
from email.utils import format_datetime
from typing import Union

from horizontal_timeline.core.exceptions import InvalidDateError


def parse_event_date(value: Union[str, date, datetime]) -> datetime:
    """
    Parse an event date into an aware UTC datetime.

    Accepts ISO-8601 strings such as ``1993-01-01`` or
    ``1993-01-01T12:30:00+02:00``. Date-only strings and naive timestamps are
    read as UTC.

    Args:
        value: The date string or date object to parse

    Returns:
        datetime: The parsed value in UTC

    Raises:
        InvalidDateError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateError(f"Invalid event date: {value!r}") from e
    else:
        raise InvalidDateError(f"Invalid event date: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_utc(value: Union[str, date, datetime]) -> str:
    """Format a date as an RFC 1123 string, e.g. ``Wed, 01 Jan 2020 00:00:00 GMT``."""
    return format_datetime(parse_event_date(value), usegmt=True)


def default_get_label(date_value: Union[str, date, datetime], name: str, index: int) -> str:
    """Default label: the event name above its UTC date."""
    return f"{name}\n{format_utc(date_value)}"
