from .dates import default_get_label, format_utc, parse_event_date
from .error_handler import ErrorHandler
from .logging_setup import setup_logging, setup_logging_from_config
from .validation import (
    ValidationResult,
    validate_chronological,
    validate_event_inputs,
    validate_spacing_constraints,
)

__all__ = [
    "default_get_label",
    "format_utc",
    "parse_event_date",
    "ErrorHandler",
    "setup_logging",
    "setup_logging_from_config",
    "ValidationResult",
    "validate_chronological",
    "validate_event_inputs",
    "validate_spacing_constraints",
]
