import logging
import os
from typing import Optional, TextIO

import structlog

LOG_LEVEL_ENV = "TIMELINE_LOG_LEVEL"


def setup_logging(
    level_name: Optional[str] = None, stream: Optional[TextIO] = None
) -> None:
    """
    Configure structlog for the timeline.

    The level comes from ``level_name``, then the ``TIMELINE_LOG_LEVEL``
    environment variable, then INFO.

    Args:
        level_name: Name of a standard logging level, e.g. "DEBUG"
        stream: Where log lines are written, stdout by default

    Raises:
        RuntimeError: If the level name is unknown.
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    log_level = logging.getLevelName(name)
    if not isinstance(log_level, int):
        raise RuntimeError(f"Failed to setup logging: unknown level '{name}'")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
    structlog.get_logger().debug("Logging system initialized", level=name)


def setup_logging_from_config(config, stream: Optional[TextIO] = None) -> None:
    """Configure logging from a loaded ``Config`` (``LOGGING_LEVEL`` key)."""
    setup_logging(
        os.getenv(LOG_LEVEL_ENV) or config.get("LOGGING_LEVEL", "INFO"), stream
    )
