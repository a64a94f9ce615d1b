"""
UI package for the timeline host.
Contains the host and the Qt collaborators injected into it.
"""

from .resize_observer import QtResizeObserver
from .styles import StyleRegistry
from .timeline_host import TimelineHost

__all__ = ["QtResizeObserver", "StyleRegistry", "TimelineHost"]
