from .styleconfig_model import MotionConfig, TimelineStyles
from .timeline_event import EventsBarProps, TimelineEvent
from .timeline_settings import TimelineSettings

__all__ = [
    "EventsBarProps",
    "MotionConfig",
    "TimelineEvent",
    "TimelineSettings",
    "TimelineStyles",
]
