from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .styleconfig_model import MotionConfig, TimelineStyles


@dataclass(frozen=True)
class TimelineEvent:
    """A single event placed on the line."""

    distance: float
    label: str
    date: Union[str, date_type]

    def to_dict(self) -> Dict[str, Any]:
        # datetime is a subclass of date
        value = self.date.isoformat() if isinstance(self.date, date_type) else self.date
        return {"distance": self.distance, "label": self.label, "date": value}


@dataclass(frozen=True)
class EventsBarProps:
    """Everything the presentation surface needs to draw the events bar."""

    width: float
    height: float
    events: Tuple[TimelineEvent, ...]
    total_width: float
    visible_width: float
    index: int = 0
    label_width: float = 0
    bar_padding_left: float = 0
    bar_padding_right: float = 0
    is_touch_enabled: bool = True
    styles: TimelineStyles = field(default_factory=TimelineStyles)
    filling_motion: MotionConfig = field(default_factory=MotionConfig)
    index_click: Optional[Callable[[int], None]] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "events": [event.to_dict() for event in self.events],
            "total_width": self.total_width,
            "visible_width": self.visible_width,
            "index": self.index,
            "label_width": self.label_width,
            "bar_padding_left": self.bar_padding_left,
            "bar_padding_right": self.bar_padding_right,
            "is_touch_enabled": self.is_touch_enabled,
            "styles": {
                "outline": self.styles.outline,
                "background": self.styles.background,
                "foreground": self.styles.foreground,
            },
            "filling_motion": {
                "stiffness": self.filling_motion.stiffness,
                "damping": self.filling_motion.damping,
            },
        }
