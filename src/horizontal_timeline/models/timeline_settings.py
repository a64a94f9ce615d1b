from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from horizontal_timeline.config import constants
from horizontal_timeline.utils.dates import default_get_label

from .styleconfig_model import MotionConfig, TimelineStyles

LabelFormatter = Callable[[str, str, int], str]


@dataclass(frozen=True)
class TimelineSettings:
    """Resolved configuration of a horizontal timeline.

    Positioning defaults come from :mod:`horizontal_timeline.config.constants`.
    """

    # --- POSITIONING ---
    label_width: float = constants.DATE_WIDTH
    min_event_padding: float = constants.MIN_EVENT_PADDING
    max_event_padding: float = constants.MAX_EVENT_PADDING
    line_padding: float = constants.TIMELINE_PADDING
    # --- EVENTS ---
    get_label: LabelFormatter = default_get_label
    # Called with the index of a clicked event
    index_click: Optional[Callable[[int], None]] = None
    # --- STYLING ---
    styles: TimelineStyles = field(default_factory=TimelineStyles)
    filling_motion: MotionConfig = field(default_factory=MotionConfig)
    sliding_motion: MotionConfig = field(default_factory=MotionConfig)
    is_open_beginning: bool = True
    is_open_ending: bool = True
    # --- INTERACTION ---
    is_touch_enabled: bool = True
    is_keyboard_enabled: bool = True

    @classmethod
    def from_config(cls, config) -> "TimelineSettings":
        """Build settings from the ``timeline.json`` section of a ``Config``."""
        data = config.to_dict()
        positioning = data.get("POSITIONING", {})
        styling = data.get("STYLING", {})
        interaction = data.get("INTERACTION", {})
        themes = data.get("THEMES", {})

        return cls(
            label_width=positioning.get("LABEL_WIDTH", constants.DATE_WIDTH),
            min_event_padding=positioning.get(
                "MIN_EVENT_PADDING", constants.MIN_EVENT_PADDING
            ),
            max_event_padding=positioning.get(
                "MAX_EVENT_PADDING", constants.MAX_EVENT_PADDING
            ),
            line_padding=positioning.get("LINE_PADDING", constants.TIMELINE_PADDING),
            styles=TimelineStyles.from_dict(themes.get(styling.get("THEME", "default"))),
            filling_motion=MotionConfig.from_dict(styling.get("FILLING_MOTION")),
            sliding_motion=MotionConfig.from_dict(styling.get("SLIDING_MOTION")),
            is_open_beginning=styling.get("IS_OPEN_BEGINNING", True),
            is_open_ending=styling.get("IS_OPEN_ENDING", True),
            is_touch_enabled=interaction.get("IS_TOUCH_ENABLED", True),
            is_keyboard_enabled=interaction.get("IS_KEYBOARD_ENABLED", True),
        )

    def with_overrides(self, **overrides) -> "TimelineSettings":
        return replace(self, **overrides)
