from typing import List, Optional, Sequence

from structlog import get_logger

from horizontal_timeline.config import constants
from horizontal_timeline.core import (
    ConfigurationError,
    EmptyInputError,
    LengthMismatchError,
    UnsortedInputError,
    compute_offsets,
    zip_values,
)
from horizontal_timeline.models import EventsBarProps, TimelineEvent, TimelineSettings
from horizontal_timeline.utils.dates import parse_event_date
from horizontal_timeline.utils.validation import (
    validate_chronological,
    validate_event_inputs,
    validate_spacing_constraints,
)

logger = get_logger(__name__)


class TimelineLayoutService:
    """Turns raw event values into a laid out events bar."""

    def __init__(self, buttons_width: float = constants.NAVIGATION_BUTTONS_WIDTH):
        self.buttons_width = buttons_width

    def build_events(
        self,
        values: Sequence[str],
        names: Sequence[str],
        settings: TimelineSettings,
    ) -> List[TimelineEvent]:
        """
        Validate the inputs and place every event on the line.

        Args:
            values: Event dates, ascending
            names: Event names, index-aligned with ``values``
            settings: Spacing constraints and label formatter

        Returns:
            List[TimelineEvent]: One event per input value

        Raises:
            EmptyInputError: If there are no values
            LengthMismatchError: If values and names differ in length
            UnsortedInputError: If the dates are not ascending
            ConfigurationError: If the spacing constraints are invalid
            InvalidDateError: If a value is not a parseable date
        """
        result = validate_event_inputs(values, names)
        if not result.is_valid:
            if not values:
                raise EmptyInputError(result.error_message)
            raise LengthMismatchError(result.error_message)

        result = validate_spacing_constraints(
            settings.label_width,
            settings.min_event_padding,
            settings.max_event_padding,
            settings.line_padding,
        )
        if not result.is_valid:
            raise ConfigurationError(result.error_message)

        dates = [parse_event_date(value) for value in values]
        result = validate_chronological(dates)
        if not result.is_valid:
            raise UnsortedInputError(result.error_message)

        distances = compute_offsets(
            dates,
            settings.label_width,
            settings.min_event_padding,
            settings.max_event_padding,
            settings.line_padding,
        )

        return [
            TimelineEvent(
                distance=distance,
                label=settings.get_label(value, name, index),
                date=value,
            )
            for index, (distance, value, name) in enumerate(
                zip_values(distances, values, names)
            )
        ]

    def layout(
        self,
        container_width: Optional[float],
        container_height: Optional[float],
        values: Sequence[str],
        names: Sequence[str],
        settings: TimelineSettings,
        index: int = 0,
    ) -> Optional[EventsBarProps]:
        """
        Lay out the events bar for a measured container.

        Returns None while the container width is unknown.

        Raises:
            IndexError: If ``index`` does not name one of the events
        """
        if not container_width:
            logger.debug("Container not measured yet, skipping layout")
            return None

        events = self.build_events(values, names, settings)
        if not 0 <= index < len(events):
            raise IndexError(f"Event index {index} out of range")
        first, last = events[0], events[-1]

        visible_width = container_width - self.buttons_width
        total_width = max(last.distance + settings.line_padding, visible_width)

        bar_padding_right = 0
        bar_padding_left = 0
        if not settings.is_open_ending:
            bar_padding_right = total_width - last.distance
        if not settings.is_open_beginning:
            bar_padding_left = first.distance

        logger.debug(
            "Timeline laid out",
            events=len(events),
            total_width=total_width,
            visible_width=visible_width,
        )

        return EventsBarProps(
            width=container_width,
            height=container_height or 0,
            events=tuple(events),
            total_width=total_width,
            visible_width=visible_width,
            index=index,
            label_width=settings.label_width,
            bar_padding_left=bar_padding_left,
            bar_padding_right=bar_padding_right,
            is_touch_enabled=settings.is_touch_enabled,
            styles=settings.styles,
            filling_motion=settings.filling_motion,
            index_click=settings.index_click,
        )
