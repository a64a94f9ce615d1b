"""
Host of the horizontal timeline.

The host owns the measured container size and the event inputs. It asks the
layout service for an events bar on every pass and hands the result to a
presentation surface. Styling and resize observation are injected rather
than inherited.
"""

from typing import Callable, Optional, Sequence

from structlog import get_logger

from horizontal_timeline.core import TimelineError
from horizontal_timeline.models import EventsBarProps, TimelineSettings
from horizontal_timeline.services import TimelineLayoutService
from horizontal_timeline.ui.resize_observer import QtResizeObserver
from horizontal_timeline.ui.styles.style_registry import StyleRegistry
from horizontal_timeline.utils.error_handler import ErrorHandler

logger = get_logger(__name__)

PresentationSurface = Callable[[EventsBarProps], None]


class TimelineHost:
    """Lays out the timeline and forwards it to a presentation surface."""

    def __init__(
        self,
        surface: PresentationSurface,
        settings: Optional[TimelineSettings] = None,
        layout_service: Optional[TimelineLayoutService] = None,
        style_registry: Optional[StyleRegistry] = None,
        resize_observer: Optional[QtResizeObserver] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        self.surface = surface
        self.settings = settings or TimelineSettings()
        self.layout_service = layout_service or TimelineLayoutService()
        self.style_registry = style_registry
        self.resize_observer = resize_observer
        self.error_handler = error_handler or ErrorHandler()

        self.container_width: Optional[float] = None
        self.container_height: Optional[float] = None
        self.values: Sequence[str] = ()
        self.names: Sequence[str] = ()
        self.index = 0
        self.last_props: Optional[EventsBarProps] = None

        if self.style_registry is not None:
            self.style_registry.style_changed.connect(self._on_style_changed)
            self.style_registry.styles_reloaded.connect(self._on_styles_reloaded)
        if self.resize_observer is not None:
            self.resize_observer.subscribe(self.resize)
            self.container_width, self.container_height = (
                self.resize_observer.current_size()
            )

    def _resolved_settings(self) -> TimelineSettings:
        overrides = {}
        if self.settings.index_click is None:
            overrides["index_click"] = self.select
        if self.style_registry is not None:
            overrides["styles"] = self.style_registry.current_style()
        return self.settings.with_overrides(**overrides)

    def set_events(
        self, values: Sequence[str], names: Sequence[str], index: int = 0
    ) -> Optional[EventsBarProps]:
        """Replace the events shown on the timeline and re-render."""
        self.values = list(values)
        self.names = list(names)
        self.index = index
        return self.refresh()

    def set_settings(self, settings: TimelineSettings) -> Optional[EventsBarProps]:
        self.settings = settings
        return self.refresh()

    def select(self, index: int) -> Optional[EventsBarProps]:
        """Mark an event as selected."""
        if self.values and not 0 <= index < len(self.values):
            raise IndexError(f"Event index {index} out of range")
        self.index = index
        return self.refresh()

    def resize(self, width: float, height: float) -> Optional[EventsBarProps]:
        """Record a new container size and re-render."""
        self.container_width = width
        self.container_height = height
        return self.refresh()

    def _on_style_changed(self, style_name: str) -> None:
        logger.debug("Re-rendering after style change", style=style_name)
        self.refresh()

    def _on_styles_reloaded(self) -> None:
        logger.debug("Re-rendering after styles reload")
        self.refresh()

    def refresh(self) -> Optional[EventsBarProps]:
        """
        Lay out the current events and forward them to the surface.

        Nothing is rendered while the container is unmeasured or there are no
        events yet.

        Returns:
            Optional[EventsBarProps]: What was handed to the surface, if anything

        Raises:
            TimelineError: If the inputs or settings are invalid; the error
                is reported through the error handler first.
        """
        if not self.values:
            return None

        try:
            props = self.layout_service.layout(
                self.container_width,
                self.container_height,
                self.values,
                self.names,
                self._resolved_settings(),
                self.index,
            )
        except TimelineError as e:
            self.error_handler.handle_error(f"Failed to lay out timeline: {e}")
            raise

        if props is None:
            return None

        self.last_props = props
        self.surface(props)
        return props

    def close(self) -> None:
        """Detach from injected collaborators."""
        if self.resize_observer is not None:
            self.resize_observer.disconnect_widget()
        if self.style_registry is not None:
            self.style_registry.style_changed.disconnect(self._on_style_changed)
            self.style_registry.styles_reloaded.disconnect(self._on_styles_reloaded)
