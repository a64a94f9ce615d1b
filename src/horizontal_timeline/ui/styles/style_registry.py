from typing import Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from structlog import get_logger

from horizontal_timeline.models import TimelineStyles

logger = get_logger(__name__)


class StyleRegistry(QObject):
    """Registry of named colour themes for the events bar."""

    style_changed = pyqtSignal(str)
    styles_reloaded = pyqtSignal()
    error_occurred = pyqtSignal(str)

    def __init__(
        self,
        themes: Optional[Dict[str, Dict[str, str]]] = None,
        active: str = "default",
    ) -> None:
        super().__init__()
        self.styles: Dict[str, TimelineStyles] = {}
        self._load_styles(themes or {})
        if active not in self.styles:
            active = "default"
        self._active = active

    @classmethod
    def from_config(cls, config) -> "StyleRegistry":
        """Build the registry from the THEMES and STYLING sections of a Config."""
        data = config.to_dict()
        return cls(
            data.get("THEMES", {}),
            data.get("STYLING", {}).get("THEME", "default"),
        )

    def _load_styles(self, themes: Dict[str, Dict[str, str]]) -> None:
        """Load theme definitions, always keeping a default theme."""
        self.styles["default"] = TimelineStyles()
        for style_name, style_info in themes.items():
            self.styles[style_name] = TimelineStyles.from_dict(style_info)
        logger.debug("Loaded timeline themes", themes=sorted(self.styles))

    @property
    def active_style_name(self) -> str:
        return self._active

    def current_style(self) -> TimelineStyles:
        return self.styles[self._active]

    def get_style(self, style_name: str) -> TimelineStyles:
        """Return a theme by name.

        Raises:
            ValueError: If no theme with that name is registered.
        """
        if style_name not in self.styles:
            error_msg = f"Style not found: {style_name}"
            logger.error("Failed to get style", style=style_name)
            self.error_occurred.emit(error_msg)
            raise ValueError(error_msg)
        return self.styles[style_name]

    def apply_style(self, style_name: str) -> None:
        """Make a theme the active one and notify listeners."""
        self.get_style(style_name)
        if style_name == self._active:
            return
        self._active = style_name
        logger.info("Timeline style changed", style=style_name)
        self.style_changed.emit(style_name)

    def reload_styles(self, themes: Dict[str, Dict[str, str]]) -> None:
        """Replace all themes, falling back to the default theme if the active one is gone."""
        self.styles.clear()
        self._load_styles(themes)
        if self._active not in self.styles:
            self._active = "default"
        self.styles_reloaded.emit()
        logger.info("Styles successfully reloaded")
