from typing import Callable, List

from PyQt6.QtCore import QEvent, QObject, pyqtSignal
from PyQt6.QtWidgets import QWidget
from structlog import get_logger

logger = get_logger(__name__)

ResizeCallback = Callable[[int, int], None]


class QtResizeObserver(QObject):
    """Reports the size of a watched widget whenever it is resized."""

    resized = pyqtSignal(int, int)

    def __init__(self, widget: QWidget):
        super().__init__()
        self.widget = widget
        self._callbacks: List[ResizeCallback] = []
        widget.installEventFilter(self)

    def subscribe(self, callback: ResizeCallback) -> None:
        """Register a callback taking (width, height)."""
        self._callbacks.append(callback)

    def unsubscribe(self, callback: ResizeCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def current_size(self):
        """Return the widget's current (width, height)."""
        size = self.widget.size()
        return size.width(), size.height()

    def disconnect_widget(self) -> None:
        """Stop watching the widget."""
        self.widget.removeEventFilter(self)
        self._callbacks.clear()

    def eventFilter(self, obj, event):
        """Event filter to catch resize events of the watched widget."""
        if obj == self.widget and event.type() == QEvent.Type.Resize:
            width, height = event.size().width(), event.size().height()
            logger.debug("Container resized", width=width, height=height)
            self.resized.emit(width, height)
            for callback in list(self._callbacks):
                callback(width, height)

        # Pass event to default handler
        return super().eventFilter(obj, event)
