from unittest.mock import Mock

import pytest
from PyQt6.QtCore import QSize
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QApplication, QWidget

from horizontal_timeline.core import UnsortedInputError
from horizontal_timeline.models import TimelineSettings
from horizontal_timeline.ui import QtResizeObserver, StyleRegistry, TimelineHost
from horizontal_timeline.utils.error_handler import ErrorHandler

VALUES = ["2020-01-01", "2020-01-02", "2020-02-01"]
NAMES = ["Kickoff", "Review", "Release"]


@pytest.fixture
def surface():
    return Mock()


@pytest.fixture
def container(app):
    widget = QWidget()
    widget.resize(800, 100)
    return widget


def send_resize(widget, width, height):
    QApplication.sendEvent(widget, QResizeEvent(QSize(width, height), widget.size()))


def test_host_renders_nothing_before_measurement(surface):
    host = TimelineHost(surface)
    assert host.set_events(VALUES, NAMES) is None
    surface.assert_not_called()


def test_host_renders_after_resize(surface):
    host = TimelineHost(surface)
    host.set_events(VALUES, NAMES)
    props = host.resize(800, 100)
    surface.assert_called_once_with(props)
    assert [e.distance for e in props.events] == [100, 205, 410]
    assert host.last_props is props


def test_host_select_changes_index(surface):
    host = TimelineHost(surface)
    host.resize(800, 100)
    host.set_events(VALUES, NAMES)
    assert host.select(2).index == 2
    with pytest.raises(IndexError):
        host.select(3)


def test_host_applies_new_settings(surface):
    host = TimelineHost(surface)
    host.resize(800, 100)
    host.set_events(VALUES, NAMES)
    props = host.set_settings(TimelineSettings(line_padding=20))
    assert props.events[0].distance == 20


def test_host_reports_layout_errors(surface):
    feedback = Mock()
    host = TimelineHost(surface, error_handler=ErrorHandler(feedback))
    host.resize(800, 100)
    with pytest.raises(UnsortedInputError):
        host.set_events(list(reversed(VALUES)), NAMES)
    title, message = feedback.call_args[0]
    assert title == "Timeline Error"
    assert message.startswith("Failed to lay out timeline")
    surface.assert_not_called()


def test_resize_observer_reports_size(container):
    observer = QtResizeObserver(container)
    sizes = []
    observer.subscribe(lambda w, h: sizes.append((w, h)))
    send_resize(container, 640, 120)
    assert sizes == [(640, 120)]
    assert observer.current_size() == (800, 100)


def test_host_relayouts_on_container_resize(surface, container):
    observer = QtResizeObserver(container)
    host = TimelineHost(surface, resize_observer=observer)
    host.set_events(VALUES, NAMES)
    assert host.last_props.visible_width == 720

    send_resize(container, 300, 90)
    assert host.last_props.visible_width == 220
    assert host.last_props.total_width == 510
    assert host.last_props.height == 90

    host.close()
    send_resize(container, 1000, 90)
    assert host.last_props.visible_width == 220


def test_host_relayouts_on_style_change(surface, app):
    registry = StyleRegistry(
        {"dark": {"outline": "#4a4a4a", "background": "#1e1e1e", "foreground": "#e6e6e6"}}
    )
    host = TimelineHost(surface, style_registry=registry)
    host.resize(800, 100)
    host.set_events(VALUES, NAMES)
    assert host.last_props.styles.background == "#f8f8f8"

    registry.apply_style("dark")
    assert host.last_props.styles.background == "#1e1e1e"
    assert surface.call_count == 2


def test_host_relayouts_on_styles_reload(surface, app):
    registry = StyleRegistry({"dark": {"background": "#000000"}})
    host = TimelineHost(surface, style_registry=registry)
    host.resize(800, 100)
    host.set_events(VALUES, NAMES)
    registry.apply_style("dark")

    registry.reload_styles({"dark": {"background": "#111111"}})
    assert host.last_props.styles.background == "#111111"

    registry.reload_styles({})
    assert host.last_props.styles.background == "#f8f8f8"

    host.close()
    registry.reload_styles({"default": {"background": "#222222"}})
    assert host.last_props.styles.background == "#f8f8f8"


def test_surface_click_selects_event(surface):
    host = TimelineHost(surface)
    host.resize(800, 100)
    props = host.set_events(VALUES, NAMES)
    assert props.index == 0

    props.index_click(2)
    assert host.index == 2
    assert host.last_props.index == 2


def test_custom_index_click_is_kept(surface):
    clicks = Mock()
    host = TimelineHost(surface, settings=TimelineSettings(index_click=clicks))
    host.resize(800, 100)
    host.set_events(VALUES, NAMES).index_click(1)
    clicks.assert_called_once_with(1)
    assert host.index == 0


def test_disconnected_observer_stops_reporting(container):
    observer = QtResizeObserver(container)
    sizes = []
    observer.subscribe(lambda w, h: sizes.append((w, h)))
    observer.disconnect_widget()
    send_resize(container, 640, 120)
    assert sizes == []
