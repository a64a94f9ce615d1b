"""Shared layout constants used as defaults by the timeline host."""

# Horizontal footprint reserved for a single event label
DATE_WIDTH = 85

# Bounds on the time-proportional padding between two labels
MIN_EVENT_PADDING = 20
MAX_EVENT_PADDING = 120

# Space before the first and after the last event
TIMELINE_PADDING = 100

# Width taken by the left/right navigation buttons of the events bar
NAVIGATION_BUTTONS_WIDTH = 80
