from .timeline_layout_service import TimelineLayoutService

__all__ = ["TimelineLayoutService"]
