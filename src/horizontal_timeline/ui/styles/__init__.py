from .style_registry import StyleRegistry

__all__ = ["StyleRegistry"]
