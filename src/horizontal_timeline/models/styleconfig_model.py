from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TimelineStyles:
    """Colour theme of the events bar."""

    outline: str = "#dfdfdf"
    background: str = "#f8f8f8"
    foreground: str = "#323232"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TimelineStyles":
        data = data or {}
        default = cls()
        return cls(
            outline=data.get("outline", default.outline),
            background=data.get("background", default.background),
            foreground=data.get("foreground", default.foreground),
        )


@dataclass(frozen=True)
class MotionConfig:
    """Spring parameters for the filling and sliding animations."""

    stiffness: float = 150
    damping: float = 25

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MotionConfig":
        data = data or {}
        default = cls()
        return cls(
            stiffness=data.get("stiffness", default.stiffness),
            damping=data.get("damping", default.damping),
        )
