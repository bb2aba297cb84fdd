"""Angular state machine and draw-command generation for the dial."""

from .animator import SweepAnimator, SweepPhase
from .commands import (
    Arc,
    Circle,
    DrawCommand,
    PaintStyle,
    Polyline,
    RectBounds,
    Text,
)
from .dial import Dial
from .render import build_draw_commands

__all__ = [
    "Dial",
    "SweepAnimator",
    "SweepPhase",
    "build_draw_commands",
    "Arc",
    "Circle",
    "DrawCommand",
    "PaintStyle",
    "Polyline",
    "RectBounds",
    "Text",
]
