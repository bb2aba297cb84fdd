"""Renderer-neutral draw commands produced once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class PaintStyle:
    color: str
    fill: bool = True
    stroke_width: float = 0.0
    text_size: float = 0.0


@dataclass(frozen=True)
class RectBounds:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    style: PaintStyle


@dataclass(frozen=True)
class Arc:
    """Open stroked arc; angles in degrees, clockwise from three o'clock."""

    bounds: RectBounds
    start_angle_deg: float
    sweep_angle_deg: float
    color: str
    stroke_width: float


@dataclass(frozen=True)
class Text:
    """Label horizontally centred on ``x`` with its baseline at ``y``."""

    x: float
    y: float
    content: str
    style: PaintStyle


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Tuple[float, float], ...]
    style: PaintStyle


DrawCommand = Union[Circle, Arc, Text, Polyline]


__all__ = [
    "PaintStyle",
    "RectBounds",
    "Circle",
    "Arc",
    "Text",
    "Polyline",
    "DrawCommand",
]
