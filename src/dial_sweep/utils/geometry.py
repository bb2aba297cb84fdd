"""Angle and coordinate helpers shared by the engine and the Qt host.

Angles are radians everywhere except at the arc boundary, where the
rasteriser expects degrees measured clockwise from three o'clock (y grows
downwards, so ``cos``/``sin`` already walk clockwise on screen).
"""

import math
from typing import Tuple

import numpy as np

from ..models import DialConfig, ViewportGeometry

Point = Tuple[float, float]
Bounds = Tuple[float, float, float, float]


def position_angle(pos: int, config: DialConfig) -> float:
    """Return the angle of position ``pos``; ``pos`` is not reduced modulo N."""
    return config.angular_offset + pos * config.slot_radians


def point_for_angle(angle: float, radius: float, viewport: ViewportGeometry) -> Point:
    """Return the point at ``angle``/``radius`` around the viewport centre.

    Non-finite input yields NaN coordinates rather than an exception.
    """
    with np.errstate(invalid="ignore"):
        x = radius * float(np.cos(angle)) + viewport.width / 2.0
        y = radius * float(np.sin(angle)) + viewport.height / 2.0
    return x, y


def point_for_position(
    pos: int, radius: float, config: DialConfig, viewport: ViewportGeometry
) -> Point:
    return point_for_angle(position_angle(pos, config), radius, viewport)


def label_points(
    radius: float, config: DialConfig, viewport: ViewportGeometry
) -> np.ndarray:
    """Return an ``(N, 2)`` array with the coordinates of every position."""
    idx = np.arange(config.selection_count, dtype=np.float64)
    angles = config.angular_offset + idx * config.slot_radians
    pts = np.empty((config.selection_count, 2), dtype=np.float64)
    pts[:, 0] = radius * np.cos(angles) + viewport.width / 2.0
    pts[:, 1] = radius * np.sin(angles) + viewport.height / 2.0
    return pts


def arc_bounds(radius: float, viewport: ViewportGeometry) -> Bounds:
    """Square ``(left, top, right, bottom)`` enclosing a circle of ``radius``."""
    cx, cy = viewport.center
    return cx - radius, cy - radius, cx + radius, cy + radius


def degrees(angle: float) -> float:
    return angle * 180.0 / math.pi


def radians(angle_deg: float) -> float:
    return angle_deg * math.pi / 180.0


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


__all__ = [
    "Point",
    "Bounds",
    "position_angle",
    "point_for_angle",
    "point_for_position",
    "label_points",
    "arc_bounds",
    "degrees",
    "radians",
    "clamp",
]
