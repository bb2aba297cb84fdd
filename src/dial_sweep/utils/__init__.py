"""Utility helpers; Qt-specific helpers live in :mod:`dial_sweep.utils.qt`."""

from .geometry import (
    arc_bounds,
    clamp,
    degrees,
    label_points,
    point_for_angle,
    point_for_position,
    position_angle,
    radians,
)

__all__ = [
    "arc_bounds",
    "clamp",
    "degrees",
    "label_points",
    "point_for_angle",
    "point_for_position",
    "position_angle",
    "radians",
]
