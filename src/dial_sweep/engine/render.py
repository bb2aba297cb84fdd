"""Turn dial state into an ordered list of draw commands."""

from __future__ import annotations

from typing import List

from ..models import AnimationState, DialConfig, ViewportGeometry
from ..utils.geometry import (
    arc_bounds,
    label_points,
    point_for_angle,
    point_for_position,
)
from .commands import (
    Arc,
    Circle,
    DrawCommand,
    PaintStyle,
    Polyline,
    RectBounds,
    Text,
)

LABEL_DOT_RADIUS = 4.0
MARKER_PATH_STROKE = 2.0
DIAGNOSTICS_STROKE = 1.0


def _rect_outline(bounds: RectBounds, style: PaintStyle) -> Polyline:
    b = bounds
    return Polyline(
        points=(
            (b.left, b.top),
            (b.right, b.top),
            (b.right, b.bottom),
            (b.left, b.bottom),
            (b.left, b.top),
        ),
        style=style,
    )


def _diagnostics(
    viewport: ViewportGeometry,
    config: DialConfig,
    state: AnimationState,
    bounds: List[RectBounds],
    marker_radius: float,
) -> List[DrawCommand]:
    style = PaintStyle(
        config.style.diagnostics_color, fill=False, stroke_width=DIAGNOSTICS_STROKE
    )
    out: List[DrawCommand] = [_rect_outline(b, style) for b in bounds]
    cx, cy = viewport.center
    out.append(Polyline(points=((0.0, cy), (viewport.width, cy)), style=style))
    out.append(Polyline(points=((cx, 0.0), (cx, viewport.height)), style=style))
    x, y = point_for_position(state.last_selection, marker_radius, config, viewport)
    out.append(Circle(x, y, config.marker_dot_radius, style))
    return out


def build_draw_commands(
    viewport: ViewportGeometry, config: DialConfig, state: AnimationState
) -> List[DrawCommand]:
    """Return the commands for one frame, background first.

    The result depends only on the three arguments. The marker radius is
    clamped at 0, so a viewport too small for the marker offset (any side
    under about 88 px with the defaults, or zero size) draws the marker path,
    the marker and the inner arc collapsed onto the centre instead of with
    a negative radius.
    """
    st = config.style
    cx, cy = viewport.center
    radius = viewport.radius
    commands: List[DrawCommand] = []

    dial_color = st.engaged_color if state.active_selection >= 1 else st.dial_color
    commands.append(Circle(cx, cy, radius, PaintStyle(dial_color)))

    label_radius = radius + config.label_radius_offset
    label_dot = PaintStyle(st.label_color)
    label_text = PaintStyle(st.label_color, text_size=st.label_text_size)
    for i, (x, y) in enumerate(label_points(label_radius, config, viewport)):
        commands.append(Circle(float(x), float(y), LABEL_DOT_RADIUS, label_dot))
        commands.append(Text(float(x), float(y), str(i), label_text))

    marker_radius = max(0.0, radius - config.marker_radius_offset)
    commands.append(
        Circle(
            cx,
            cy,
            marker_radius,
            PaintStyle(st.marker_color, fill=False, stroke_width=MARKER_PATH_STROKE),
        )
    )

    mx, my = point_for_angle(state.marker_angle, marker_radius, viewport)
    commands.append(
        Circle(mx, my, config.marker_dot_radius, PaintStyle(st.marker_color))
    )

    bounds = [
        RectBounds(*arc_bounds(label_radius, viewport)),
        RectBounds(*arc_bounds(marker_radius, viewport)),
    ]
    for b in bounds:
        commands.append(
            Arc(
                bounds=b,
                start_angle_deg=state.start_angle_deg,
                sweep_angle_deg=state.sweep_angle_deg,
                color=st.arc_color,
                stroke_width=config.stroke_width,
            )
        )

    if config.diagnostics:
        commands.extend(_diagnostics(viewport, config, state, bounds, marker_radius))

    return commands


__all__ = ["build_draw_commands", "LABEL_DOT_RADIUS"]
