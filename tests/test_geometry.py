"""Properties of the angle/coordinate helpers."""

import math

from hypothesis import given, settings, strategies as st
import numpy as np
from numpy.testing import assert_allclose
import pytest

from dial_sweep.models import DialConfig, ViewportGeometry
from dial_sweep.utils.geometry import (
    arc_bounds,
    degrees,
    label_points,
    point_for_angle,
    point_for_position,
    position_angle,
    radians,
)

counts = st.integers(min_value=1, max_value=360)
positions = st.integers(min_value=-10_000, max_value=10_000)
sizes = st.floats(min_value=0.0, max_value=4000.0, allow_nan=False)
radii = st.floats(min_value=0.0, max_value=2000.0, allow_nan=False)


def _angle_diff(a: float, b: float) -> float:
    d = math.fmod(a - b, 2.0 * math.pi)
    return min(abs(d), 2.0 * math.pi - abs(d))


@given(n=counts, k=positions)
@settings(max_examples=200)
def test_position_angle_is_periodic_in_selection_count(n: int, k: int) -> None:
    cfg = DialConfig(selection_count=n)
    assert _angle_diff(position_angle(k, cfg), position_angle(k % n, cfg)) < 1e-6


def test_position_angle_is_not_reduced() -> None:
    cfg = DialConfig(selection_count=12)
    assert position_angle(12, cfg) == pytest.approx(
        position_angle(0, cfg) + 2.0 * math.pi
    )


def test_default_offset_points_position_zero_straight_up() -> None:
    cfg = DialConfig()
    assert position_angle(0, cfg) == pytest.approx(1.5 * math.pi)
    vp = ViewportGeometry.from_size(200, 200)
    x, y = point_for_position(0, 50.0, cfg, vp)
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(50.0)


@given(n=counts, pos=positions, r=radii, w=sizes, h=sizes)
@settings(max_examples=150)
def test_point_for_position_lies_on_circle(
    n: int, pos: int, r: float, w: float, h: float
) -> None:
    cfg = DialConfig(selection_count=n)
    vp = ViewportGeometry.from_size(w, h)
    x, y = point_for_position(pos, r, cfg, vp)
    dist = math.hypot(x - w / 2.0, y - h / 2.0)
    assert dist == pytest.approx(r, rel=1e-9, abs=1e-6)


def test_point_for_angle_propagates_nan() -> None:
    vp = ViewportGeometry.from_size(100, 100)
    x, y = point_for_angle(float("nan"), 10.0, vp)
    assert math.isnan(x) and math.isnan(y)
    x, y = point_for_angle(float("inf"), 10.0, vp)
    assert math.isnan(x) and math.isnan(y)


def test_zero_viewport_collapses_to_origin() -> None:
    vp = ViewportGeometry.from_size(0, 0)
    assert vp.radius == 0.0
    x, y = point_for_angle(1.234, vp.radius, vp)
    assert (x, y) == (0.0, 0.0)


def test_label_points_match_point_for_position() -> None:
    cfg = DialConfig(selection_count=7)
    vp = ViewportGeometry.from_size(320, 240)
    pts = label_points(110.0, cfg, vp)
    assert pts.shape == (7, 2)
    expected = np.array(
        [point_for_position(i, 110.0, cfg, vp) for i in range(7)], dtype=np.float64
    )
    assert_allclose(pts, expected, atol=1e-9)


def test_arc_bounds_is_centred_square() -> None:
    vp = ViewportGeometry.from_size(300, 200)
    left, top, right, bottom = arc_bounds(40.0, vp)
    assert (left, top, right, bottom) == (110.0, 60.0, 190.0, 140.0)


def test_degree_radian_conversion() -> None:
    assert degrees(math.pi) == pytest.approx(180.0)
    assert radians(90.0) == pytest.approx(math.pi / 2.0)
    assert degrees(radians(37.5)) == pytest.approx(37.5)
