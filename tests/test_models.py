"""Configuration validation and viewport sizing."""

import json
import math

import pytest

from dial_sweep.models import (
    ConfigurationError,
    DialConfig,
    DialStyle,
    ViewportGeometry,
)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"selection_count": 0},
        {"selection_count": -3},
        {"duration_ms": 0},
        {"duration_ms": -1000},
        {"stroke_width": -1.0},
        {"marker_dot_radius": -0.5},
        {"selection_count": 2.5},
        {"selection_count": True},
        {"duration_ms": 0.5},
        {"duration_ms": "1000"},
    ],
)
def test_invalid_config_is_rejected(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        DialConfig(**kwargs)


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        DialConfig(duration_ms=0)


def test_defaults() -> None:
    cfg = DialConfig()
    assert cfg.selection_count == 12
    assert cfg.duration_ms == 1000
    assert cfg.angular_offset_slots == 9
    assert cfg.label_radius_offset == 20
    assert cfg.marker_radius_offset == 35
    assert cfg.stroke_width == 15
    assert cfg.slot_degrees == 30.0
    assert cfg.slot_radians == pytest.approx(math.pi / 6.0)
    assert cfg.angular_offset == pytest.approx(9 * math.pi / 6.0)


def test_config_is_immutable() -> None:
    cfg = DialConfig()
    with pytest.raises(AttributeError):
        cfg.selection_count = 4  # type: ignore[misc]


def test_replace_validates() -> None:
    cfg = DialConfig().replace(selection_count=5)
    assert cfg.selection_count == 5
    with pytest.raises(ConfigurationError):
        cfg.replace(duration_ms=0)


def test_json_round_trip_preserves_values() -> None:
    cfg = DialConfig(
        selection_count=5,
        duration_ms=250,
        diagnostics=True,
        style=DialStyle(arc_color="#123456"),
    )
    assert DialConfig.from_json(cfg.to_json()) == cfg


def test_from_dict_fills_defaults() -> None:
    cfg = DialConfig.from_dict({"selection_count": "8"})
    assert cfg.selection_count == 8
    assert cfg.duration_ms == 1000
    assert cfg.style == DialStyle()


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        json.dumps([1, 2, 3]),
        json.dumps({"selection_count": "many"}),
        json.dumps({"selection_count": 0}),
        json.dumps({"style": "red"}),
    ],
)
def test_from_json_rejects_bad_documents(text: str) -> None:
    with pytest.raises(ConfigurationError):
        DialConfig.from_json(text)


def test_viewport_radius_uses_shorter_side() -> None:
    vp = ViewportGeometry.from_size(500, 300)
    assert vp.radius == pytest.approx(120.0)
    assert vp.center == (250.0, 150.0)
    vp.resize(100, 400)
    assert vp.radius == pytest.approx(40.0)
    assert vp.center == (50.0, 200.0)
