"""Dataclasses describing configuration and animation state for dial_sweep."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Mapping

import json
import math


class ConfigurationError(ValueError):
    """Raised when a dial is configured with values it cannot animate."""


@dataclass(frozen=True)
class DialStyle:
    """Fixed palette used when turning dial state into draw commands."""

    dial_color: str = "#888888"  # idle, selection 0
    engaged_color: str = "#00ff00"  # any selection >= 1
    label_color: str = "#000000"
    label_text_size: float = 40.0
    marker_color: str = "#ff0000"
    arc_color: str = "#0000ff"
    diagnostics_color: str = "#ff00ff"


@dataclass(frozen=True)
class DialConfig:
    """Immutable configuration for a dial and its sweep animation."""

    selection_count: int = 12
    duration_ms: int = 1000
    angular_offset_slots: float = 9.0
    label_radius_offset: float = 20.0
    marker_radius_offset: float = 35.0
    stroke_width: float = 15.0
    marker_dot_radius: float = 20.0
    integer_slot_degrees: bool = False  # truncate 360 / N like the legacy widget
    diagnostics: bool = False
    style: DialStyle = field(default_factory=DialStyle)

    def __post_init__(self) -> None:
        for name in ("selection_count", "duration_ms"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.selection_count <= 0:
            raise ConfigurationError(
                f"selection_count must be > 0, got {self.selection_count!r}"
            )
        if self.duration_ms <= 0:
            raise ConfigurationError(
                f"duration_ms must be > 0, got {self.duration_ms!r}"
            )
        if self.stroke_width < 0:
            raise ConfigurationError(
                f"stroke_width must be >= 0, got {self.stroke_width!r}"
            )
        if self.marker_dot_radius < 0:
            raise ConfigurationError(
                f"marker_dot_radius must be >= 0, got {self.marker_dot_radius!r}"
            )

    # ------------------------------ Derived -----------------------------------

    @property
    def slot_radians(self) -> float:
        """Angle between two adjacent positions, in radians."""
        return 2.0 * math.pi / self.selection_count

    @property
    def slot_degrees(self) -> float:
        """Angle between two adjacent positions, in degrees."""
        if self.integer_slot_degrees:
            return float(360 // self.selection_count)
        return 360.0 / self.selection_count

    @property
    def angular_offset(self) -> float:
        """Base rotation of position 0, in radians."""
        return self.angular_offset_slots * self.slot_radians

    # ---------------------------- Serialisation -------------------------------

    def replace(self, **changes: Any) -> "DialConfig":
        return replace(self, **changes)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "DialConfig":
        """Build a config from a plain mapping, filling gaps with defaults."""
        if not isinstance(data, Mapping):
            raise ConfigurationError("Dial configuration must be a JSON object.")
        d = DialConfig.__dataclass_fields__
        s: Mapping[str, Any] = data.get("style", {}) or {}
        if not isinstance(s, Mapping):
            raise ConfigurationError("'style' must be a JSON object.")
        base = DialStyle()
        try:
            style = DialStyle(
                dial_color=str(s.get("dial_color", base.dial_color)),
                engaged_color=str(s.get("engaged_color", base.engaged_color)),
                label_color=str(s.get("label_color", base.label_color)),
                label_text_size=float(
                    s.get("label_text_size", base.label_text_size)
                ),
                marker_color=str(s.get("marker_color", base.marker_color)),
                arc_color=str(s.get("arc_color", base.arc_color)),
                diagnostics_color=str(
                    s.get("diagnostics_color", base.diagnostics_color)
                ),
            )
            return DialConfig(
                selection_count=int(
                    data.get("selection_count", d["selection_count"].default)
                ),
                duration_ms=int(data.get("duration_ms", d["duration_ms"].default)),
                angular_offset_slots=float(
                    data.get(
                        "angular_offset_slots", d["angular_offset_slots"].default
                    )
                ),
                label_radius_offset=float(
                    data.get("label_radius_offset", d["label_radius_offset"].default)
                ),
                marker_radius_offset=float(
                    data.get(
                        "marker_radius_offset", d["marker_radius_offset"].default
                    )
                ),
                stroke_width=float(
                    data.get("stroke_width", d["stroke_width"].default)
                ),
                marker_dot_radius=float(
                    data.get("marker_dot_radius", d["marker_dot_radius"].default)
                ),
                integer_slot_degrees=bool(
                    data.get(
                        "integer_slot_degrees", d["integer_slot_degrees"].default
                    )
                ),
                diagnostics=bool(data.get("diagnostics", d["diagnostics"].default)),
                style=style,
            )
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid dial configuration: {exc}") from exc

    @staticmethod
    def from_json(text: str) -> "DialConfig":
        try:
            data: Dict = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Malformed configuration JSON: {exc}") from exc
        return DialConfig.from_dict(data)


@dataclass
class ViewportGeometry:
    """Widget size as reported by the host layout system."""

    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0

    @staticmethod
    def from_size(width: float, height: float) -> "ViewportGeometry":
        vp = ViewportGeometry()
        vp.resize(width, height)
        return vp

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.radius = min(self.width, self.height) / 2.0 * 0.8

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2.0, self.height / 2.0


@dataclass
class AnimationState:
    """Mutable sweep state owned by a single :class:`SweepAnimator`."""

    last_selection: int = 0
    active_selection: int = 0
    progress: float = 1.0  # 1 == idle
    duration_ms: int = 1000  # copied from DialConfig, read-only
    marker_angle: float = 0.0  # radians
    start_angle_deg: float = 0.0
    sweep_angle_deg: float = 0.0


__all__ = [
    "ConfigurationError",
    "DialStyle",
    "DialConfig",
    "ViewportGeometry",
    "AnimationState",
]
