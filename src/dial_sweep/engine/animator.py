"""Sweep state machine moving the dial marker between adjacent positions."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Tuple

import logging

from ..models import AnimationState, DialConfig
from ..utils.geometry import clamp, position_angle

logger = logging.getLogger(__name__)


class SweepPhase(Enum):
    IDLE = "idle"
    SWEEPING = "sweeping"


class SweepAnimator:
    """Drive the marker from the committed selection towards the target.

    Transitions::

        IDLE --advance()--> SWEEPING --tick() reaches 1--> IDLE
        SWEEPING --advance()--> SWEEPING (restarts from the committed selection)

    The arc start angle is running state: every commit rotates it forward by
    one slot and it is never recomputed from the selection.
    """

    def __init__(self, config: DialConfig) -> None:
        self._config = config
        self._state = AnimationState(
            last_selection=0,
            active_selection=0,
            progress=1.0,
            duration_ms=config.duration_ms,
            marker_angle=position_angle(0, config),
            start_angle_deg=config.angular_offset_slots * config.slot_degrees,
            sweep_angle_deg=0.0,
        )

    # ----------------------------- Properties ---------------------------------

    @property
    def config(self) -> DialConfig:
        return self._config

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def phase(self) -> SweepPhase:
        return SweepPhase.IDLE if self.is_idle() else SweepPhase.SWEEPING

    def is_idle(self) -> bool:
        return self._state.progress >= 1.0

    def snapshot(self) -> AnimationState:
        """Return a detached copy of the current state."""
        return replace(self._state)

    def current_marker_angle(self) -> float:
        return self._state.marker_angle

    def current_arc(self) -> Tuple[float, float]:
        """Return ``(start_angle_deg, sweep_angle_deg)`` for this frame."""
        return self._state.start_angle_deg, self._state.sweep_angle_deg

    # ----------------------------- Transitions --------------------------------

    def advance(self) -> int:
        """Target the next position and restart the sweep; return the target."""
        st = self._state
        n = self._config.selection_count
        if not self.is_idle():
            logger.debug(
                "Abandoning sweep %d -> %d at progress %.3f",
                st.last_selection,
                st.active_selection,
                st.progress,
            )
        st.active_selection = (st.active_selection + 1) % n
        st.progress = 0.0
        st.marker_angle = position_angle(st.last_selection, self._config)
        st.sweep_angle_deg = 0.0
        logger.debug("Sweep %d -> %d started", st.last_selection, st.active_selection)
        return st.active_selection

    def tick(self, delta_ms: float) -> bool:
        """Advance progress by ``delta_ms``; return True when this tick commits."""
        st = self._state
        if self.is_idle():
            return False

        step = max(0.0, float(delta_ms)) / float(self._config.duration_ms)
        st.progress = clamp(st.progress + step, 0.0, 1.0)

        if st.progress >= 1.0:
            self._commit()
            return True

        cfg = self._config
        st.marker_angle = (
            position_angle(st.last_selection, cfg) + cfg.slot_radians * st.progress
        )
        st.sweep_angle_deg = cfg.slot_degrees * st.progress
        return False

    def _commit(self) -> None:
        st = self._state
        cfg = self._config
        st.progress = 1.0
        st.last_selection = st.active_selection
        st.marker_angle = position_angle(st.active_selection, cfg)
        st.sweep_angle_deg = 0.0
        st.start_angle_deg += cfg.slot_degrees
        logger.debug(
            "Committed selection %d, arc start now %.3f deg",
            st.last_selection,
            st.start_angle_deg,
        )


__all__ = ["SweepAnimator", "SweepPhase"]
