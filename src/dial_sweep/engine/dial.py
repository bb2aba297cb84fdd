"""Widget-level dial state driven by host callbacks."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

import logging
import threading

from ..models import AnimationState, DialConfig, ViewportGeometry
from .animator import SweepAnimator
from .commands import DrawCommand
from .render import build_draw_commands

logger = logging.getLogger(__name__)


class Dial:
    """Own one dial's viewport and sweep state.

    The host calls :meth:`on_advance` for user actions, :meth:`on_tick` from
    its frame clock, :meth:`on_resize` from layout and
    :meth:`build_draw_commands` from painting. Calls are serialised with a
    per-instance lock so a host that delivers them from several threads
    cannot interleave the read-modify-write of the animation state.
    """

    def __init__(self, config: Optional[DialConfig] = None) -> None:
        self._config = config if config is not None else DialConfig()
        self._viewport = ViewportGeometry()
        self._animator = SweepAnimator(self._config)
        self._lock = threading.Lock()

    @property
    def config(self) -> DialConfig:
        return self._config

    @property
    def viewport(self) -> ViewportGeometry:
        """Copy of the current viewport; mutating it has no effect."""
        with self._lock:
            return replace(self._viewport)

    @property
    def state(self) -> AnimationState:
        """Copy of the animation state; mutating it has no effect."""
        with self._lock:
            return self._animator.snapshot()

    def is_idle(self) -> bool:
        with self._lock:
            return self._animator.is_idle()

    def on_advance(self) -> int:
        with self._lock:
            return self._animator.advance()

    def on_tick(self, delta_ms: float) -> bool:
        """Feed elapsed time; return True when the sweep committed this tick."""
        with self._lock:
            return self._animator.tick(delta_ms)

    def on_resize(self, width: float, height: float) -> None:
        with self._lock:
            self._viewport.resize(width, height)
            logger.debug(
                "Resized to %.0fx%.0f, radius %.2f",
                self._viewport.width,
                self._viewport.height,
                self._viewport.radius,
            )

    def build_draw_commands(
        self, viewport: Optional[ViewportGeometry] = None
    ) -> List[DrawCommand]:
        with self._lock:
            vp = viewport if viewport is not None else self._viewport
            return build_draw_commands(vp, self._config, self._animator.state)


__all__ = ["Dial"]
