"""Qt application entry point hosting a single animated dial."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import logging
import sys

from PySide6 import QtCore, QtGui, QtWidgets

APP_VERSION: str

if __package__ in (None, ""):
    PACKAGE_ROOT = Path(__file__).resolve().parents[1]
    if str(PACKAGE_ROOT) not in sys.path:
        sys.path.insert(0, str(PACKAGE_ROOT))

    import dial_sweep as _pkg

    from dial_sweep.config import build_arg_parser, config_from_args
    from dial_sweep.engine import Dial
    from dial_sweep.logging_config import setup_logging
    from dial_sweep.models import ConfigurationError, DialConfig
    from dial_sweep.utils.qt import paint_commands

    APP_VERSION = getattr(_pkg, "__version__", "0.0.0")
else:
    from . import __version__ as APP_VERSION
    from .config import build_arg_parser, config_from_args
    from .engine import Dial
    from .logging_config import setup_logging
    from .models import ConfigurationError, DialConfig
    from .utils.qt import paint_commands

logger = logging.getLogger("dial_sweep.app")


# -------------------------------- Dial Widget ---------------------------------


class DialWidget(QtWidgets.QWidget):
    """Click to advance the dial; the marker sweeps to the next position."""

    selectionChanged = QtCore.Signal(int)
    sweepFinished = QtCore.Signal(int)

    FRAME_INTERVAL_MS = 16

    def __init__(
        self,
        cfg: Optional[DialConfig] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._dial = Dial(cfg)
        self.setMinimumSize(200, 200)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

        self._clock = QtCore.QElapsedTimer()
        self._frame_timer = QtCore.QTimer(self)
        self._frame_timer.setInterval(self.FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

    # ----------------------------- Properties ---------------------------------

    @property
    def dial(self) -> Dial:
        return self._dial

    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(400, 400)

    # ----------------------------- Interaction --------------------------------

    def advance(self) -> None:
        target = self._dial.on_advance()
        self.selectionChanged.emit(target)
        self._clock.start()
        if not self._frame_timer.isActive():
            self._frame_timer.start()
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() == QtCore.Qt.MouseButton.LeftButton and self.rect().contains(
            e.position().toPoint()
        ):
            self.advance()
            e.accept()
            return
        super().mouseReleaseEvent(e)

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        key = e.key()
        if key in (
            QtCore.Qt.Key.Key_Space,
            QtCore.Qt.Key.Key_Return,
            QtCore.Qt.Key.Key_Enter,
        ):
            self.advance()
        elif key == QtCore.Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(e)

    def _on_frame(self) -> None:
        elapsed = self._clock.restart()
        if self._dial.on_tick(float(elapsed)):
            self.sweepFinished.emit(self._dial.state.last_selection)
        if self._dial.is_idle():
            self._frame_timer.stop()
        self.update()

    # ------------------------------ Layout ------------------------------------

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        size = e.size()
        self._dial.on_resize(size.width(), size.height())
        super().resizeEvent(e)

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        if self._dial.viewport.width != self.width() or (
            self._dial.viewport.height != self.height()
        ):
            self._dial.on_resize(self.width(), self.height())
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QtGui.QPainter.RenderHint.TextAntialiasing, True)
        try:
            paint_commands(painter, self._dial.build_draw_commands())
        finally:
            painter.end()


# ---------------------------------- Main --------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    try:
        cfg = config_from_args(args)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(2)

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    app.setApplicationName("dial_sweep")
    app.setApplicationVersion(APP_VERSION)

    widget = DialWidget(cfg)
    widget.setWindowTitle(f"dial_sweep {APP_VERSION}")
    widget.selectionChanged.connect(
        lambda n: logger.info("Selection advanced to %d", n)
    )
    widget.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
