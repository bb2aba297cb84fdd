"""Qt helper utilities: rasterising draw commands and grabbing pixels."""

from typing import Iterable

from PySide6 import QtCore, QtGui
import numpy as np

from ..engine.commands import Arc, Circle, DrawCommand, PaintStyle, Polyline, Text


def _pen(color: str, width: float) -> QtGui.QPen:
    pen = QtGui.QPen(QtGui.QColor(color))
    pen.setWidthF(float(width))
    return pen


def _apply_style(painter: QtGui.QPainter, style: PaintStyle) -> None:
    if style.fill:
        painter.setBrush(QtGui.QBrush(QtGui.QColor(style.color)))
    else:
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
    if style.fill and style.stroke_width <= 0:
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
    else:
        painter.setPen(_pen(style.color, max(style.stroke_width, 1.0)))


def qt_arc_angles(start_angle_deg: float, sweep_angle_deg: float) -> tuple[int, int]:
    """Convert clockwise degrees to Qt's counter-clockwise 1/16th degrees."""
    return int(round(-start_angle_deg * 16)), int(round(-sweep_angle_deg * 16))


def paint_commands(painter: QtGui.QPainter, commands: Iterable[DrawCommand]) -> None:
    """Draw ``commands`` in order with ``painter``."""
    for cmd in commands:
        painter.save()
        if isinstance(cmd, Circle):
            _apply_style(painter, cmd.style)
            painter.drawEllipse(QtCore.QPointF(cmd.cx, cmd.cy), cmd.r, cmd.r)
        elif isinstance(cmd, Arc):
            b = cmd.bounds
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
            painter.setPen(_pen(cmd.color, cmd.stroke_width))
            start, span = qt_arc_angles(cmd.start_angle_deg, cmd.sweep_angle_deg)
            painter.drawArc(
                QtCore.QRectF(b.left, b.top, b.width, b.height), start, span
            )
        elif isinstance(cmd, Text):
            font = painter.font()
            font.setPixelSize(max(1, int(round(cmd.style.text_size))))
            painter.setFont(font)
            painter.setPen(QtGui.QPen(QtGui.QColor(cmd.style.color)))
            advance = QtGui.QFontMetricsF(font).horizontalAdvance(cmd.content)
            painter.drawText(QtCore.QPointF(cmd.x - advance / 2.0, cmd.y), cmd.content)
        elif isinstance(cmd, Polyline):
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
            painter.setPen(_pen(cmd.style.color, max(cmd.style.stroke_width, 1.0)))
            painter.drawPolyline(
                QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in cmd.points])
            )
        else:
            painter.restore()
            raise TypeError(f"Unsupported draw command: {cmd!r}")
        painter.restore()


def qpixmap_to_bgr(pix: QtGui.QPixmap) -> np.ndarray:
    """Convert a :class:`~PySide6.QtGui.QPixmap` into a BGR NumPy array."""
    fmt = getattr(QtGui.QImage, "Format_RGBA8888", None)
    if fmt is None:
        fmt = QtGui.QImage.Format.Format_RGBA8888
    img: QtGui.QImage = pix.toImage().convertToFormat(fmt)
    width = img.width()
    height = img.height()
    bytes_per_line = img.bytesPerLine()
    buf = img.constBits()  # memoryview in PySide6
    arr = np.frombuffer(buf, np.uint8)
    arr = arr.reshape((height, bytes_per_line))  # include stride
    arr = arr[:, : width * 4]  # crop padding
    arr = arr.reshape((height, width, 4))
    rgba = arr.astype(np.uint8, copy=False)
    rgb = rgba[..., :3]
    bgr = rgb[..., ::-1]
    return np.ascontiguousarray(bgr)


__all__ = ["paint_commands", "qt_arc_angles", "qpixmap_to_bgr"]
