"""
SVG rendering of a keyboard mapping.

The keyboard is drawn as a regular grid of hexagons, alternate rows offset by
half a key, and the whole grid tilted to match the instrument. Each key is
filled with its (lightened) color and labeled with its note name.
"""

import logging
import math
import os
from pathlib import Path
from typing import Iterator, Union

from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QBrush, QColor, QGuiApplication, QPainter, QPainterPath, QPen
from PySide6.QtSvg import QSvgGenerator

from .adjacency import MoveMap
from .colors import RGBColor
from .keyboard import ROW_SPANS, Direction, Keyboard, KeyPosition

logger = logging.getLogger(__name__)

# Distance between the centers of neighboring keys.
SPACING = 10.0

# Rotation of the whole grid.
TILT = math.radians(16.0)

# Room around the outermost keys.
MARGIN = SPACING

_app = None


def _application() -> QGuiApplication:
    """Text rendering needs a GUI application; make a headless one if needed."""
    global _app
    app = QGuiApplication.instance()
    if app is None:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
        app = QGuiApplication([])
        _app = app
    return app


def grid_positions() -> Iterator[tuple[int, int, KeyPosition]]:
    """
    Every key with its display column and row, scanning rows top to bottom.

    Each row start is found from the previous one by moving right to the new
    starting column and then down, so the walk never leaves the keyboard.
    """
    mv = MoveMap()
    row_start = KeyPosition.origin()
    last_x0 = 0

    for y, (x0, length) in enumerate(ROW_SPANS):
        if y > 0:
            while x0 > last_x0:
                row_start = _must_move(mv, row_start, Direction.RIGHT)
                last_x0 += 1
            down = Direction.DOWN_RIGHT if y % 2 == 1 else Direction.DOWN_LEFT
            row_start = _must_move(mv, row_start, down)

        key = row_start
        for x in range(x0, x0 + length):
            if x > x0:
                key = _must_move(mv, key, Direction.RIGHT)
            yield x, y, key


def _must_move(mv: MoveMap, pos: KeyPosition, direction: Direction) -> KeyPosition:
    dest = mv.step(pos, direction)
    if dest is None:
        raise RuntimeError(f"Row table leaves the keyboard at {pos} moving {direction.value}")
    return dest


class SvgOut:
    """An SVG generator for a hex-grid keyboard."""

    def __init__(self):
        self.keys: list[tuple[int, int, RGBColor, str]] = []

    def add(self, x: int, y: int, color: RGBColor, label: str) -> None:
        """Add a single key, with a given color and label."""
        self.keys.append((x, y, color, label))

    @staticmethod
    def coord(x: int, y: int) -> tuple[float, float]:
        """
        Position of a key in drawing space. Odd rows are shifted half a key to
        the right.
        """
        px = x * SPACING + (y % 2) * (SPACING / 2.0)
        py = y * SPACING * math.sqrt(3) / 2.0
        # Negate the tilt, since y runs downward.
        tilt = -TILT
        return (px * math.cos(tilt) - py * math.sin(tilt),
                px * math.sin(tilt) + py * math.cos(tilt))

    @staticmethod
    def hex_path(cx: float, cy: float) -> QPainterPath:
        """A hexagon around the given center, rotated with the grid."""
        # SPACING is the distance between edges; get the distance to the corners.
        radius = SPACING / math.sqrt(3)
        path = QPainterPath()
        for i in range(6):
            angle = 2.0 * math.pi / 6.0 * i + TILT
            point = QPointF(cx + radius * math.sin(angle), cy + radius * math.cos(angle))
            if i == 0:
                path.moveTo(point)
            else:
                path.lineTo(point)
        path.closeSubpath()
        return path

    def view_box(self) -> QRectF:
        points = [self.coord(x, y) for x, y, _, _ in self.keys] or [(0.0, 0.0)]
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        left, top = min(xs) - MARGIN, min(ys) - MARGIN
        return QRectF(left, top, max(xs) + MARGIN - left, max(ys) + MARGIN - top)

    def save(self, path: Union[str, Path]) -> None:
        """
        Write the keys out as an SVG file.

        Raises:
            OSError: If the file cannot be written.
        """
        _application()
        box = self.view_box()

        generator = QSvgGenerator()
        generator.setFileName(str(path))
        generator.setSize(QSize(int(box.width() * 4), int(box.height() * 4)))
        generator.setViewBox(box)
        generator.setTitle("Keyboard layout")

        painter = QPainter()
        if not painter.begin(generator):
            raise OSError(f"Cannot write SVG to {path}")
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            font = painter.font()
            font.setPixelSize(3)
            painter.setFont(font)

            pen = QPen(QColor("black"))
            pen.setWidthF(0.3)
            for x, y, color, _ in self.keys:
                cx, cy = self.coord(x, y)
                painter.setPen(pen)
                painter.setBrush(QBrush(QColor(color.lighten().to_hex())))
                painter.drawPath(self.hex_path(cx, cy))

            painter.setPen(QColor("black"))
            for x, y, _, label in self.keys:
                if not label:
                    continue
                cx, cy = self.coord(x, y)
                rect = QRectF(cx - SPACING / 2.0, cy - SPACING / 2.0, SPACING, SPACING)
                painter.drawText(rect, Qt.AlignCenter, label)
        finally:
            painter.end()

        logger.info("Saved %d keys to %s", len(self.keys), path)


def render_svg(keyboard: Keyboard, path: Union[str, Path]) -> None:
    """Draw every key of the keyboard to an SVG file; empty keys are white and unlabeled."""
    writer = SvgOut()
    for x, y, pos in grid_positions():
        record = keyboard.get(pos)
        if record is None:
            writer.add(x, y, RGBColor.white(), "")
        else:
            writer.add(x, y, record.color, record.label)
    writer.save(path)
