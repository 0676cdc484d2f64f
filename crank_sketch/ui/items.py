# -*- coding: utf-8 -*-
"""Graphics items used in the schematic scene.

The scene works in unit coordinates: the axes span [-1, 1] and the mechanism
layer is scaled so that OA + AB fits inside them. Joint dots and labels
ignore the view transform so they keep a constant on-screen size.
"""

from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPen, QColor, QPainterPath, QBrush, QFont
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsPathItem,
    QGraphicsSimpleTextItem,
)

from ..core.geometry import Point2
from ..utils.constants import DARK, TRACE

ARROW_HEAD_WIDTH = 0.025
ARROW_HEAD_HEIGHT = 0.05


def schematic_pen(color: str = DARK, width: float = 1.5) -> QPen:
    pen = QPen(QColor(color), width)
    pen.setCosmetic(True)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return pen


class TextMarker(QGraphicsSimpleTextItem):
    def __init__(self, text: str = ""):
        super().__init__(text)
        self.setZValue(30)
        self.setBrush(QColor(DARK))
        font = QFont()
        font.setPixelSize(20)
        self.setFont(font)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIgnoresTransformations, True)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setAcceptHoverEvents(False)


class JointItem(QGraphicsEllipseItem):
    """A labelled joint dot (O, A, B or M)."""

    def __init__(self, name: str, radius: float = 3.0):
        super().__init__(-radius, -radius, 2 * radius, 2 * radius)
        self.name = name
        self.setZValue(10)
        self.setBrush(QBrush(QColor(DARK)))
        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIgnoresTransformations, True)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.label = TextMarker(name)
        self.label.setParentItem(self)

    def set_point(self, p: Point2):
        # Non-finite coordinates hide the joint instead of corrupting the scene rect.
        finite = p.is_finite()
        self.setVisible(finite)
        if finite:
            self.setPos(QPointF(p.x, p.y))


class LinkItem(QGraphicsLineItem):
    def __init__(self, name: str):
        super().__init__()
        self.name = name
        self.setZValue(0)
        self.setPen(schematic_pen())
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)

    def set_ends(self, p1: Point2, p2: Point2):
        finite = p1.is_finite() and p2.is_finite()
        self.setVisible(finite)
        if finite:
            self.setLine(p1.x, p1.y, p2.x, p2.y)


class ArrowItem(QGraphicsPathItem):
    """Axis arrow from ``tail`` to ``head`` in unit coordinates."""

    def __init__(self, head: Point2, tail: Point2):
        super().__init__()
        self.setPen(schematic_pen())
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        dx, dy = head.x - tail.x, head.y - tail.y
        norm = (dx * dx + dy * dy) ** 0.5
        nx, ny = dx / norm, dy / norm
        sx, sy = -ny, nx
        back_x = head.x - nx * ARROW_HEAD_HEIGHT
        back_y = head.y - ny * ARROW_HEAD_HEIGHT
        half = ARROW_HEAD_WIDTH / 2.0
        path = QPainterPath(QPointF(tail.x, tail.y))
        path.lineTo(head.x, head.y)
        path.lineTo(back_x + sx * half, back_y + sy * half)
        path.moveTo(head.x, head.y)
        path.lineTo(back_x - sx * half, back_y - sy * half)
        self.setPath(path)


class TrajectoryItem(QGraphicsPathItem):
    """Trace of M: a polyline from the origin through the covered samples."""

    def __init__(self):
        super().__init__()
        self._path = QPainterPath()
        self.setZValue(-5)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setPen(schematic_pen(TRACE, 1.6))
        self.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self.setAcceptHoverEvents(False)
        self.setVisible(False)

    def set_points(self, points: Iterable[Point2]):
        self._path = QPainterPath(QPointF(0.0, 0.0))
        for p in points:
            if p.is_finite():
                self._path.lineTo(p.x, p.y)
        self.setPath(self._path)
