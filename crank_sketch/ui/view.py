# -*- coding: utf-8 -*-
"""Schematic canvas: axes, mechanism and trace of M."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsItemGroup

from ..core.geometry import ORIGIN, Point2
from ..utils.qt_safe import safe_event
from .items import ArrowItem, JointItem, LinkItem, TextMarker, TrajectoryItem

if TYPE_CHECKING:
    from ..core.controller import SchematicController

AXES_SCALE = 0.95


class SchematicView(QGraphicsView):
    def __init__(self, ctrl: "SchematicController"):
        scene = QGraphicsScene(-1.0, -1.0, 2.0, 2.0)
        super().__init__(scene)
        self._scene = scene
        self.ctrl = ctrl
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self._zoom = 1.0

        self.axes = QGraphicsItemGroup()
        self.axes.setScale(AXES_SCALE)
        self._scene.addItem(self.axes)
        for head, tail, label, at in (
            (Point2(0.0, -1.0), Point2(0.0, 1.0), "y", Point2(0.03, -1.0)),
            (Point2(1.0, 0.0), Point2(-1.0, 0.0), "x", Point2(0.95, 0.0)),
        ):
            ArrowItem(head, tail).setParentItem(self.axes)
            marker = TextMarker(label)
            marker.setPos(at.x, at.y)
            marker.setParentItem(self.axes)

        # Mechanism layer; its scale follows OA + AB. Children are parented
        # (not addToGroup) so they inherit the layer scale.
        self.mechanism = QGraphicsItemGroup()
        self.mechanism.setParentItem(self.axes)
        self.link_oa = LinkItem("OA")
        self.link_ab = LinkItem("AB")
        self.trajectory = TrajectoryItem()
        self.joints = {name: JointItem(name) for name in ("O", "A", "B", "M")}
        for item in (self.trajectory, self.link_oa, self.link_ab, *self.joints.values()):
            item.setParentItem(self.mechanism)
        self.joints["O"].set_point(ORIGIN)

        self.refresh()

    def refresh(self):
        ctrl = self.ctrl
        self.mechanism.setScale(ctrl.scale())
        pose = ctrl.pose()
        self.joints["A"].set_point(pose.a)
        self.joints["B"].set_point(pose.b)
        self.joints["M"].set_point(pose.m)
        self.link_oa.set_ends(ORIGIN, pose.a)
        self.link_ab.set_ends(pose.a, pose.b)
        self.trajectory.setVisible(ctrl.trace_path)
        if ctrl.trace_path:
            self.trajectory.set_points(ctrl.trace_points())

    def fit_axes(self):
        self.resetTransform()
        self.fitInView(QRectF(-1.0, -1.0, 2.0, 2.0), Qt.AspectRatioMode.KeepAspectRatio)
        self.scale(self._zoom, self._zoom)

    def reset_view(self):
        self._zoom = 1.0
        self.fit_axes()

    @safe_event
    def wheelEvent(self, e):
        f = 1.25 if e.angleDelta().y() > 0 else 0.8
        self._zoom *= f
        self.scale(f, f)

    @safe_event
    def resizeEvent(self, e):
        super().resizeEvent(e)
        self.fit_axes()

    @safe_event
    def mouseDoubleClickEvent(self, e):
        if e.button() == Qt.MouseButton.LeftButton:
            self.reset_view()
            e.accept()
            return
        super().mouseDoubleClickEvent(e)
