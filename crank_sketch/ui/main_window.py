# -*- coding: utf-8 -*-
"""Main window: schematic canvas, control dock, progress slider and frame timer."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, QSignalBlocker
from PyQt6.QtWidgets import QMainWindow, QDockWidget, QStatusBar, QWidget, QVBoxLayout, QSlider

from ..core.controller import SchematicController
from ..utils.constants import FRAMERATE, SLIDER_STEPS
from ..utils.qt_safe import safe_slot
from .panel import ControlPanel, fraction_to_slider, slider_to_fraction
from .view import SchematicView


class MainWindow(QMainWindow):
    def __init__(self, ctrl: SchematicController | None = None):
        super().__init__()
        self.setWindowTitle("Crank Sketch")
        self.resize(1000, 700)
        self.ctrl = ctrl if ctrl is not None else SchematicController()

        central = QWidget()
        layout = QVBoxLayout(central)
        self.view = SchematicView(self.ctrl)
        layout.addWidget(self.view, 1)
        self.sl_progress = QSlider(Qt.Orientation.Horizontal)
        # Progress lives in [0, 1); the top step is 1 - 1/SLIDER_STEPS.
        self.sl_progress.setRange(0, SLIDER_STEPS - 1)
        layout.addWidget(self.sl_progress)
        self.setCentralWidget(central)

        self.dock = QDockWidget("Mechanism", self)
        self.dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
        self.panel = ControlPanel(self.ctrl)
        self.dock.setWidget(self.panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.dock)

        self.setStatusBar(QStatusBar())

        self._timer = QTimer(self)
        self._timer.setInterval(round(1000 / FRAMERATE))
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

        self.sl_progress.valueChanged.connect(self._progress_dragged)
        self.ctrl.add_listener(self.refresh)
        self.refresh()

    @safe_slot
    def _on_tick(self):
        self.ctrl.tick()

    @safe_slot
    def _progress_dragged(self, value: int):
        self.ctrl.set_progress(slider_to_fraction(value))

    def _sync_timer(self):
        # Ticks are only delivered while autorun is on.
        if self.ctrl.autorun and not self._timer.isActive():
            self._timer.start()
        elif not self.ctrl.autorun and self._timer.isActive():
            self._timer.stop()

    def refresh(self):
        self._sync_timer()
        self.view.refresh()
        self.panel.sync_from_ctrl()
        with QSignalBlocker(self.sl_progress):
            self.sl_progress.setValue(fraction_to_slider(self.ctrl.progress, SLIDER_STEPS - 1))
        err = self.ctrl.configuration_error
        if err:
            self.statusBar().showMessage(f"Invalid linkage: {err}")
        else:
            self.statusBar().clearMessage()

    def closeEvent(self, e):
        self._timer.stop()
        super().closeEvent(e)
