# -*- coding: utf-8 -*-
"""Right-side panel: link lengths, AM/AB ratio, period and toggles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt, QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QCheckBox,
    QPushButton, QFileDialog, QMessageBox,
)

from ..core.headless_sim import write_path_csv
from ..utils.constants import SLIDER_STEPS
from ..utils.qt_safe import safe_slot
from .number_input import NumberInput

if TYPE_CHECKING:
    from ..core.controller import SchematicController


def slider_to_fraction(value: int) -> float:
    return value / SLIDER_STEPS


def fraction_to_slider(fraction: float, maximum: int = SLIDER_STEPS) -> int:
    value = int(round(fraction * SLIDER_STEPS))
    return max(0, min(maximum, value))


class ControlPanel(QWidget):
    def __init__(self, ctrl: "SchematicController"):
        super().__init__()
        self.ctrl = ctrl
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)

        row = QHBoxLayout()
        row.addWidget(QLabel("OA: "))
        self.ed_oa = NumberInput(ctrl.oa_field, "OA", ctrl.on_oa_edited)
        row.addWidget(self.ed_oa)
        layout.addLayout(row)

        row = QHBoxLayout()
        row.addWidget(QLabel("AB: "))
        self.ed_ab = NumberInput(ctrl.ab_field, "AB", ctrl.on_ab_edited)
        row.addWidget(self.ed_ab)
        layout.addLayout(row)

        layout.addWidget(QLabel("AM per AB: "))
        self.sl_am = QSlider(Qt.Orientation.Horizontal)
        self.sl_am.setRange(0, SLIDER_STEPS)
        self.sl_am.setValue(fraction_to_slider(ctrl.params.am_per_ab))
        layout.addWidget(self.sl_am)

        row = QHBoxLayout()
        row.addWidget(QLabel("Period: "))
        self.ed_period = NumberInput(ctrl.period_field, "seconds", ctrl.on_period_edited)
        row.addWidget(self.ed_period)
        layout.addLayout(row)

        self.chk_autorun = QCheckBox("Autorun")
        self.chk_autorun.setChecked(ctrl.autorun)
        layout.addWidget(self.chk_autorun)

        self.chk_trace = QCheckBox("Trace M point's path")
        self.chk_trace.setChecked(ctrl.trace_path)
        layout.addWidget(self.chk_trace)

        self.btn_export = QPushButton("Export M path (CSV)")
        layout.addWidget(self.btn_export)

        layout.addStretch(1)
        self.setFixedWidth(200)

        self.sl_am.valueChanged.connect(self._am_changed)
        self.chk_autorun.toggled.connect(self._autorun_toggled)
        self.chk_trace.toggled.connect(self._trace_toggled)
        self.btn_export.clicked.connect(self.export_csv)

    @safe_slot
    def _am_changed(self, value: int):
        self.ctrl.set_am_per_ab(slider_to_fraction(value))

    @safe_slot
    def _autorun_toggled(self, checked: bool):
        self.ctrl.set_autorun(checked)

    @safe_slot
    def _trace_toggled(self, checked: bool):
        self.ctrl.set_trace_path(checked)

    def sync_from_ctrl(self):
        with QSignalBlocker(self.chk_autorun):
            self.chk_autorun.setChecked(self.ctrl.autorun)
        with QSignalBlocker(self.chk_trace):
            self.chk_trace.setChecked(self.ctrl.trace_path)
        with QSignalBlocker(self.sl_am):
            self.sl_am.setValue(fraction_to_slider(self.ctrl.params.am_per_ab))

    @safe_slot
    def export_csv(self, *_):
        path, _filter = QFileDialog.getSaveFileName(self, "Export M Path CSV", "", "CSV (*.csv)")
        if not path:
            return
        if not path.lower().endswith(".csv"):
            path += ".csv"
        try:
            write_path_csv(path, self.ctrl.path)
        except OSError as e:
            QMessageBox.critical(self, "Export failed", str(e))
