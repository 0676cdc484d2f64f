"""Tests for the application state and its handlers."""

from datetime import timedelta

import pytest

from crank_sketch.core.controller import LinkageParameters, SchematicController
from crank_sketch.core.geometry import solve_pose


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ctrl(clock):
    return SchematicController(resolution=100, period=2.0, clock=clock)


def test_defaults(ctrl):
    assert ctrl.params == LinkageParameters(1.0, 1.0, 0.5)
    assert ctrl.oa_field.raw_text == "1.0"
    assert ctrl.period_field.parsed == 2.0
    assert ctrl.autorun is True
    assert ctrl.trace_path is False
    assert ctrl.configuration_error is None
    assert len(ctrl.path) == 100


def test_valid_edit_updates_parameter_and_path(ctrl):
    assert ctrl.on_oa_edited("0.5") is True
    assert ctrl.params.oa == 0.5
    assert ctrl.path[10] == solve_pose(0.5, 1.0, 0.5, 0.1).m


def test_invalid_edit_keeps_last_good_value(ctrl):
    ctrl.on_ab_edited("2")
    path = ctrl.path
    assert ctrl.on_ab_edited("2x") is False
    assert ctrl.params.ab == 2.0
    assert ctrl.path is path
    assert ctrl.ab_field.raw_text == "2x"
    assert not ctrl.ab_field.valid


def test_period_edit(ctrl, clock):
    assert ctrl.on_period_edited("-1") is False
    assert ctrl.animation.period == 2.0
    assert ctrl.on_period_edited("4") is True
    clock.t = 1.0
    assert ctrl.tick() == pytest.approx(0.25)


def test_slider_ratio_retabulates(ctrl):
    ctrl.set_am_per_ab(0.25)
    assert ctrl.path[0] == solve_pose(1.0, 1.0, 0.25, 0.0).m


def test_tick_uses_clock_and_trace_grows(ctrl, clock):
    clock.t = 0.5
    ctrl.tick()
    assert ctrl.progress == pytest.approx(0.25)
    assert len(ctrl.trace_points()) == 25
    clock.t = 1.5
    ctrl.tick()
    assert ctrl.progress == pytest.approx(0.75)
    assert len(ctrl.trace_points()) == 75


def test_pause_and_resume(ctrl, clock):
    ctrl.set_autorun(False)
    clock.t = 50.0
    ctrl.tick()
    assert ctrl.progress == 0.0
    ctrl.set_autorun(True)
    clock.t = 51.0
    assert ctrl.tick() == pytest.approx(0.5)


def test_manual_progress_and_pose(ctrl):
    ctrl.set_progress(0.3)
    assert ctrl.pose() == solve_pose(1.0, 1.0, 0.5, 0.3)


def test_listeners_fire_on_changes(ctrl):
    calls = []
    ctrl.add_listener(lambda: calls.append(1))
    ctrl.set_trace_path(True)
    ctrl.set_oa(2.0)
    ctrl.on_ab_edited("bad")
    assert len(calls) == 2
    assert ctrl.trace_path is True


def test_configuration_error_is_reported(ctrl):
    ctrl.set_oa(0.0)
    ctrl.set_ab(0.0)
    assert "both be zero" in ctrl.configuration_error
    assert not ctrl.pose().is_finite()
    ctrl.set_ab(1.0)
    assert ctrl.configuration_error is None


def test_scale_fits_mechanism(ctrl):
    assert ctrl.scale() == pytest.approx(0.45)
    ctrl.set_oa(0.0)
    ctrl.set_ab(0.0)
    assert ctrl.scale() == 1.0


def test_programmatic_changes_update_entry_fields(ctrl):
    ctrl.set_oa(2.0)
    assert ctrl.oa_field.raw_text == "2.0"
    assert ctrl.oa_field.parsed == 2.0
    ctrl.on_ab_edited("x")
    ctrl.set_ab(0.75)
    assert ctrl.ab_field.state.raw_text == "0.75"
    assert ctrl.ab_field.valid
    ctrl.set_period(timedelta(seconds=5))
    assert ctrl.period_field.raw_text == "5.0"
    assert ctrl.period_field.parsed == 5.0


def test_typed_expression_is_kept_after_edit(ctrl):
    assert ctrl.on_oa_edited("2*pi") is True
    assert ctrl.oa_field.raw_text == "2*pi"
    assert ctrl.params.oa == pytest.approx(6.283185307179586)
