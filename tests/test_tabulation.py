"""Tests for the tabulated trajectory of M."""

import numpy as np
import pytest

from crank_sketch.core.geometry import solve_pose
from crank_sketch.core.tabulation import PathTabulator, tabulate_path


@pytest.mark.parametrize("oa, ab, am, n", [(1.0, 1.0, 0.5, 500), (1.0, 2.0, 0.3, 37), (2.0, 0.5, 0.9, 1)])
def test_entries_match_solver_exactly(oa, ab, am, n):
    path = tabulate_path(oa, ab, am, n)
    assert len(path) == n
    for i in range(n):
        assert path[i] == solve_pose(oa, ab, am, i / n).m


@pytest.mark.parametrize("bad", [0, -3, 2.5, True, "10"])
def test_rejects_bad_resolution(bad):
    with pytest.raises(ValueError):
        tabulate_path(1.0, 1.0, 0.5, bad)


def test_accepts_numpy_integer_resolution():
    assert len(tabulate_path(1.0, 1.0, 0.5, np.int64(8))) == 8


def test_prefix_uses_floor_of_progress():
    path = tabulate_path(1.0, 2.0, 0.5, 500)
    assert path.count_up_to(0.0) == 0
    assert path.count_up_to(0.4999) == 249
    assert path.count_up_to(0.999) == 499
    assert path.count_up_to(1.0) == 500
    prefix = path.prefix(0.01)
    assert len(prefix) == 5
    assert prefix == [path[i] for i in range(5)]


def test_path_array_is_read_only():
    arr = tabulate_path(1.0, 2.0, 0.5, 10).as_array()
    assert arr.shape == (10, 2)
    with pytest.raises(ValueError):
        arr[0, 0] = 1.0


def test_tabulator_recomputes_on_change_only():
    tab = PathTabulator(50, 1.0, 2.0, 0.5)
    first = tab.path
    assert tab.update(1.0, 2.0, 0.5) is False
    assert tab.path is first
    assert tab.update(1.0, 2.0, 0.6) is True
    assert tab.path is not first
    assert len(tab.path) == 50
    assert tab.path[7] == solve_pose(1.0, 2.0, 0.6, 7 / 50).m


def test_tabulator_resolution_is_fixed():
    tab = PathTabulator(20, 1.0, 1.0, 0.5)
    for oa in (0.5, 1.5, 3.0):
        tab.update(oa, 1.0, 0.5)
        assert len(tab.path) == 20
