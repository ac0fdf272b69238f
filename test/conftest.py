"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from bezier_path import CurvePath, CurveEditSession, PathState


@pytest.fixture
def seeded_path():
    return CurvePath((0.0, 0.0))


@pytest.fixture
def two_segment_path(seeded_path):
    seeded_path.append_segment((2.0, 0.0))
    return seeded_path


@pytest.fixture
def closed_path(two_segment_path):
    two_segment_path.toggle_closed()
    return two_segment_path


@pytest.fixture
def peak_path():
    """Open path with anchors (0,0), (2,2), (4,0) and arbitrary controls."""
    return CurvePath.from_state(PathState(points=(
        (0.0, 0.0), (0.3, 0.9), (1.1, 2.5),
        (2.0, 2.0), (2.7, 1.4), (3.8, 0.9),
        (4.0, 0.0),
    )))


@pytest.fixture
def session():
    return CurveEditSession()


def assert_smooth_joint(path, anchor):
    """Controls of an anchor sit on opposite sides at half the neighbor distances."""
    n = path.point_count
    a = path[anchor]
    before = path[(anchor - 1) % n] - a
    after = path[(anchor + 1) % n] - a
    prev_dist = np.linalg.norm(path[(anchor - 3) % n] - a)
    next_dist = np.linalg.norm(path[(anchor + 3) % n] - a)

    cross = before[0] * after[1] - before[1] * after[0]
    assert cross == pytest.approx(0.0, abs=1e-9)
    assert np.dot(before, after) <= 0.0
    assert np.linalg.norm(before) == pytest.approx(0.5 * prev_dist)
    assert np.linalg.norm(after) == pytest.approx(0.5 * next_dist)
