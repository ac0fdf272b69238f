"""Automatic control placement."""

import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from bezier_path import PathState
from conftest import assert_smooth_joint


def assert_open_endpoints(path):
    p = path.points
    assert_allclose(p[1], (p[0] + p[3]) / 2)
    assert_allclose(p[-2], (p[-1] + p[-4]) / 2)


class TestEnable:
    def test_peak_controls(self, peak_path):
        peak_path.set_auto_set_control_points(True)

        h = np.sqrt(2.0)
        assert_allclose(peak_path[2], (2.0 - h, 2.0))
        assert_allclose(peak_path[4], (2.0 + h, 2.0))
        assert_allclose(peak_path[1], (1.0, 1.0))
        assert_allclose(peak_path[5], (3.0, 1.0))

    def test_collinear_anchors(self, two_segment_path):
        two_segment_path.set_auto_set_control_points(True)
        assert_allclose(two_segment_path.points, [
            (-1.0, 0.0), (0.0, 0.0), (0.0, 0.0), (1.0, 0.0),
            (1.5, 0.0), (1.5, 0.0), (2.0, 0.0),
        ])

    def test_anchors_never_move(self, peak_path):
        anchors = peak_path.points[::3]
        peak_path.set_auto_set_control_points(True)
        assert_allclose(peak_path.points[::3], anchors)

    def test_disable_keeps_points(self, peak_path):
        peak_path.set_auto_set_control_points(True)
        before = peak_path.points

        peak_path.set_auto_set_control_points(False)

        assert not peak_path.is_auto_set_enabled()
        assert_allclose(peak_path.points, before)

    def test_enabling_twice_does_not_recompute(self, peak_path):
        peak_path.set_auto_set_control_points(True)
        state = peak_path.get_state()
        points = list(state.points)
        points[2] = (0.0, 9.0)
        peak_path.set_state(PathState(tuple(points), False, True))

        peak_path.set_auto_set_control_points(True)

        assert_allclose(peak_path[2], (0.0, 9.0))


class TestEditingWithAutoSet:
    def test_anchor_move_keeps_joints_smooth(self, peak_path):
        peak_path.set_auto_set_control_points(True)

        peak_path.move_point(3, (2.5, 3.0))

        assert_allclose(peak_path[3], (2.5, 3.0))
        assert_smooth_joint(peak_path, 3)
        assert_open_endpoints(peak_path)

    def test_control_move_snaps_back(self, peak_path):
        peak_path.set_auto_set_control_points(True)
        before = peak_path.points

        peak_path.move_point(2, (10.0, 10.0))
        peak_path.move_point(1, (-5.0, 3.0))

        assert_allclose(peak_path.points, before)

    def test_append_recomputes_new_joint(self, peak_path):
        peak_path.set_auto_set_control_points(True)

        peak_path.append_segment((6.0, 2.0))

        assert peak_path.point_count == 10
        for anchor in (3, 6):
            assert_smooth_joint(peak_path, anchor)
        assert_open_endpoints(peak_path)

    def test_far_edit_only_touches_window(self, peak_path):
        peak_path.set_auto_set_control_points(True)
        for x in (6.0, 8.0, 10.0):
            peak_path.append_segment((x, 2.0 * (x % 4 == 0)))
        before = peak_path.points

        peak_path.move_point(15, (10.0, 4.0))

        assert_allclose(peak_path.points[:8], before[:8])
        for anchor in (3, 6, 9, 12):
            assert_smooth_joint(peak_path, anchor)

    def test_close_smooths_every_anchor(self, peak_path):
        peak_path.set_auto_set_control_points(True)

        peak_path.toggle_closed()

        assert peak_path.point_count == 9
        for anchor in peak_path.anchor_indices():
            assert_smooth_joint(peak_path, anchor)

    def test_reopen_restores_endpoint_rule(self, peak_path):
        peak_path.set_auto_set_control_points(True)
        peak_path.toggle_closed()
        peak_path.move_point(0, (0.0, -1.0))

        peak_path.toggle_closed()

        assert peak_path.point_count == 7
        assert_smooth_joint(peak_path, 3)
        assert_open_endpoints(peak_path)

    def test_enable_on_closed_path(self, peak_path):
        peak_path.toggle_closed()
        peak_path.set_auto_set_control_points(True)
        for anchor in peak_path.anchor_indices():
            assert_smooth_joint(peak_path, anchor)

    def test_two_anchor_loop_collapses_with_warning(self, seeded_path):
        seeded_path.set_auto_set_control_points(True)

        with pytest.warns(RuntimeWarning):
            seeded_path.toggle_closed()

        p = seeded_path.points
        assert_allclose(p[1], p[0])
        assert_allclose(p[5], p[0])
        assert_allclose(p[2], p[3])
        assert_allclose(p[4], p[3])

    def test_closed_first_anchor_move_wraps_window(self, peak_path):
        peak_path.toggle_closed()
        peak_path.set_auto_set_control_points(True)

        peak_path.move_point(0, (0.5, -1.5))

        assert_allclose(peak_path[0], (0.5, -1.5))
        for anchor in peak_path.anchor_indices():
            assert_smooth_joint(peak_path, anchor)

    def test_warning_as_error_leaves_close_complete(self, seeded_path):
        seeded_path.set_auto_set_control_points(True)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(RuntimeWarning):
                seeded_path.toggle_closed()

        assert seeded_path.is_closed
        assert seeded_path.point_count == 6
        p = seeded_path.points
        assert_allclose(p[[1, 5]], [p[0], p[0]])
        assert_allclose(p[[2, 4]], [p[3], p[3]])
