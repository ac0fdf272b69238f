"""Single segment evaluation."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from bezier_path import BezierCurve, bernstein_basis


@pytest.fixture
def arch():
    return BezierCurve([(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)])


class TestBernsteinBasis:
    def test_partition_of_unity(self):
        B = bernstein_basis(3, np.linspace(0, 1, 7))
        assert B.shape == (7, 4)
        assert_allclose(B.sum(axis=1), np.ones(7))

    def test_cubic_weights_at_half(self):
        assert_allclose(bernstein_basis(3, 0.5), [[0.125, 0.375, 0.375, 0.125]])


class TestBezierCurve:
    def test_cubic_degree(self, arch):
        assert arch.degree == 3
        assert arch.dimension == 2

    def test_endpoints_interpolated(self, arch):
        assert_allclose(arch.point(0.0), (0.0, 0.0))
        assert_allclose(arch.point(1.0), (1.0, 0.0))

    def test_midpoint(self, arch):
        assert_allclose(arch.point(0.5), (0.5, 0.75))

    def test_evaluate_many(self, arch):
        pts = arch.evaluate(np.linspace(0, 1, 11))
        assert pts.shape == (11, 2)

    def test_tau_out_of_range(self, arch):
        with pytest.raises(ValueError):
            arch.evaluate([0.5, 1.5])

    def test_rejects_flat_input(self):
        with pytest.raises(ValueError):
            BezierCurve([0.0, 1.0, 2.0])

    def test_segment_curve_from_path(self, two_segment_path):
        curve = two_segment_path.segment_curve(1)
        assert_allclose(curve.point(0.0), two_segment_path[3])
        assert_allclose(curve.point(1.0), two_segment_path[6])
