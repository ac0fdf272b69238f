"""
Single Bézier segment evaluation in the Bernstein basis.
"""

import numpy as np
from scipy.special import comb


def bernstein_basis(N, tau):
    """
    Bernstein basis of degree N sampled at each tau.

    b_i(tau) = C(N, i) tau^i (1 - tau)^(N-i)

    Returns:
        B: (len(tau), N+1) matrix
    """
    tau = np.atleast_1d(np.asarray(tau, dtype=float))
    i = np.arange(N + 1)
    return comb(N, i) * (tau[:, None] ** i) * ((1 - tau[:, None]) ** (N - i))


class BezierCurve:
    """
    Bézier curve of arbitrary degree. A path segment is the cubic case.
    """

    def __init__(self, control_points):
        P = np.array(control_points, dtype=float)
        if P.ndim != 2:
            raise ValueError("control_points must be (N+1, dim)")
        if P.shape[0] < 2:
            raise ValueError("control_points needs at least two points")
        self.control_points = P
        self.degree = P.shape[0] - 1  # = N
        self.dimension = P.shape[1]

    def point(self, tau):
        """Evaluate curve at a single parameter tau."""
        return self.evaluate(tau)[0]

    def evaluate(self, tau):
        """
        Evaluate the curve at one or many parameters.

        Args:
            tau: scalar or array of parameters in [0, 1]

        Returns:
            (len(tau), dim) array of points
        """
        tau = np.atleast_1d(np.asarray(tau, dtype=float))
        if np.any((tau < 0) | (tau > 1)):
            raise ValueError("tau must lie in [0, 1]")
        return bernstein_basis(self.degree, tau) @ self.control_points
