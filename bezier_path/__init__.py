"""
Interactive Bézier Paths

This package implements an editable chain of cubic Bézier segments for curve
authoring tools. Points are stored as repeating (anchor, control, control)
groups; the path supports appending segments, dragging points with mirrored
tangents, closing into a loop, and automatic smooth control placement.
"""

from .bezier import BezierCurve, bernstein_basis
from .path import CurvePath, PathState
from .session import CurveEditSession
from .exceptions import CurvePathError, IndexOutOfRangeError, InvalidStateError
from .visualization import (
    plot_curve_path,
    plot_segments,
    plot_handle_lines,
    plot_points,
)
from .utils import format_number, format_point
from . import constants

__all__ = [
    # Core classes
    'CurvePath',
    'PathState',
    'CurveEditSession',
    'BezierCurve',

    # Basis functions
    'bernstein_basis',

    # Errors
    'CurvePathError',
    'IndexOutOfRangeError',
    'InvalidStateError',

    # Visualization functions
    'plot_curve_path',
    'plot_segments',
    'plot_handle_lines',
    'plot_points',

    # Utility functions
    'format_number',
    'format_point',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
