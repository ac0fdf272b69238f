"""
Visualization functions for curve paths.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from .constants import DEFAULT_SAMPLES_PER_SEGMENT
from .utils import format_point


def plot_handle_lines(ax, path, color='black', lw=0.8, alpha=0.6):
    """
    Draw the anchor-to-control lines of every segment.

    Args:
        ax: 2D matplotlib axes
        path: CurvePath to draw
        color: Line color
        lw: Line width
        alpha: Transparency (0-1)
    """
    lines = []
    for Q in path.segments():
        lines.append(Q[[0, 1]])
        lines.append(Q[[2, 3]])
    lc = LineCollection(lines, colors=color, linewidths=lw, alpha=alpha)
    ax.add_collection(lc)
    return lc


def plot_segments(ax, path, samples_per_segment=DEFAULT_SAMPLES_PER_SEGMENT, lw=2.0):
    """
    Draw each segment of the path in its own color.

    Args:
        ax: 2D matplotlib axes
        path: CurvePath to draw
        samples_per_segment: Parameter samples per segment
        lw: Line width for the curve
    """
    base_colors = ['#E74C3C', '#3498DB', '#F39C12']  # (red, blue, orange)
    ts = np.linspace(0, 1, samples_per_segment)
    lines, cols = [], []
    for i in range(path.segment_count):
        lines.append(path.segment_curve(i).evaluate(ts))
        cols.append(base_colors[i % 3])

    lc = LineCollection(lines, colors=cols, linewidths=lw, alpha=0.95)
    ax.add_collection(lc)
    return lc


def plot_points(ax, path, label_points=False):
    """
    Draw anchors as large dots and controls as small squares.

    Args:
        ax: 2D matplotlib axes
        path: CurvePath to draw
        label_points: Annotate each point with its index and position
    """
    P = path.points
    anchors = np.array([path.is_anchor(i) for i in range(path.point_count)])
    ax.scatter(P[anchors, 0], P[anchors, 1], color='red', s=40, zorder=10, label='Anchors')
    ax.scatter(P[~anchors, 0], P[~anchors, 1], color='gray', marker='s', s=18,
               zorder=9, label='Controls')
    if label_points:
        for i, p in enumerate(P):
            ax.annotate(f"{i} {format_point(p)}", p, textcoords='offset points',
                        xytext=(4, 4), fontsize=7)


def plot_curve_path(path, ax=None, samples_per_segment=DEFAULT_SAMPLES_PER_SEGMENT,
                    label_points=False, title=None):
    """
    Draw a full path: segments, handle lines and points.

    Args:
        path: CurvePath to draw
        ax: Existing 2D axes (a new figure is created when None)
        samples_per_segment: Parameter samples per segment
        label_points: Annotate each point with its index and position
        title: Optional title; defaults to a short topology summary

    Returns:
        matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    plot_segments(ax, path, samples_per_segment=samples_per_segment)
    plot_handle_lines(ax, path)
    plot_points(ax, path, label_points=label_points)

    if title is None:
        topology = 'closed' if path.is_closed else 'open'
        mode = ', auto-set' if path.is_auto_set_enabled() else ''
        title = f'{path.segment_count} segments ({topology}{mode})'
    ax.set_title(title, fontsize=10)
    ax.set_aspect('equal', adjustable='datalim')
    ax.autoscale_view()
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8, loc='best')
    return ax
