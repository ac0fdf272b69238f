#!/usr/bin/env python3
"""
Curve path basic usage example
"""

import argparse

import matplotlib.pyplot as plt

from bezier_path import CurveEditSession, plot_curve_path
from bezier_path.utils import format_point


def print_points(path):
    for i in range(path.point_count):
        kind = 'anchor ' if path.is_anchor(i) else 'control'
        print(f"  P{i} {kind} {format_point(path[i])}")


def authoring_example(session):
    """Append segments and drag handles"""
    print("=== Authoring ===")
    path = session.path
    session.apply_append((2.0, 0.0))
    session.apply_append((3.0, 1.5))
    print(f"{path.point_count} points, {path.segment_count} segments")

    # drag a control; its partner rotates to stay opposite
    session.apply_move(2, (0.5, -1.0))
    # drag an anchor; both controls follow
    session.apply_move(3, (1.0, 0.5))
    print_points(path)


def closing_example(session):
    """Close the loop and turn on auto-set"""
    print("\n=== Closing + auto-set ===")
    path = session.path
    session.apply_toggle_closed()
    session.apply_toggle_auto_set(True)
    print(f"{path.point_count} points, {path.segment_count} segments, closed={path.is_closed}")
    print_points(path)

    session.undo()
    session.undo()
    print(f"After two undos: {path.point_count} points, closed={path.is_closed}")


def main():
    parser = argparse.ArgumentParser(description="Curve path demo")
    parser.add_argument('--no-plot', action='store_true', help="skip the matplotlib window")
    args = parser.parse_args()

    session = CurveEditSession()
    authoring_example(session)
    if not args.no_plot:
        plot_curve_path(session.path, label_points=True)
    closing_example(session)
    if not args.no_plot:
        session.redo()
        session.redo()
        plot_curve_path(session.path)
        plt.show()


if __name__ == "__main__":
    main()
