"""
Piecewise cubic Bézier path with interactive editing rules.

Points are stored in groups of three, (anchor, control, control), so anchors
sit at indices 0, 3, 6, ... An open path with k segments holds 3k+1 points;
closing it adds the two controls of the segment that runs from the last
anchor back to the first, giving 3(k+1) points.
"""

import logging
import warnings
from dataclasses import dataclass

import numpy as np

from .bezier import BezierCurve
from .constants import (
    LEFT,
    RIGHT,
    UP,
    SEED_CONTROL_SCALE,
    AUTO_SET_HANDLE_SCALE,
    NORMALIZE_EPSILON,
    DEFAULT_SAMPLES_PER_SEGMENT,
    POINTS_PER_GROUP,
)
from .exceptions import IndexOutOfRangeError, InvalidStateError

logger = logging.getLogger(__name__)


def _as_point(position):
    """Coerce a position to a finite float vector of shape (2,)."""
    p = np.array(position, dtype=float).reshape(-1)
    if p.shape != (2,):
        raise ValueError(f"position must be a 2D point, got shape {np.shape(position)}")
    if not np.all(np.isfinite(p)):
        raise ValueError(f"position must be finite, got {p}")
    return p


def _normalized(v):
    """Unit vector along v, or the zero vector when v is (nearly) zero."""
    length = np.linalg.norm(v)
    if length < NORMALIZE_EPSILON:
        return np.zeros_like(v)
    return v / length


def _valid_point_count(n, closed):
    if closed:
        return n >= 2 * POINTS_PER_GROUP and n % POINTS_PER_GROUP == 0
    return n >= POINTS_PER_GROUP + 1 and n % POINTS_PER_GROUP == 1


@dataclass(frozen=True)
class PathState:
    """Everything needed to restore a path: points plus both flags."""
    points: tuple
    is_closed: bool = False
    auto_set_control_points: bool = False

    @classmethod
    def capture(cls, points, is_closed, auto_set_control_points):
        return cls(
            points=tuple((float(x), float(y)) for x, y in points),
            is_closed=bool(is_closed),
            auto_set_control_points=bool(auto_set_control_points),
        )

    def as_array(self):
        return np.array(self.points, dtype=float)


class CurvePath:
    """
    Editable chain of cubic Bézier segments.

    Moving an anchor drags its controls along; moving a control rotates its
    partner so the tangent stays straight through the shared anchor. With
    auto-set enabled the controls are derived from neighboring anchors and
    cannot be placed by hand.
    """

    def __init__(self, center=(0.0, 0.0)):
        c = _as_point(center)
        # anchors first and last, so the seed obeys the index rule
        self._points = np.array([
            c + LEFT,
            c + (LEFT + UP) * SEED_CONTROL_SCALE,
            c + (RIGHT - UP) * SEED_CONTROL_SCALE,
            c + RIGHT,
        ])
        self._closed = False
        self._auto_set = False

    @classmethod
    def from_state(cls, state):
        path = cls()
        path.set_state(state)
        return path

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def point_count(self):
        return self._points.shape[0]

    num_points = point_count

    @property
    def segment_count(self):
        n = self.point_count
        if self._closed:
            return n // POINTS_PER_GROUP
        return (n - 1) // POINTS_PER_GROUP

    num_segments = segment_count

    @property
    def is_closed(self):
        return self._closed

    @property
    def points(self):
        """Copy of the point array, shape (point_count, 2)."""
        return self._points.copy()

    def is_auto_set_enabled(self):
        return self._auto_set

    @staticmethod
    def is_anchor(i):
        return i % POINTS_PER_GROUP == 0

    def anchor_indices(self):
        return list(range(0, self.point_count, POINTS_PER_GROUP))

    def wrap_index(self, i):
        """Index modulo the current point count."""
        return i % self.point_count

    def point_at(self, i):
        self._check_point_index(i)
        return self._points[i].copy()

    def __getitem__(self, i):
        return self.point_at(i)

    def __len__(self):
        return self.point_count

    def segment_points(self, i):
        """
        Control polygon of segment i: anchor, control, control, next anchor.

        The next anchor of the last segment of a closed path is point 0.
        """
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)) \
                or not 0 <= i < self.segment_count:
            raise IndexOutOfRangeError(i, (0, self.segment_count), kind="segment")
        start = i * POINTS_PER_GROUP
        idx = [start, start + 1, start + 2, self.wrap_index(start + 3)]
        return self._points[idx].copy()

    def segments(self):
        for i in range(self.segment_count):
            yield self.segment_points(i)

    def segment_curve(self, i):
        return BezierCurve(self.segment_points(i))

    def sample(self, samples_per_segment=DEFAULT_SAMPLES_PER_SEGMENT):
        """
        Polyline through the path at uniform parameter steps per segment.

        Consecutive segments share their joint anchor, which is emitted once.
        """
        if samples_per_segment < 2:
            raise ValueError("samples_per_segment must be >= 2")
        tau = np.linspace(0.0, 1.0, samples_per_segment)
        chunks = []
        for i in range(self.segment_count):
            pts = self.segment_curve(i).evaluate(tau)
            chunks.append(pts if i == 0 else pts[1:])
        return np.vstack(chunks)

    def get_state(self):
        return PathState.capture(self._points, self._closed, self._auto_set)

    def set_state(self, state):
        """Replace points and flags with a snapshot taken by get_state."""
        try:
            pts = state.as_array()
        except ValueError as e:
            raise InvalidStateError(f"unreadable points ({e})", operation="restore state") from e
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise InvalidStateError(
                f"points must be 2D, got shape {pts.shape}", operation="restore state")
        if not _valid_point_count(pts.shape[0], state.is_closed):
            raise InvalidStateError(
                f"{pts.shape[0]} points do not form a "
                f"{'closed' if state.is_closed else 'open'} path",
                operation="restore state",
            )
        if not np.all(np.isfinite(pts)):
            raise InvalidStateError("points must be finite", operation="restore state")
        self._points = pts
        self._closed = bool(state.is_closed)
        self._auto_set = bool(state.auto_set_control_points)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def append_segment(self, position):
        """Extend an open path with a segment ending at position."""
        if self._closed:
            raise InvalidStateError("path is closed", operation="append a segment")
        new_anchor = _as_point(position)

        last = self._points[-1]
        prev = self._points[-2]
        added = np.array([
            last + (last - prev),
            (last + new_anchor) * 0.5,
            new_anchor,
        ])
        self._points = np.vstack([self._points, added])
        logger.debug(f"Appended segment ending at {new_anchor}, {self.point_count} points")

        if self._auto_set:
            self._warn_collapsed(self._auto_set_affected(self.point_count - 1))

    def move_point(self, i, position):
        """
        Move point i and keep the joint smooth.

        Anchors carry their controls along. Controls rotate their partner
        around the shared anchor, keeping the partner's distance. With
        auto-set on, the controls around the affected anchor are recomputed.
        """
        self._check_point_index(i)
        new_pos = _as_point(position)
        delta = new_pos - self._points[i]
        self._points[i] = new_pos

        if self._auto_set:
            anchor = i if self.is_anchor(i) else self._owning_anchor(i)
            self._warn_collapsed(self._auto_set_affected(anchor))
            return

        n = self.point_count
        if self.is_anchor(i):
            if i + 1 < n or self._closed:
                self._points[self.wrap_index(i + 1)] += delta
            if i - 1 >= 0 or self._closed:
                self._points[self.wrap_index(i - 1)] += delta
        else:
            next_is_anchor = (i + 1) % POINTS_PER_GROUP == 0
            partner = i + 2 if next_is_anchor else i - 2
            anchor = i + 1 if next_is_anchor else i - 1
            if 0 <= partner < n or self._closed:
                partner = self.wrap_index(partner)
                anchor_pos = self._points[self.wrap_index(anchor)]
                distance = np.linalg.norm(anchor_pos - self._points[partner])
                direction = _normalized(anchor_pos - new_pos)
                self._points[partner] = anchor_pos + direction * distance

    def toggle_closed(self):
        """Close an open path into a loop, or reopen a closed one."""
        if not _valid_point_count(self.point_count, self._closed):
            raise InvalidStateError(
                f"{self.point_count} points", operation="toggle closed")

        if not self._closed:
            last = self._points[-1]
            prev = self._points[-2]
            first = self._points[0]
            second = self._points[1]
            self._points = np.vstack([
                self._points,
                last * 2 - prev,
                first * 2 - second,
            ])
            self._closed = True
            logger.debug(f"Closed path, {self.point_count} points")
            if self._auto_set:
                collapsed = [a for a in (0, self.point_count - POINTS_PER_GROUP)
                             if self._auto_set_anchor(a)]
                self._warn_collapsed(collapsed)
        else:
            self._points = self._points[:-2].copy()
            self._closed = False
            logger.debug(f"Opened path, {self.point_count} points")
            if self._auto_set:
                self._auto_set_endpoints()

    def set_auto_set_control_points(self, enabled):
        """Enable or disable derived controls; enabling recomputes all of them."""
        enabled = bool(enabled)
        if enabled == self._auto_set:
            return
        if enabled and not _valid_point_count(self.point_count, self._closed):
            raise InvalidStateError(
                f"{self.point_count} points", operation="enable auto-set")
        self._auto_set = enabled
        logger.debug(f"Auto-set control points {'enabled' if enabled else 'disabled'}")
        if enabled:
            self._warn_collapsed(self._auto_set_all())

    # ------------------------------------------------------------------
    # Auto-set internals
    # ------------------------------------------------------------------

    def _auto_set_all(self):
        collapsed = [a for a in range(0, self.point_count, POINTS_PER_GROUP)
                     if self._auto_set_anchor(a)]
        self._auto_set_endpoints()
        return collapsed

    def _auto_set_affected(self, anchor):
        """Recompute the anchor and its two neighbor anchors."""
        n = self.point_count
        collapsed = []
        for a in (anchor - POINTS_PER_GROUP, anchor, anchor + POINTS_PER_GROUP):
            if (0 <= a < n or self._closed) and self._auto_set_anchor(self.wrap_index(a)):
                collapsed.append(self.wrap_index(a))
        self._auto_set_endpoints()
        return collapsed

    def _auto_set_anchor(self, a):
        """
        Place both controls of anchor a along the bisecting tangent.

        The direction is unit(prev - a) - unit(next - a), normalized; each
        control lies at half the distance to its own neighbor, previous side
        along +direction and next side along -direction.

        Returns True when the anchor has no defined tangent and its controls
        were collapsed onto it.
        """
        n = self.point_count
        anchor_pos = self._points[a]
        direction = np.zeros(2)
        distances = [0.0, 0.0]

        if a - POINTS_PER_GROUP >= 0 or self._closed:
            offset = self._points[self.wrap_index(a - POINTS_PER_GROUP)] - anchor_pos
            direction += _normalized(offset)
            distances[0] = np.linalg.norm(offset)
        if a + POINTS_PER_GROUP < n or self._closed:
            offset = self._points[self.wrap_index(a + POINTS_PER_GROUP)] - anchor_pos
            direction -= _normalized(offset)
            distances[1] = -np.linalg.norm(offset)

        direction = _normalized(direction)

        for side, control in enumerate((a - 1, a + 1)):
            if 0 <= control < n or self._closed:
                self._points[self.wrap_index(control)] = (
                    anchor_pos + direction * distances[side] * AUTO_SET_HANDLE_SCALE
                )
        return bool(not direction.any() and any(distances))

    def _auto_set_endpoints(self):
        """Open paths: end controls sit midway between end anchor and its neighbor."""
        if self._closed:
            return
        p = self._points
        p[1] = (p[0] + p[POINTS_PER_GROUP]) * 0.5
        p[-2] = (p[-1] + p[-1 - POINTS_PER_GROUP]) * 0.5

    @staticmethod
    def _warn_collapsed(anchors):
        # called once the mutation is complete, so an escalated warning
        # never leaves the path half edited
        for a in sorted(set(anchors)):
            warnings.warn(
                f"Anchor {a} has no defined tangent; collapsing its controls onto it",
                RuntimeWarning,
            )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _owning_anchor(self, i):
        """Anchor that control i belongs to."""
        if (i + 1) % POINTS_PER_GROUP == 0:
            return self.wrap_index(i + 1)
        return i - 1

    def _check_point_index(self, i):
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)) \
                or not 0 <= i < self.point_count:
            raise IndexOutOfRangeError(i, (0, self.point_count))

    def __repr__(self):
        return (f"CurvePath(points={self.point_count}, segments={self.segment_count}, "
                f"closed={self._closed}, auto_set={self._auto_set})")
