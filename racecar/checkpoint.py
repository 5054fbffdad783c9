"""Checkpoint geometry: quadrilateral gates that cars must pass through."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

Rgba = tuple[int, int, int, int]

_BLUE: Rgba = (0, 0, 255, 255)
_CYAN: Rgba = (0, 255, 255, 255)
_GREEN: Rgba = (0, 255, 0, 255)
_YELLOW: Rgba = (255, 255, 0, 255)

_PARALLEL_EPSILON = 1e-10
_SEGMENT_TOLERANCE = 1e-6
_SWEEP_TOLERANCE = 5.0

FINAL_CHECKPOINT = -1


@dataclass(frozen=True)
class Vec2:
    """A 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies in the half-open rectangle."""
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= point.x < max_x and min_y <= point.y < max_y


def segments_intersect(a1: Vec2, a2: Vec2, b1: Vec2, b2: Vec2) -> bool:
    """Whether segment a1-a2 crosses segment b1-b2; parallel segments never do."""
    u = a2 - a1
    v = b2 - b1
    w = a1 - b1
    d = u.x * v.y - u.y * v.x
    if abs(d) < _PARALLEL_EPSILON:
        return False
    s = (v.x * w.y - v.y * w.x) / d
    t = (u.x * w.y - u.y * w.x) / d
    low, high = -_SEGMENT_TOLERANCE, 1.0 + _SEGMENT_TOLERANCE
    return low <= s <= high and low <= t <= high


class Checkpoint:
    """A four-cornered gate on the track.

    A checkpoint built from anything other than exactly four corners is
    inert: it contains nothing, intersects nothing and has empty bounds.
    Number -1 marks the final (start/finish) checkpoint.
    """

    def __init__(self, corners: Iterable[Vec2], number: int) -> None:
        points = tuple(corners)
        self.corners: tuple[Vec2, ...] = points if len(points) == 4 else ()
        self.number = number
        self.is_hit = False

    def __repr__(self) -> str:
        return f"Checkpoint(number={self.number}, is_hit={self.is_hit}, corners={self.corners!r})"

    @property
    def is_final(self) -> bool:
        return self.number == FINAL_CHECKPOINT

    @property
    def is_valid(self) -> bool:
        return len(self.corners) == 4

    def _extent(self) -> tuple[float, float, float, float]:
        xs = [c.x for c in self.corners]
        ys = [c.y for c in self.corners]
        return min(xs), max(xs), min(ys), max(ys)

    def contains_point(self, point: Vec2) -> bool:
        """Ray-casting point-in-polygon test, after a bounding-box reject."""
        if not self.is_valid:
            return False
        min_x, max_x, min_y, max_y = self._extent()
        if point.x < min_x or point.x > max_x or point.y < min_y or point.y > max_y:
            return False

        inside = False
        previous = self.corners[-1]
        for current in self.corners:
            if (current.y > point.y) != (previous.y > point.y):
                crossing_x = (previous.x - current.x) * (point.y - current.y) / (
                    previous.y - current.y
                ) + current.x
                if point.x < crossing_x:
                    inside = not inside
            previous = current
        return inside

    def intersects_segment(self, start: Vec2, end: Vec2) -> bool:
        """Whether the movement from start to end touches the checkpoint."""
        if not self.is_valid:
            return False
        min_x, max_x, min_y, max_y = self._extent()
        tol = _SWEEP_TOLERANCE
        if start.x < min_x - tol and end.x < min_x - tol:
            return False
        if start.x > max_x + tol and end.x > max_x + tol:
            return False
        if start.y < min_y - tol and end.y < min_y - tol:
            return False
        if start.y > max_y + tol and end.y > max_y + tol:
            return False

        if self.contains_point(start) or self.contains_point(end):
            return True

        edges = zip(self.corners, self.corners[1:] + self.corners[:1])
        return any(segments_intersect(start, end, a, b) for a, b in edges)

    def mark_hit(self) -> None:
        self.is_hit = True

    def reset(self) -> None:
        self.is_hit = False

    def center(self) -> Vec2:
        """Average of the corners, or the origin for an invalid checkpoint."""
        if not self.is_valid:
            return Vec2(0.0, 0.0)
        total = Vec2(sum(c.x for c in self.corners), sum(c.y for c in self.corners))
        return total / len(self.corners)

    def bounds(self) -> Rect:
        """Axis-aligned bounding box of the corners."""
        if not self.is_valid:
            return Rect()
        min_x, max_x, min_y, max_y = self._extent()
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def colors(self) -> tuple[Rgba, Rgba]:
        """Fill and outline colours (RGBA) for drawing this checkpoint."""
        if self.is_final:
            return (0, 0, 255, 0), (_BLUE if self.is_hit else _CYAN)
        if self.is_hit:
            return (0, 255, 0, 0), _GREEN
        return (255, 255, 0, 0), _YELLOW