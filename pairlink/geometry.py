"""Planar geometry kernel: segment intersection, distances and stroke smoothing."""

from __future__ import annotations

import math
from typing import Iterator, List, Sequence, Tuple

from .types import Point

PARALLEL_EPS = 1e-6


def _vec2(a: Point, b: Point) -> Tuple[float, float]:
    return b[0] - a[0], b[1] - a[1]


def _cross2(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    return a[0] * b[1] - a[1] * b[0]


def distance(p: Point, q: Point) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """Return ``True`` when segments ``a1-a2`` and ``b1-b2`` share a point.

    Parallel and collinear segments (``|v1 x v2| < 1e-6``) are reported as
    non-intersecting, even when they overlap. Touching at an endpoint counts as
    an intersection.
    """

    v1 = _vec2(a1, a2)
    v2 = _vec2(b1, b2)
    cross = _cross2(v1, v2)
    if abs(cross) < PARALLEL_EPS:
        return False

    offset = _vec2(a1, b1)
    t1 = _cross2(offset, v2) / cross
    t2 = _cross2(offset, v1) / cross
    return 0.0 <= t1 <= 1.0 and 0.0 <= t2 <= 1.0


def iter_segments(points: Sequence[Point]) -> Iterator[Tuple[Point, Point]]:
    for idx in range(len(points) - 1):
        yield points[idx], points[idx + 1]


def polylines_intersect(path_a: Sequence[Point], path_b: Sequence[Point]) -> bool:
    """Return ``True`` if any segment of ``path_a`` crosses any segment of ``path_b``."""

    segments_b = list(iter_segments(path_b))
    if not segments_b:
        return False
    for a1, a2 in iter_segments(path_a):
        for b1, b2 in segments_b:
            if segments_intersect(a1, a2, b1, b2):
                return True
    return False


def smooth(points: Sequence[Point]) -> List[Point]:
    """Apply one pass of a 3-point moving average to the interior points.

    Sequences shorter than three points come back unchanged; the first and last
    points are always kept as-is.
    """

    if len(points) < 3:
        return list(points)

    smoothed: List[Point] = [points[0]]
    for idx in range(1, len(points) - 1):
        prev, curr, nxt = points[idx - 1], points[idx], points[idx + 1]
        smoothed.append(
            (
                (prev[0] + curr[0] + nxt[0]) / 3.0,
                (prev[1] + curr[1] + nxt[1]) / 3.0,
            )
        )
    smoothed.append(points[-1])
    return smoothed


__all__ = [
    "PARALLEL_EPS",
    "distance",
    "segments_intersect",
    "iter_segments",
    "polylines_intersect",
    "smooth",
]
