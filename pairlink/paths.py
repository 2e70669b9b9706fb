"""Freehand stroke capture and validation against the no-crossing rule."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from .geometry import distance, polylines_intersect, smooth
from .types import CandidatePath, Connection, PathResolution, Point, Token

logger = logging.getLogger(__name__)


def find_token_at(tokens: Iterable[Token], point: Point) -> Optional[Token]:
    """Return the first unconnected token whose disc contains ``point``."""

    for token in tokens:
        if not token.connected and distance(point, token.position) <= token.radius:
            return token
    return None


def begin_path(token: Token, current: Optional[CandidatePath] = None) -> Optional[CandidatePath]:
    if token.connected or current is not None:
        return None
    return CandidatePath(start_token=token, color=token.color, points=[token.position])


def extend_path(candidate: CandidatePath, point: Point) -> None:
    candidate.points.append((float(point[0]), float(point[1])))


def would_intersect(points: Sequence[Point], connections: Iterable[Connection]) -> bool:
    for connection in connections:
        if polylines_intersect(points, connection.path_points):
            return True
    return False


def resolve_path(
    candidate: CandidatePath,
    point: Point,
    tokens: Sequence[Token],
    connections: Sequence[Connection],
) -> PathResolution:
    """Finish ``candidate`` at ``point`` and decide whether it links a pair.

    Misses and value mismatches are ``no-match`` rejections. A matching stroke
    whose raw points cross the stored path of any existing connection is
    rejected with ``intersects-existing``. The stroke is not checked against
    itself. Nothing is committed here.
    """

    extend_path(candidate, point)
    start = candidate.start_token

    end_token = find_token_at(tokens, point)
    if end_token is None or end_token is start:
        return PathResolution(accepted=False, reason="no-match")
    if end_token.value != start.value:
        logger.debug("Stroke from value %d ended on value %d", start.value, end_token.value)
        return PathResolution(accepted=False, reason="no-match", end_token=end_token)

    raw = tuple(candidate.points)
    trial = Connection(
        from_token=start,
        to_token=end_token,
        raw_points=raw,
        smoothed_points=tuple(smooth(raw)),
        color=candidate.color,
    )
    if would_intersect(trial.raw_points, connections):
        logger.debug("Stroke for value %d crosses an existing connection", start.value)
        return PathResolution(accepted=False, reason="intersects-existing", end_token=end_token)

    return PathResolution(accepted=True, connection=trial, end_token=end_token)
