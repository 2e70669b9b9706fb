from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

Point = Tuple[float, float]

SessionState = Literal["placing", "playing", "complete"]

ResultKind = Literal[
    "ignored",
    "path-started",
    "path-extended",
    "connection-made",
    "rejected",
    "puzzle-complete",
]

RejectReason = Literal["no-match", "intersects-existing"]


@dataclass(eq=False)
class Token:
    """Numbered circular target on the play surface."""

    id: int
    value: int
    position: Point
    radius: float
    color: str
    connected: bool = False

    def __repr__(self) -> str:
        x, y = self.position
        return (
            f"Token(id={self.id}, value={self.value}, position=({x:.1f}, {y:.1f}), "
            f"connected={self.connected})"
        )


@dataclass
class CandidatePath:
    """Freehand stroke in progress between pointer-down and pointer-up."""

    start_token: Token
    color: str
    points: List[Point] = field(default_factory=list)


@dataclass(frozen=True, eq=False)
class Connection:
    """Committed stroke linking the two tokens of a pair."""

    from_token: Token
    to_token: Token
    raw_points: Tuple[Point, ...]
    smoothed_points: Tuple[Point, ...]
    color: str

    @property
    def path_points(self) -> Tuple[Point, ...]:
        return self.smoothed_points or self.raw_points


@dataclass(frozen=True)
class PathResolution:
    """Outcome of finishing a candidate path; committing is left to the caller."""

    accepted: bool
    reason: Optional[RejectReason] = None
    connection: Optional[Connection] = None
    end_token: Optional[Token] = None


__all__ = [
    "Point",
    "SessionState",
    "ResultKind",
    "RejectReason",
    "Token",
    "CandidatePath",
    "Connection",
    "PathResolution",
]
