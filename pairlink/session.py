"""Session state machine and the pointer-driven contract exposed to shells."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config import PuzzleConfig, get_default_config, validate_config
from .errors import ConfigurationError
from .paths import begin_path, extend_path, find_token_at, resolve_path
from .placement import generate_layout
from .types import (
    CandidatePath,
    Connection,
    Point,
    RejectReason,
    ResultKind,
    SessionState,
    Token,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerResult:
    """Tagged outcome of a pointer event."""

    kind: ResultKind
    reason: Optional[RejectReason] = None
    connection: Optional[Connection] = None


IGNORED = PointerResult("ignored")
PATH_STARTED = PointerResult("path-started")
PATH_EXTENDED = PointerResult("path-extended")


@dataclass(frozen=True)
class TokenView:
    id: int
    value: int
    position: Point
    radius: float
    color: str
    connected: bool


@dataclass(frozen=True)
class ConnectionView:
    from_id: int
    to_id: int
    points: Tuple[Point, ...]
    color: str


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only projection of a session used for rendering."""

    tokens: Tuple[TokenView, ...]
    connections: Tuple[ConnectionView, ...]
    candidate_points: Optional[Tuple[Point, ...]]
    candidate_color: Optional[str]
    complete: bool
    state: SessionState
    width: float
    height: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "state": self.state,
            "complete": self.complete,
            "tokens": [
                {
                    "id": t.id,
                    "value": t.value,
                    "position": list(t.position),
                    "radius": t.radius,
                    "color": t.color,
                    "connected": t.connected,
                }
                for t in self.tokens
            ],
            "connections": [
                {
                    "from": c.from_id,
                    "to": c.to_id,
                    "color": c.color,
                    "points": [list(p) for p in c.points],
                }
                for c in self.connections
            ],
            "candidate": (
                None
                if self.candidate_points is None
                else {"color": self.candidate_color, "points": [list(p) for p in self.candidate_points]}
            ),
        }


def _copy_tokens(tokens: Sequence[Token]) -> List[Token]:
    copies = [
        Token(id=t.id, value=t.value, position=(float(t.position[0]), float(t.position[1])), radius=t.radius, color=t.color)
        for t in tokens
    ]
    counts = Counter(t.value for t in copies)
    odd = sorted(value for value, count in counts.items() if count != 2)
    if odd:
        raise ConfigurationError(f"every value must appear on exactly two tokens (bad values: {odd})")
    return copies


class Session:
    """One puzzle from placement to completion.

    The session owns its tokens, the committed connections and the optional
    live stroke. Once complete, every pointer event is ignored; start a new
    session to play again.

    Placement randomness comes from ``rng`` or, failing that, a generator
    seeded with ``seed``; giving both is a ``ValueError``.
    """

    def __init__(
        self,
        config: Optional[PuzzleConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        pair_count: Optional[int] = None,
        tokens: Optional[Sequence[Token]] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.config = config or get_default_config()
        validate_config(self.config)
        self.state: SessionState = "placing"
        self.connections: List[Connection] = []
        self.candidate: Optional[CandidatePath] = None

        if tokens is not None:
            self.tokens = _copy_tokens(tokens)
        else:
            if rng is None:
                rng = np.random.default_rng(seed)
            self.tokens = generate_layout(self.config, rng, pair_count=pair_count)

        self.state = "playing"
        logger.info("Session started with %d pair(s)", self.pair_count)

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token], config: Optional[PuzzleConfig] = None) -> "Session":
        return cls(config, tokens=tokens)

    @property
    def pair_count(self) -> int:
        return len(self.tokens) // 2

    @property
    def complete(self) -> bool:
        return self.state == "complete"

    def _all_connected(self) -> bool:
        return all(token.connected for token in self.tokens)

    def pointer_down(self, x: float, y: float) -> PointerResult:
        if self.complete or self.candidate is not None:
            return IGNORED
        token = find_token_at(self.tokens, (x, y))
        if token is None:
            return IGNORED
        candidate = begin_path(token, self.candidate)
        if candidate is None:
            return IGNORED
        self.candidate = candidate
        logger.debug("Stroke started on token %d (value %d)", token.id, token.value)
        return PATH_STARTED

    def pointer_move(self, x: float, y: float) -> PointerResult:
        if self.complete or self.candidate is None:
            return IGNORED
        extend_path(self.candidate, (x, y))
        return PATH_EXTENDED

    def pointer_up(self, x: float, y: float) -> PointerResult:
        if self.complete or self.candidate is None:
            return IGNORED

        candidate, self.candidate = self.candidate, None
        resolution = resolve_path(candidate, (x, y), self.tokens, self.connections)
        if not resolution.accepted:
            return PointerResult("rejected", reason=resolution.reason)

        connection = resolution.connection
        assert connection is not None
        self.connections.append(connection)
        connection.from_token.connected = True
        connection.to_token.connected = True
        logger.info(
            "Connected value %d (%d/%d pairs)",
            connection.from_token.value,
            len(self.connections),
            self.pair_count,
        )

        if self._all_connected():
            self.state = "complete"
            logger.info("Puzzle complete")
            return PointerResult("puzzle-complete", connection=connection)
        return PointerResult("connection-made", connection=connection)

    def snapshot(self) -> SessionSnapshot:
        tokens = tuple(
            TokenView(
                id=t.id,
                value=t.value,
                position=t.position,
                radius=t.radius,
                color=t.color,
                connected=t.connected,
            )
            for t in self.tokens
        )
        connections = tuple(
            ConnectionView(
                from_id=c.from_token.id,
                to_id=c.to_token.id,
                points=c.path_points,
                color=c.color,
            )
            for c in self.connections
        )
        candidate = self.candidate
        return SessionSnapshot(
            tokens=tokens,
            connections=connections,
            candidate_points=tuple(candidate.points) if candidate is not None else None,
            candidate_color=candidate.color if candidate is not None else None,
            complete=self.complete,
            state=self.state,
            width=self.config.width,
            height=self.config.height,
        )


class PuzzleGame:
    """Holds the current session for a shell and replaces it on demand."""

    def __init__(self, config: Optional[PuzzleConfig] = None, *, seed: Optional[int] = None) -> None:
        self.config = config or get_default_config()
        self.rng = np.random.default_rng(seed)
        self.session: Optional[Session] = None

    def new_session(self, *, pair_count: Optional[int] = None) -> SessionSnapshot:
        self.session = Session(self.config, rng=self.rng, pair_count=pair_count)
        return self.session.snapshot()

    def _current(self) -> Session:
        if self.session is None:
            self.new_session()
        assert self.session is not None
        return self.session

    def pointer_down(self, x: float, y: float) -> PointerResult:
        return self._current().pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> PointerResult:
        return self._current().pointer_move(x, y)

    def pointer_up(self, x: float, y: float) -> PointerResult:
        return self._current().pointer_up(x, y)

    def snapshot(self) -> SessionSnapshot:
        return self._current().snapshot()
