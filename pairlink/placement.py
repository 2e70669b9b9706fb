"""Random placement of paired tokens under spacing constraints."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy.spatial.distance import cdist

from .config import PuzzleConfig, get_default_config, validate_config
from .errors import ConfigurationError, PlacementError
from .logging_utils import apply_debug_logging
from .types import Point, Token

logger = logging.getLogger(__name__)


def choose_pair_count(config: PuzzleConfig, rng: np.random.Generator) -> int:
    lo, hi = config.pair_count_range
    return int(rng.integers(lo, hi + 1))


def pair_values(pair_count: int, rng: np.random.Generator) -> List[int]:
    """Return ``[1, 1, 2, 2, ..., k, k]`` in random order."""

    values = np.repeat(np.arange(1, pair_count + 1), 2)
    return [int(v) for v in rng.permutation(values)]


def _first_valid_candidate(
    candidates: np.ndarray,
    placed: np.ndarray,
    partner: Optional[Point],
    config: PuzzleConfig,
) -> Optional[Point]:
    valid = np.ones(candidates.shape[0], dtype=bool)
    if placed.shape[0]:
        nearest = cdist(candidates, placed).min(axis=1)
        valid &= nearest >= config.min_token_spacing
    if partner is not None:
        to_partner = cdist(candidates, np.asarray([partner], dtype=float))[:, 0]
        valid &= to_partner >= config.min_pair_distance
    hits = np.flatnonzero(valid)
    if hits.size == 0:
        return None
    x, y = candidates[hits[0]]
    return float(x), float(y)


def place_tokens(
    values: Sequence[int],
    config: PuzzleConfig,
    rng: np.random.Generator,
) -> Optional[List[Token]]:
    """Make a single layout attempt for ``values``.

    Each slot draws up to ``config.max_attempts`` uniform candidates inside the
    padded canvas and keeps the first one that is far enough from every placed
    token and, once the partner of the same value is down, far enough from that
    partner. Returns ``None`` when a slot runs out of candidates; the caller is
    expected to restart with a fresh permutation.
    """

    low = np.array([config.padding, config.padding], dtype=float)
    high = np.array([config.width - config.padding, config.height - config.padding], dtype=float)

    tokens: List[Token] = []
    placed = np.empty((0, 2), dtype=float)
    first_of_value: Dict[int, Point] = {}

    for slot, value in enumerate(values):
        candidates = rng.uniform(low, high, size=(config.max_attempts, 2))
        position = _first_valid_candidate(candidates, placed, first_of_value.get(value), config)
        if position is None:
            logger.debug("Slot %d (value %d) exhausted %d attempts", slot, value, config.max_attempts)
            return None

        tokens.append(
            Token(
                id=slot,
                value=int(value),
                position=position,
                radius=config.token_radius,
                color=config.color_for(int(value)),
            )
        )
        placed = np.vstack([placed, np.asarray(position, dtype=float)])
        first_of_value.setdefault(int(value), position)

    return tokens


def generate_layout(
    config: Optional[PuzzleConfig] = None,
    rng: Optional[np.random.Generator] = None,
    *,
    pair_count: Optional[int] = None,
) -> List[Token]:
    """Return a full token layout, restarting from scratch on failure.

    The pair count is fixed for the whole call; every restart draws a new
    permutation. Raises :class:`PlacementError` once ``config.max_restarts``
    layouts have failed.
    """

    config = config or get_default_config()
    validate_config(config)
    rng = rng if rng is not None else np.random.default_rng()

    if pair_count is None:
        pair_count = choose_pair_count(config, rng)
    elif pair_count < 1:
        raise ConfigurationError(f"pair count must be positive (got {pair_count})")

    for restart in range(config.max_restarts):
        values = pair_values(pair_count, rng)
        tokens = place_tokens(values, config, rng)
        if tokens is not None:
            logger.info(
                "Placed %d token(s) for %d pair(s) after %d restart(s)",
                len(tokens),
                pair_count,
                restart,
            )
            return tokens
        logger.debug("Layout attempt %d failed for %d pair(s)", restart, pair_count)

    logger.error(
        "Placement failed: %d pair(s) on %gx%g canvas after %d restart(s)",
        pair_count,
        config.width,
        config.height,
        config.max_restarts,
    )
    raise PlacementError(pair_count, config.max_restarts)


apply_debug_logging(globals(), logger=logger)
