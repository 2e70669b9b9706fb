"""Configuration for board generation and token geometry."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigurationError

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#FF5733",
    "#33FF57",
    "#3357FF",
    "#F3FF33",
    "#FF33F3",
    "#33FFF3",
)


@dataclass
class PuzzleConfig:
    """Canvas dimensions and placement constants supplied by the shell."""

    width: float = 600.0
    height: float = 400.0
    token_radius: float = 20.0
    padding: float = 30.0
    min_pair_distance: float = 150.0
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    fallback_color: str = "#000000"
    pair_count_range: Tuple[int, int] = (3, 5)
    spacing_factor: float = 2.5
    max_attempts: int = 200
    max_restarts: int = 100

    @property
    def min_token_spacing(self) -> float:
        return self.spacing_factor * self.token_radius

    def color_for(self, value: int) -> str:
        if 1 <= value <= len(self.palette):
            return self.palette[value - 1]
        return self.fallback_color


def validate_config(config: PuzzleConfig) -> None:
    if config.width <= 0 or config.height <= 0:
        raise ConfigurationError(f"canvas must have positive size (got {config.width}x{config.height})")
    if config.token_radius <= 0:
        raise ConfigurationError(f"token radius must be positive (got {config.token_radius})")
    if config.padding < 0:
        raise ConfigurationError(f"padding must be non-negative (got {config.padding})")
    if 2 * config.padding >= config.width or 2 * config.padding >= config.height:
        raise ConfigurationError(
            f"padding {config.padding} leaves no room inside a {config.width}x{config.height} canvas"
        )
    if config.min_pair_distance < 0:
        raise ConfigurationError("min_pair_distance must be non-negative")
    if config.spacing_factor < 0:
        raise ConfigurationError("spacing_factor must be non-negative")
    lo, hi = config.pair_count_range
    if lo < 1 or hi < lo:
        raise ConfigurationError(f"pair_count_range must satisfy 1 <= lo <= hi (got {lo}, {hi})")
    if config.max_attempts < 1:
        raise ConfigurationError("max_attempts must be at least 1")
    if config.max_restarts < 1:
        raise ConfigurationError("max_restarts must be at least 1")


_DEFAULT_CONFIG = PuzzleConfig()


def get_default_config() -> PuzzleConfig:
    return copy.deepcopy(_DEFAULT_CONFIG)


def set_default_config(config: PuzzleConfig) -> None:
    global _DEFAULT_CONFIG
    validate_config(config)
    _DEFAULT_CONFIG = copy.deepcopy(config)
