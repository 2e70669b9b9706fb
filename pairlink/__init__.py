from .config import PuzzleConfig, DEFAULT_PALETTE, get_default_config, set_default_config, validate_config
from .errors import ConfigurationError, PlacementError
from .geometry import distance, segments_intersect, smooth, polylines_intersect
from .placement import generate_layout, place_tokens, pair_values, choose_pair_count
from .paths import begin_path, extend_path, resolve_path, find_token_at, would_intersect
from .session import (
    Session,
    PuzzleGame,
    PointerResult,
    SessionSnapshot,
    TokenView,
    ConnectionView,
)
from .types import Token, CandidatePath, Connection, PathResolution, Point

__all__ = [
    'PuzzleConfig',
    'DEFAULT_PALETTE',
    'get_default_config',
    'set_default_config',
    'validate_config',
    'ConfigurationError',
    'PlacementError',
    'distance',
    'segments_intersect',
    'smooth',
    'polylines_intersect',
    'generate_layout',
    'place_tokens',
    'pair_values',
    'choose_pair_count',
    'begin_path',
    'extend_path',
    'resolve_path',
    'find_token_at',
    'would_intersect',
    'Session',
    'PuzzleGame',
    'PointerResult',
    'SessionSnapshot',
    'TokenView',
    'ConnectionView',
    'Token',
    'CandidatePath',
    'Connection',
    'PathResolution',
    'Point',
]
