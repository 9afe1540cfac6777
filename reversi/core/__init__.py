"""Core rules engine for Reversi."""

from .board import DEFAULT_SIZE, Board, validate_size
from .errors import InvalidSizeError, OutOfBoundsError, ReversiError
from .rules import (
    all_legal_moves,
    apply_flips,
    collect_flips,
    flips_in_direction,
    is_placement_valid,
    legal_move_exists,
    stone_counts,
    walk_ray,
    winner_for_counts,
)
from .session import GameSession, attempt_move, new_game, reset_game, resize_game
from .state import (
    DIRECTIONS,
    CellState,
    Direction,
    GamePhase,
    GameResult,
    MoveResult,
    NeighborSet,
    Player,
    Position,
    StoneCounts,
    TiePolicy,
)

__all__ = [
    "Board",
    "DEFAULT_SIZE",
    "validate_size",
    "ReversiError",
    "InvalidSizeError",
    "OutOfBoundsError",
    "all_legal_moves",
    "apply_flips",
    "collect_flips",
    "flips_in_direction",
    "is_placement_valid",
    "legal_move_exists",
    "stone_counts",
    "walk_ray",
    "winner_for_counts",
    "GameSession",
    "attempt_move",
    "new_game",
    "reset_game",
    "resize_game",
    "DIRECTIONS",
    "CellState",
    "Direction",
    "GamePhase",
    "GameResult",
    "MoveResult",
    "NeighborSet",
    "Player",
    "Position",
    "StoneCounts",
    "TiePolicy",
]
