"""Reversi rules engine."""

from . import config, core, env, features
from .config import ConfigError, ReversiConfig, parse_board_size
from .core import (
    Board,
    CellState,
    GamePhase,
    GameResult,
    GameSession,
    InvalidSizeError,
    MoveResult,
    OutOfBoundsError,
    Player,
    ReversiError,
    StoneCounts,
    TiePolicy,
    all_legal_moves,
    attempt_move,
    legal_move_exists,
    new_game,
    reset_game,
    resize_game,
    stone_counts,
)
from .env import ReversiEnv

__all__ = [
    "config",
    "core",
    "env",
    "features",
    "ConfigError",
    "ReversiConfig",
    "parse_board_size",
    "Board",
    "CellState",
    "GamePhase",
    "GameResult",
    "GameSession",
    "InvalidSizeError",
    "MoveResult",
    "OutOfBoundsError",
    "Player",
    "ReversiError",
    "StoneCounts",
    "TiePolicy",
    "all_legal_moves",
    "attempt_move",
    "legal_move_exists",
    "new_game",
    "reset_game",
    "resize_game",
    "stone_counts",
    "ReversiEnv",
]
