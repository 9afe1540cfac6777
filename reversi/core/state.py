from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class CellState(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


class Player(IntEnum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def cell_state(self) -> CellState:
        return CellState(int(self))

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER2 if self == Player.PLAYER1 else Player.PLAYER1


class Direction(IntEnum):
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7


# (dx, dy) unit vectors indexed by Direction; y grows downwards.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


class GamePhase(Enum):
    PLAYER1_TO_MOVE = "player1_to_move"
    PLAYER2_TO_MOVE = "player2_to_move"
    GAME_OVER = "game_over"

    @staticmethod
    def to_move(player: Player) -> "GamePhase":
        return GamePhase.PLAYER1_TO_MOVE if player == Player.PLAYER1 else GamePhase.PLAYER2_TO_MOVE


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER1_WIN = "player1_win"
    PLAYER2_WIN = "player2_win"
    DRAW = "draw"


class TiePolicy(Enum):
    DRAW = "draw"
    # Equal counts award the game to Player 2, as the original front-end did.
    PLAYER2 = "player2"


Position = Tuple[int, int]
NeighborSet = Tuple[Optional[CellState], ...]  # length 8, indexed by Direction


@dataclass(frozen=True)
class StoneCounts:
    player1: int
    player2: int
    empty: int

    @property
    def total(self) -> int:
        return self.player1 + self.player2 + self.empty

    def for_player(self, player: Player) -> int:
        return self.player1 if player == Player.PLAYER1 else self.player2


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    new_active_player: Player
    flipped_cells: Tuple[Position, ...] = field(default_factory=tuple)
    placed: Optional[Position] = None
    game_over: bool = False
    winner: Optional[Player] = None
    result: GameResult = GameResult.ONGOING
