from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .board import DEFAULT_SIZE, Board
from .rules import apply_flips, is_placement_valid, legal_move_exists, stone_counts, winner_for_counts
from .state import GamePhase, GameResult, MoveResult, Player, TiePolicy

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    board: Board
    current_player: Player = Player.PLAYER1
    previous_player_blocked: bool = False
    phase: GamePhase = GamePhase.PLAYER1_TO_MOVE
    result: GameResult = GameResult.ONGOING
    winner: Optional[Player] = None
    tie_policy: TiePolicy = field(default=TiePolicy.DRAW)

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def copy(self) -> "GameSession":
        return GameSession(
            board=self.board.copy(),
            current_player=self.current_player,
            previous_player_blocked=self.previous_player_blocked,
            phase=self.phase,
            result=self.result,
            winner=self.winner,
            tie_policy=self.tie_policy,
        )

    def restart(self) -> None:
        self.current_player = Player.PLAYER1
        self.previous_player_blocked = False
        self.phase = GamePhase.PLAYER1_TO_MOVE
        self.result = GameResult.ONGOING
        self.winner = None


def new_game(size: int = DEFAULT_SIZE, *, tie_policy: TiePolicy = TiePolicy.DRAW) -> GameSession:
    return GameSession(board=Board(size), tie_policy=TiePolicy(tie_policy))


def reset_game(session: GameSession) -> None:
    session.board.reset()
    session.restart()


def resize_game(session: GameSession, new_size: int) -> None:
    # Board.resize validates before touching anything.
    session.board.resize(new_size)
    session.restart()


def attempt_move(session: GameSession, x: int, y: int, player: Optional[Player] = None) -> MoveResult:
    """Place a stone for ``player`` (default: the player to move) at (x, y).

    Rejections (game over, wrong player, occupied or non-adjacent cell) leave
    the session untouched and come back as ``accepted=False``. Coordinates
    off the board raise :class:`OutOfBoundsError`.
    """
    board = session.board
    board.cell_at(x, y)  # bounds check

    mover = session.current_player if player is None else Player(player)
    if session.is_over or mover != session.current_player or not is_placement_valid(board, x, y, mover):
        logger.debug("Rejected %s at (%d, %d)", mover.name, x, y)
        return _rejected(session)

    board.set_cell_at(x, y, mover.cell_state)
    flipped = apply_flips(board, x, y, mover)
    _advance_turn(session, mover)

    return MoveResult(
        accepted=True,
        new_active_player=session.current_player,
        flipped_cells=tuple(flipped),
        placed=(x, y),
        game_over=session.is_over,
        winner=session.winner,
        result=session.result,
    )


def _rejected(session: GameSession) -> MoveResult:
    return MoveResult(
        accepted=False,
        new_active_player=session.current_player,
        game_over=session.is_over,
        winner=session.winner,
        result=session.result,
    )


def _advance_turn(session: GameSession, mover: Player) -> None:
    board = session.board
    if board.is_full():
        _finish(session)
        return

    following = mover.opponent
    if legal_move_exists(board, following):
        session.previous_player_blocked = False
        session.current_player = following
        session.phase = GamePhase.to_move(following)
        return

    session.previous_player_blocked = True
    if not legal_move_exists(board, mover):
        # neither side can move
        _finish(session)
        return

    logger.info("%s has no legal move; %s plays again", following.name, mover.name)
    session.current_player = mover
    session.phase = GamePhase.to_move(mover)


def _finish(session: GameSession) -> None:
    counts = stone_counts(session.board)
    session.result, session.winner = winner_for_counts(counts, session.tie_policy)
    session.phase = GamePhase.GAME_OVER
    logger.info(
        "Game over: %s (player1=%d, player2=%d)", session.result.value, counts.player1, counts.player2
    )
