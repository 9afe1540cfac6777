from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .board import Board
from .state import (
    DIRECTIONS,
    CellState,
    Direction,
    GameResult,
    Player,
    Position,
    StoneCounts,
    TiePolicy,
)

logger = logging.getLogger(__name__)


def walk_ray(board: Board, x: int, y: int, direction: Direction) -> Iterator[Position]:
    """Yield in-bounds cells from (x, y) outward, excluding the origin."""
    dx, dy = DIRECTIONS[direction]
    cx, cy = x + dx, y + dy
    while board.in_bounds(cx, cy):
        yield cx, cy
        cx += dx
        cy += dy


def is_placement_valid(board: Board, x: int, y: int, player: Player) -> bool:
    """Empty cell with at least one opponent stone among its neighbours.

    Whether the move actually captures anything is left to the flip rules.
    """
    if board.cell_at(x, y) != CellState.EMPTY:
        return False
    wanted = player.opponent.cell_state
    return any(state == wanted for state in board.neighbors(x, y))


def flips_in_direction(board: Board, x: int, y: int, player: Player, direction: Direction) -> List[Position]:
    own = player.cell_state
    opponent = player.opponent.cell_state
    candidates: List[Position] = []
    for cx, cy in walk_ray(board, x, y, direction):
        state = board.cell_at(cx, cy)
        if state == opponent:
            candidates.append((cx, cy))
        elif state == own:
            return candidates
        else:
            return []
    # ran off the board without an own stone closing the run
    return []


def collect_flips(board: Board, x: int, y: int, player: Player) -> List[Position]:
    flips: List[Position] = []
    for direction in Direction:
        flips.extend(flips_in_direction(board, x, y, player, direction))
    return flips


def apply_flips(board: Board, x: int, y: int, player: Player) -> List[Position]:
    """Flip every bracketed run around a freshly placed stone at (x, y)."""
    flips = collect_flips(board, x, y, player)
    for fx, fy in flips:
        board.set_cell_at(fx, fy, player.cell_state)
    if flips:
        logger.debug("%s at (%d, %d) flipped %s", player.name, x, y, flips)
    return flips


def all_legal_moves(board: Board, player: Player) -> List[Position]:
    # Empty cells touching any opponent stone, as move hints are drawn.
    moves: set[Position] = set()
    for ox, oy in board.all_cells_with_state(player.opponent.cell_state):
        moves.update(board.neighbor_positions(ox, oy, CellState.EMPTY))
    return sorted(moves)


def legal_move_exists(board: Board, player: Player) -> bool:
    for ox, oy in board.all_cells_with_state(player.opponent.cell_state):
        if board.neighbor_positions(ox, oy, CellState.EMPTY):
            return True
    return False


def stone_counts(board: Board) -> StoneCounts:
    return StoneCounts(
        player1=board.count(CellState.PLAYER1),
        player2=board.count(CellState.PLAYER2),
        empty=board.count(CellState.EMPTY),
    )


def winner_for_counts(
    counts: StoneCounts, tie_policy: TiePolicy = TiePolicy.DRAW
) -> Tuple[GameResult, Optional[Player]]:
    if counts.player1 > counts.player2:
        return GameResult.PLAYER1_WIN, Player.PLAYER1
    if counts.player2 > counts.player1:
        return GameResult.PLAYER2_WIN, Player.PLAYER2
    if tie_policy == TiePolicy.PLAYER2:
        return GameResult.PLAYER2_WIN, Player.PLAYER2
    return GameResult.DRAW, None
