from __future__ import annotations

import numpy as np

from reversi.core import Board, Player, all_legal_moves

BOARD_CHANNELS = 3  # mover stones, opponent stones, legal moves


def build_board_planes(board: Board, player: Player) -> np.ndarray:
    """Return planes with shape (3, N, N), indexed [channel, x, y]."""
    planes = np.zeros((BOARD_CHANNELS, board.size, board.size), dtype=np.float32)
    planes[0] = board.grid == int(player.cell_state)
    planes[1] = board.grid == int(player.opponent.cell_state)
    for x, y in all_legal_moves(board, player):
        planes[2, x, y] = 1.0
    return planes


def legal_action_mask(board: Board, player: Player) -> np.ndarray:
    mask = np.zeros(board.size * board.size, dtype=np.int8)
    for x, y in all_legal_moves(board, player):
        mask[encode_cell(board.size, x, y)] = 1
    return mask


def encode_cell(size: int, x: int, y: int) -> int:
    return x * size + y


def decode_cell(size: int, index: int) -> tuple[int, int]:
    if not 0 <= index < size * size:
        raise ValueError(f"Action index {index} out of range.")
    return divmod(index, size)
