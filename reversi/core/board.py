from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidSizeError, OutOfBoundsError
from .state import DIRECTIONS, CellState, NeighborSet, Position

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 6

GridArray = NDArray[np.int8]

_SYMBOLS = {CellState.EMPTY: ".", CellState.PLAYER1: "X", CellState.PLAYER2: "O"}
_HINT_SYMBOL = "*"


def validate_size(size: object) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidSizeError(f"Board size must be an integer, got {size!r}.")
    if size <= 0 or size % 2 != 0:
        raise InvalidSizeError(f"Board size must be a positive even number, got {size}.")
    return int(size)


class Board:
    """Square grid of cell ownership, indexed as ``grid[x, y]``.

    Only the four centre cells are occupied after creation or reset; every
    other change goes through :meth:`set_cell_at`.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self.size = validate_size(size)
        self.grid: GridArray = np.zeros((self.size, self.size), dtype=np.int8)
        self._seed()

    @classmethod
    def create(cls, size: int) -> "Board":
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from ``rows[y][x]`` values, e.g. for tests."""
        size = validate_size(len(rows))
        if any(len(row) != size for row in rows):
            raise InvalidSizeError("Board rows must form a square.")
        board = cls(size)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                board.grid[x, y] = CellState(int(value))
        return board

    def to_rows(self) -> List[List[int]]:
        return [[int(self.grid[x, y]) for x in range(self.size)] for y in range(self.size)]

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone.size = self.size
        clone.grid = self.grid.copy()
        return clone

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)
        self._seed()

    def resize(self, new_size: int) -> None:
        size = validate_size(new_size)
        logger.info("Resizing board from %d to %d", self.size, size)
        self.size = size
        self.reset()

    def _seed(self) -> None:
        # XO / OX block around the centre
        centre = self.size // 2 - 1
        self.grid[centre, centre] = CellState.PLAYER1
        self.grid[centre + 1, centre] = CellState.PLAYER2
        self.grid[centre, centre + 1] = CellState.PLAYER2
        self.grid[centre + 1, centre + 1] = CellState.PLAYER1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Cell ({x}, {y}) is outside a {self.size}x{self.size} board.")

    def cell_at(self, x: int, y: int) -> CellState:
        self._check_bounds(x, y)
        return CellState(int(self.grid[x, y]))

    def set_cell_at(self, x: int, y: int, state: CellState) -> None:
        self._check_bounds(x, y)
        self.grid[x, y] = CellState(state)

    def all_cells_with_state(self, state: CellState) -> Iterator[Position]:
        for x in range(self.size):
            for y in range(self.size):
                if self.grid[x, y] == state:
                    yield x, y

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.grid == int(state)))

    def is_full(self) -> bool:
        return not np.any(self.grid == CellState.EMPTY)

    def neighbors(self, x: int, y: int) -> NeighborSet:
        self._check_bounds(x, y)
        states: List[Optional[CellState]] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            states.append(CellState(int(self.grid[nx, ny])) if self.in_bounds(nx, ny) else None)
        return tuple(states)

    def neighbor_positions(self, x: int, y: int, state: Optional[CellState] = None) -> List[Position]:
        self._check_bounds(x, y)
        positions: List[Position] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not self.in_bounds(nx, ny):
                continue
            if state is None or self.grid[nx, ny] == state:
                positions.append((nx, ny))
        return positions

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self, hints: Iterable[Position] = ()) -> str:
        hint_set = set(hints)
        header = "   " + " ".join(str(x % 10) for x in range(self.size))
        lines = [header]
        for y in range(self.size):
            cells = []
            for x in range(self.size):
                state = CellState(int(self.grid[x, y]))
                if state == CellState.EMPTY and (x, y) in hint_set:
                    cells.append(_HINT_SYMBOL)
                else:
                    cells.append(_SYMBOLS[state])
            lines.append(f"{y:>2} " + " ".join(cells))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board(size={self.size})\n{self.render()}"
