import pytest

from reversi.core import (
    Board,
    CellState,
    Direction,
    GameResult,
    OutOfBoundsError,
    Player,
    StoneCounts,
    TiePolicy,
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


def empty_board(size: int = 6) -> Board:
    board = Board(size)
    board.grid[:, :] = CellState.EMPTY
    return board


def test_walk_ray_stops_at_edge() -> None:
    board = Board(4)
    assert list(walk_ray(board, 1, 1, Direction.E)) == [(2, 1), (3, 1)]
    assert list(walk_ray(board, 1, 1, Direction.NW)) == [(0, 0)]
    assert list(walk_ray(board, 0, 0, Direction.N)) == []


def test_placement_requires_adjacent_opponent() -> None:
    board = Board(4)

    assert is_placement_valid(board, 1, 0, Player.PLAYER1)  # touches (2, 1)
    assert not is_placement_valid(board, 0, 0, Player.PLAYER1)  # only touches own stone
    assert is_placement_valid(board, 3, 3, Player.PLAYER2)  # touches (2, 2)
    assert not is_placement_valid(board, 3, 3, Player.PLAYER1)


def test_placement_on_occupied_cell_is_invalid() -> None:
    board = Board(4)
    assert not is_placement_valid(board, 1, 1, Player.PLAYER2)
    assert not is_placement_valid(board, 2, 1, Player.PLAYER1)


def test_placement_out_of_bounds_raises() -> None:
    with pytest.raises(OutOfBoundsError):
        is_placement_valid(Board(4), 4, 0, Player.PLAYER1)


def test_flip_left_on_six_board() -> None:
    board = Board(6)
    board.set_cell_at(4, 2, CellState.PLAYER1)

    assert flips_in_direction(board, 4, 2, Player.PLAYER1, Direction.W) == [(3, 2)]
    assert apply_flips(board, 4, 2, Player.PLAYER1) == [(3, 2)]
    assert board.cell_at(3, 2) == CellState.PLAYER1


def test_run_ending_at_edge_is_not_flipped() -> None:
    board = empty_board(4)
    for x in (1, 2, 3):
        board.set_cell_at(x, 0, CellState.PLAYER2)
    board.set_cell_at(0, 0, CellState.PLAYER1)

    assert collect_flips(board, 0, 0, Player.PLAYER1) == []


def test_run_with_gap_is_not_flipped() -> None:
    board = empty_board(6)
    board.set_cell_at(1, 0, CellState.PLAYER2)
    board.set_cell_at(3, 0, CellState.PLAYER1)
    board.set_cell_at(0, 0, CellState.PLAYER1)

    assert flips_in_direction(board, 0, 0, Player.PLAYER1, Direction.E) == []


def test_own_stone_next_to_move_flips_nothing() -> None:
    board = empty_board(6)
    board.set_cell_at(2, 2, CellState.PLAYER1)
    board.set_cell_at(1, 1, CellState.PLAYER1)

    assert flips_in_direction(board, 2, 2, Player.PLAYER1, Direction.NW) == []


def test_flips_long_runs_in_several_directions() -> None:
    rows = [
        [1, 0, 0, 1, 0, 0],
        [0, 2, 0, 2, 0, 0],
        [0, 0, 2, 2, 0, 0],
        [1, 2, 2, 0, 2, 1],
        [0, 0, 0, 2, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ]
    board = Board.from_rows(rows)
    board.set_cell_at(3, 3, CellState.PLAYER1)

    flips = apply_flips(board, 3, 3, Player.PLAYER1)

    # N, E, W and NW runs are bracketed; S ends on an empty cell
    assert sorted(flips) == sorted([(3, 2), (3, 1), (4, 3), (2, 3), (1, 3), (2, 2), (1, 1)])
    assert board.cell_at(3, 4) == CellState.PLAYER2
    assert all(board.cell_at(x, y) == CellState.PLAYER1 for x, y in flips)


@pytest.mark.parametrize("size", [4, 6, 8])
def test_legal_moves_match_validator(size: int) -> None:
    board = Board(size)
    for player in Player:
        expected = sorted(
            (x, y)
            for x in range(size)
            for y in range(size)
            if is_placement_valid(board, x, y, player)
        )
        assert all_legal_moves(board, player) == expected
        assert legal_move_exists(board, player) == bool(expected)


def test_initial_legal_moves_on_four_board() -> None:
    assert all_legal_moves(Board(4), Player.PLAYER1) == [
        (0, 1), (0, 2), (0, 3), (1, 0), (1, 3), (2, 0), (2, 3), (3, 0), (3, 1), (3, 2),
    ]


def test_no_legal_moves_without_opponent_stones() -> None:
    board = empty_board(4)
    board.set_cell_at(0, 0, CellState.PLAYER1)

    assert not legal_move_exists(board, Player.PLAYER1)
    assert all_legal_moves(board, Player.PLAYER1) == []
    assert legal_move_exists(board, Player.PLAYER2)


def test_stone_counts() -> None:
    counts = stone_counts(Board(8))
    assert counts == StoneCounts(player1=2, player2=2, empty=60)
    assert counts.total == 64
    assert counts.for_player(Player.PLAYER2) == 2


def test_winner_for_counts() -> None:
    assert winner_for_counts(StoneCounts(5, 3, 0)) == (GameResult.PLAYER1_WIN, Player.PLAYER1)
    assert winner_for_counts(StoneCounts(3, 5, 0)) == (GameResult.PLAYER2_WIN, Player.PLAYER2)
    assert winner_for_counts(StoneCounts(4, 4, 0)) == (GameResult.DRAW, None)
    assert winner_for_counts(StoneCounts(4, 4, 0), TiePolicy.PLAYER2) == (
        GameResult.PLAYER2_WIN,
        Player.PLAYER2,
    )
