import pytest

from reversi.core import Board, CellState, Player, new_game

from scripts.play_console import (
    HELP_TEXT,
    RULES_TEXT,
    ConsoleState,
    build_parser,
    format_board,
    format_status,
    handle_command,
)


def make_state(size: int = 6) -> ConsoleState:
    return ConsoleState(session=new_game(size))


def test_status_shows_scores_and_turn() -> None:
    state = make_state()
    assert format_status(state.session) == "Player 1: 2 stones   Player 2: 2 stones\nAt set: Player 1 (X)"


def test_move_command_places_stone() -> None:
    state = make_state()

    message = handle_command(state, "4 2")

    assert message == "Placed at (4, 2), flipped 1."
    assert state.session.board.cell_at(4, 2) == CellState.PLAYER1
    assert state.session.current_player == Player.PLAYER2


def test_rejected_and_off_board_moves() -> None:
    state = make_state()
    assert handle_command(state, "0 0") == "Cannot place at (0, 0)."
    assert handle_command(state, "9 9") == "(9, 9) is not on the board."
    assert state.session.board == Board(6)


def test_size_command_validates_input() -> None:
    state = make_state()

    assert handle_command(state, "size 7").startswith("Size has an invalid value")
    assert state.session.size == 6

    assert handle_command(state, "size 8") == "Board resized to 8x8."
    assert state.session.board == Board(8)


def test_hints_toggle_changes_rendering() -> None:
    state = make_state(4)
    assert "*" in format_board(state)

    assert handle_command(state, "hints") == "Hints off."
    assert "*" not in format_board(state)


def test_misc_commands() -> None:
    state = make_state()
    handle_command(state, "4 2")

    assert handle_command(state, "reset") == "Game reset."
    assert state.session.board == Board(6)
    assert handle_command(state, "rules") == RULES_TEXT
    assert handle_command(state, "") == HELP_TEXT
    assert handle_command(state, "q") == "Bye."
    assert not state.running


def test_game_over_message() -> None:
    board = Board.from_rows(
        [
            [0, 2, 1, 1],
            [2, 2, 1, 1],
            [1, 1, 1, 1],
            [1, 1, 1, 1],
        ]
    )
    state = make_state(4)
    state.session.board = board

    handle_command(state, "0 0")

    assert format_status(state.session).endswith("Player 1 has won!")
    assert handle_command(state, "1 1") == "The game is over; type 'reset' to play again."


def test_non_ascii_digits_are_not_moves() -> None:
    state = make_state()
    assert handle_command(state, "² 1") == HELP_TEXT
    assert state.session.board == Board(6)


def test_log_level_flag_accepts_only_known_levels() -> None:
    parser = build_parser()
    assert parser.parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        parser.parse_args(["--log-level", "LOUD"])
