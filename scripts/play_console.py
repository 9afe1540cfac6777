#!/usr/bin/env python3
"""Play Reversi hot-seat in the console, with optional move hints."""

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from reversi import (
    ConfigError,
    GameSession,
    Player,
    ReversiConfig,
    TiePolicy,
    all_legal_moves,
    attempt_move,
    new_game,
    parse_board_size,
    reset_game,
    resize_game,
    stone_counts,
)
from reversi.config import LOG_LEVELS

RULES_TEXT = (
    "You may place a stone on an empty cell when at least one of its neighbours\n"
    "holds a stone of the other player.\n"
    "\n"
    "After placing, every run of the other player's stones enclosed between the new\n"
    "stone and one of your own is flipped. When nobody can move, or the board is\n"
    "full, the player with the most stones wins."
)

HELP_TEXT = "Commands: 'x y' to place, hints, reset, size N, rules, q"

PLAYER_LABELS = {Player.PLAYER1: "Player 1 (X)", Player.PLAYER2: "Player 2 (O)"}


@dataclass
class ConsoleState:
    session: GameSession
    show_hints: bool = True
    running: bool = True


def format_status(session: GameSession) -> str:
    counts = stone_counts(session.board)
    lines = [f"Player 1: {counts.player1} stones   Player 2: {counts.player2} stones"]
    if session.is_over:
        if session.winner is None:
            lines.append("Draw!")
        else:
            lines.append(f"Player {int(session.winner)} has won!")
    else:
        lines.append(f"At set: {PLAYER_LABELS[session.current_player]}")
    return "\n".join(lines)


def format_board(state: ConsoleState) -> str:
    session = state.session
    hints: List = []
    if state.show_hints and not session.is_over:
        hints = all_legal_moves(session.board, session.current_player)
    return session.board.render(hints)


def handle_command(state: ConsoleState, line: str) -> str:
    """Apply one line of input and return the message to show."""
    parts = line.strip().split()
    if not parts:
        return HELP_TEXT
    command = parts[0].lower()

    if command in {"q", "quit", "exit"}:
        state.running = False
        return "Bye."
    if command == "rules":
        return RULES_TEXT
    if command == "hints":
        state.show_hints = not state.show_hints
        return f"Hints {'on' if state.show_hints else 'off'}."
    if command == "reset":
        reset_game(state.session)
        return "Game reset."
    if command == "size":
        if len(parts) != 2:
            return "Usage: size N"
        try:
            new_size = parse_board_size(parts[1])
        except ConfigError as exc:
            return f"Size has an invalid value: {exc}"
        resize_game(state.session, new_size)
        return f"Board resized to {new_size}x{new_size}."

    if len(parts) != 2 or not all(part.isdecimal() for part in parts):
        return HELP_TEXT
    x, y = int(parts[0]), int(parts[1])
    if not state.session.board.in_bounds(x, y):
        return f"({x}, {y}) is not on the board."
    if state.session.is_over:
        return "The game is over; type 'reset' to play again."

    mover = state.session.current_player
    outcome = attempt_move(state.session, x, y)
    if not outcome.accepted:
        return f"Cannot place at ({x}, {y})."
    message = f"Placed at ({x}, {y}), flipped {len(outcome.flipped_cells)}."
    if not outcome.game_over and outcome.new_active_player == mover:
        message += f" {PLAYER_LABELS[mover.opponent]} cannot move and passes."
    return message


def load_config(args: argparse.Namespace) -> ReversiConfig:
    config = ReversiConfig.load(args.config) if args.config else ReversiConfig()
    if args.size is not None:
        config.board_size = parse_board_size(args.size)
    if args.no_hints:
        config.show_hints = False
    if args.tie_policy is not None:
        config.tie_policy = args.tie_policy
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def play_interactive(config: ReversiConfig) -> None:
    state = ConsoleState(
        session=new_game(config.board_size, tie_policy=config.tie),
        show_hints=config.show_hints,
    )
    print(HELP_TEXT)
    while state.running:
        print()
        print(format_board(state))
        print(format_status(state.session))
        try:
            line = input("> ")
        except EOFError:
            break
        print(handle_command(state, line))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Reversi in the console.")
    parser.add_argument("--config", type=Path, help="YAML config file", default=None)
    parser.add_argument("--size", type=str, default=None)
    parser.add_argument("--no-hints", action="store_true")
    parser.add_argument("--tie-policy", choices=[policy.value for policy in TiePolicy], default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = load_config(args)
    except ConfigError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    play_interactive(config)


if __name__ == "__main__":
    main()
