"""
Configuration for a Reversi session and its front-ends.
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from reversi.core import DEFAULT_SIZE, InvalidSizeError, ReversiError, TiePolicy, validate_size

# Largest value the board-size field accepts (signed 32-bit).
MAX_BOARD_SIZE_INPUT = 2**31 - 1

_DIGITS = re.compile(r"^\d+$")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ReversiError, ValueError):
    pass


@dataclass
class ReversiConfig:
    """Settings for a game session and the console front-end."""
    board_size: int = DEFAULT_SIZE
    show_hints: bool = True
    tie_policy: str = TiePolicy.DRAW.value
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        try:
            validate_size(self.board_size)
        except InvalidSizeError as exc:
            raise ConfigError(str(exc)) from exc
        try:
            TiePolicy(self.tie_policy)
        except ValueError as exc:
            raise ConfigError(f"Unknown tie policy {self.tie_policy!r}.") from exc
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}.")

    @property
    def tie(self) -> TiePolicy:
        return TiePolicy(self.tie_policy)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReversiConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ReversiConfig":
        path = Path(path)
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} does not contain a mapping.")
        return cls.from_dict(data)

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.to_dict(), sort_keys=False), encoding="utf-8")


def parse_board_size(text: str) -> int:
    """Parse the board-size text field; the message is meant for the user."""
    raw = text.strip()
    if not _DIGITS.match(raw):
        raise ConfigError(f"{text!r} is not a whole number.")
    value = int(raw)
    if value > MAX_BOARD_SIZE_INPUT:
        raise ConfigError(f"{raw} is too large.")
    try:
        return validate_size(value)
    except InvalidSizeError as exc:
        raise ConfigError(str(exc)) from exc
