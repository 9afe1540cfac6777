from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from reversi.core import (
    DEFAULT_SIZE,
    GameResult,
    GameSession,
    TiePolicy,
    attempt_move,
    new_game,
    stone_counts,
)
from reversi.features import BOARD_CHANNELS, build_board_planes, decode_cell, legal_action_mask


class ReversiEnv(gym.Env):
    """Hot-seat environment: each step plays for whoever is to move."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        size: int = DEFAULT_SIZE,
        tie_policy: TiePolicy = TiePolicy.DRAW,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._tie_policy = tie_policy
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode
        self._session: GameSession = new_game(size, tie_policy=tie_policy)
        self._configure_spaces(size)

    @property
    def session(self) -> GameSession:
        return self._session

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        size = options.get("size", self._session.size) if options else self._session.size
        self._session = new_game(size, tie_policy=self._tie_policy)
        self._configure_spaces(size)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        x, y = decode_cell(self._session.size, int(action_index))
        outcome = attempt_move(self._session, x, y)

        info = self._build_info()
        info["accepted"] = outcome.accepted
        info["flipped_cells"] = outcome.flipped_cells

        reward = self._compute_reward(self._session.result)
        terminated = self._session.is_over
        return self._build_observation(), reward, terminated, False, info

    def legal_action_mask(self) -> np.ndarray:
        mask = legal_action_mask(self._session.board, self._session.current_player)
        if self._session.is_over:
            mask[:] = 0
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._session.board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _configure_spaces(self, size: int) -> None:
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=(BOARD_CHANNELS, size, size), dtype=np.float32),
                "player": spaces.Discrete(2),
            }
        )
        self.action_space = spaces.Discrete(size * size)

    def _build_observation(self) -> Dict[str, object]:
        player = self._session.current_player
        return {
            "board": build_board_planes(self._session.board, player),
            "player": int(player) - 1,
        }

    def _build_info(self) -> Dict[str, object]:
        counts = stone_counts(self._session.board)
        return {
            "legal_action_mask": self.legal_action_mask(),
            "player1": counts.player1,
            "player2": counts.player2,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.PLAYER1_WIN:
            return 1.0
        if result == GameResult.PLAYER2_WIN:
            return -1.0
        return 0.0
