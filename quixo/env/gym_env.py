from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from quixo.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    GameResult,
    decode_move,
    legal_move_mask,
)
from quixo.game import GameState, TurnController


class QuixoEnv(gym.Env):
    """Two-player Quixo as a gymnasium environment.

    Each ``step`` plays one move for whichever player is to move. Rewards
    are from player A's point of view; a game cut off by ``max_ply`` is
    reported as truncated.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 2}

    def __init__(
        self,
        *,
        max_ply: Optional[int] = 200,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=2, shape=(BOARD_SIZE, BOARD_SIZE), dtype=np.int8),
                "current_player": spaces.Discrete(2),
            }
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self.controller = TurnController(max_ply=max_ply)

    @property
    def state(self) -> GameState:
        return self.controller.state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        max_ply = options.get("max_ply", self._max_ply) if options else self._max_ply
        self.controller = TurnController(max_ply=max_ply)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self.controller.play(decode_move(int(action_index)))

        result = self.state.result
        reward = self._compute_reward(result)
        terminated = result in (GameResult.PLAYER_A_WIN, GameResult.PLAYER_B_WIN)
        truncated = result == GameResult.DRAW
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        if self.state.is_terminal:
            return np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
        return legal_move_mask(self.state.board, self.state.current_player)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self.state.board.render()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.state.board.grid.copy(),
            "current_player": int(self.state.current_player) - 1,
        }

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.PLAYER_A_WIN:
            return 1.0
        if result == GameResult.PLAYER_B_WIN:
            return -1.0
        return 0.0
