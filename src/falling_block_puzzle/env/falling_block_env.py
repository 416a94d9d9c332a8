from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_block_puzzle.game import Action, FallingBlockGame, GameConfig
from falling_block_puzzle.game.core import FALLING_CELL


class FallingBlockEnv(gym.Env):
    """Step-driven wrapper around `FallingBlockGame`.

    Wall-clock gravity is replaced by a forced soft drop every `drop_every`
    steps. The reward is the number of lines cleared by the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 5}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 drop_every: int = 4,
                 max_episode_steps: int = 5000) -> None:
        super().__init__()
        if drop_every <= 0:
            raise ValueError("drop_every must be positive")
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.drop_every = int(drop_every)
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.game.board.height, self.game.board.width
        self.observation_space = spaces.Box(low=0, high=FALLING_CELL, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.game.restart()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        lines_before = self.game.lines_cleared_total
        accepted = self.game.step(Action(int(action)))
        self._steps += 1
        if self._steps % self.drop_every == 0:
            self.game.soft_drop()

        reward = float(self.game.lines_cleared_total - lines_before)
        terminated = self.game.game_over
        truncated = self._steps >= self.max_episode_steps and not terminated

        info = self._get_info()
        info["accepted"] = accepted
        return self.game.get_state(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        img = self.game.board.colors()
        piece = self.game.piece
        if piece is not None and not self.game.game_over:
            for x, y in piece.cells():
                if self.game.board.is_inside(y, x):
                    img[y, x] = piece.color
        return img

    def close(self) -> None:
        pass
