from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_block_rl.game import Action, FallingBlockGame, GameConfig, GameRules, NumpyRandomSource, PieceKind

NOOP = len(Action)


class FallingBlockEnv(gym.Env):
    """Gymnasium wrapper over FallingBlockGame.

    Actions (5 total):
      0: Move Left
      1: Move Right
      2: Move Down
      3: Rotate
      4: No-op

    Each step applies the action, then advances the game clock by
    ``frame_seconds`` so gravity fires at the engine's own cadence.
    """

    metadata = {"render_modes": [], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[GameRules] = None,
        frame_seconds: float = 0.05,
        max_episode_steps: int = 10000,
        lines_weight: float = 1.0,
        step_penalty: float = 0.0,
        terminal_penalty: float = 0.0,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.rules = rules or GameRules()
        self.frame_seconds = float(frame_seconds)
        self.max_episode_steps = int(max_episode_steps)
        self.lines_weight = float(lines_weight)
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        self.game = self._new_game(NumpyRandomSource.from_seed(self.config.random_seed))

        h, w = self.config.height, self.config.width
        k = len(PieceKind)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-k, high=k, shape=(h, w), dtype=np.int8),
                "next": spaces.Discrete(k),
            }
        )
        self.action_space = spaces.Discrete(len(Action) + 1)

        self._steps = 0

    def _new_game(self, random_source: NumpyRandomSource) -> FallingBlockGame:
        return FallingBlockGame(self.config.size, random_source, self.rules)

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "grid": self.game.get_state().astype(np.int8),
            "next": int(self.game.next_piece.kind) - 1,
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared_total": self.game.lines_cleared_total,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        # Pieces are drawn from the env-owned generator so seeding the env seeds the game.
        self.game = self._new_game(NumpyRandomSource(self.np_random))
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int | np.integer):
        a = int(action)
        if not self.action_space.contains(a):
            raise ValueError(f"invalid action {action!r} for {self.action_space}")

        lines_before = self.game.lines_cleared_total
        if a != NOOP:
            self.game.apply(Action(a))
        self.game.tick(self.frame_seconds)
        self._steps += 1

        lines = self.game.lines_cleared_total - lines_before
        reward_components: Dict[str, float] = {
            "lines": self.lines_weight * float(lines),
            "step": self.step_penalty,
        }
        terminated = self.game.is_game_over()
        truncated = self._steps >= self.max_episode_steps and not terminated
        if terminated:
            reward_components["terminal"] = self.terminal_penalty

        reward = float(sum(reward_components.values()))
        info = self._get_info()
        info["reward_components"] = reward_components
        return self._get_obs(), reward, terminated, truncated, info

    def close(self) -> None:
        pass
