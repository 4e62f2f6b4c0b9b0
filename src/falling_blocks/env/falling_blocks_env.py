from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Command, FallingBlocksGame, GameConfig, GameSnapshot
from falling_blocks.visualization.terminal import render_frame


# Agents never pause or quit
ACTIONS: Tuple[Command, ...] = (
    Command.NONE,
    Command.MOVE_LEFT,
    Command.MOVE_RIGHT,
    Command.SOFT_DROP,
    Command.ROTATE,
    Command.HARD_DROP,
)


class VirtualClock:
    """Monotonic clock advanced explicitly, one env step at a time."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FallingBlocksEnv(gym.Env):
    metadata = {"render_modes": ["ansi", "rgb_array"], "render_fps": 10}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 seconds_per_step: float = 0.1,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.seconds_per_step = float(seconds_per_step)
        self.max_episode_steps = int(max_episode_steps)
        self.clock = VirtualClock()
        self.game = FallingBlocksGame(self.config, clock=self.clock)
        self.game.start()

        h, w = self.config.height, self.config.width
        # Settled cells are kind values 1..7, the falling piece is -1..-7
        self.observation_space = spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._last: Optional[GameSnapshot] = None
        self._steps = 0

    def _get_info(self, snapshot: GameSnapshot) -> Dict[str, Any]:
        return {
            "score": snapshot.score,
            "level": snapshot.level,
            "lines": snapshot.lines,
            "lines_cleared": snapshot.last_cleared,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng.seed(seed)
        self.clock = VirtualClock()
        self.game.clock = self.clock
        self.game.reset()
        self.game.start()
        self._steps = 0
        snapshot = self.game.snapshot()
        self._last = snapshot
        return snapshot.overlay(), self._get_info(snapshot)

    def step(self, action: int):
        score_before = self.game.score
        self.clock.advance(self.seconds_per_step)
        snapshot = self.game.tick(ACTIONS[int(action)])
        self._steps += 1

        reward = float(snapshot.score - score_before)
        terminated = snapshot.game_over
        truncated = not terminated and self._steps >= self.max_episode_steps
        self._last = snapshot
        return snapshot.overlay(), reward, terminated, truncated, self._get_info(snapshot)

    def render(self):
        snapshot = self._last if self._last is not None else self.game.snapshot()
        if self.render_mode == "ansi":
            return "\n".join(render_frame(snapshot))
        if self.render_mode == "rgb_array":
            state = snapshot.overlay()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    v = int(state[y, x])
                    color = (30, 30, 36) if v == 0 else ((240, 160, 0) if v < 0 else (70, 200, 120))
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
