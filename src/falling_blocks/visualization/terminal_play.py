from __future__ import annotations

import curses
from typing import Any, Optional

from falling_blocks.game import FallingBlocksGame, GameConfig, run_game
from .terminal import CursesInput, CursesRenderer


def _play(stdscr: Any, game: FallingBlocksGame, fps: int) -> int:
    renderer = CursesRenderer(stdscr)
    input_source = CursesInput(stdscr)
    return run_game(game, input_source, renderer, frame_delay=1.0 / max(1, fps))


def run(config: Optional[GameConfig] = None, fps: int = 20) -> int:
    """Play in the current terminal and return the final score."""
    game = FallingBlocksGame(config)
    return curses.wrapper(_play, game, fps)


if __name__ == "__main__":  # pragma: no cover
    print(f"Game Over! Score: {run()}")
