from __future__ import annotations

import time
from typing import Callable, Protocol

from .core import Command, FallingBlocksGame, GameSnapshot


class InputSource(Protocol):
    def poll(self) -> Command:
        """Return the next pending command, or Command.NONE without blocking."""
        ...


class Renderer(Protocol):
    def draw(self, snapshot: GameSnapshot) -> None:
        ...


def run_game(
    game: FallingBlocksGame,
    input_source: InputSource,
    renderer: Renderer,
    frame_delay: float = 0.05,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Drive `game` until it is over and return the final score.

    `frame_delay` only caps the polling rate. Gravity is timed by the game's
    own clock.
    """
    renderer.draw(game.snapshot())
    while not game.game_over:
        snapshot = game.tick(input_source.poll())
        renderer.draw(snapshot)
        if not snapshot.game_over:
            sleep(frame_delay)
    return game.score
