from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Optional

import pygame

from falling_blocks.game import Command, FallingBlocksGame, GameConfig, run_game
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.PAUSE,
    pygame.K_ESCAPE: Command.QUIT,
}


class PygameInput:
    """Queues key presses so each tick consumes at most one command."""

    def __init__(self) -> None:
        self.pending: Deque[Command] = deque()

    def poll(self) -> Command:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.pending.appendleft(Command.QUIT)
            elif event.type == pygame.KEYDOWN:
                self.pending.append(KEY_TO_COMMAND.get(event.key, Command.NONE))
        if self.pending:
            return self.pending.popleft()
        return Command.NONE


def run(config: Optional[GameConfig] = None, fps: int = 60) -> int:
    pygame.init()
    try:
        game = FallingBlocksGame(config)
        size = Renderer.window_size(game.grid.width, game.grid.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Falling Blocks")
        renderer = Renderer(screen)
        clock = pygame.time.Clock()
        score = run_game(game, PygameInput(), renderer, sleep=lambda _: clock.tick(fps))
        pygame.time.wait(1500)
        return score
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    print(f"Game Over! Score: {run()}")
