from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_blocks.game import GameSnapshot, GameStatus


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    hud_height = 30

    def __init__(self, screen: pygame.Surface, cell_size: int = 30, margin: int = 20) -> None:
        self.screen = screen
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    @staticmethod
    def window_size(width: int, height: int, cell_size: int = 30, margin: int = 20) -> Tuple[int, int]:
        return width * cell_size + margin * 2, height * cell_size + margin * 2 + Renderer.hud_height

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        state = snapshot.overlay()
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, snapshot: GameSnapshot) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        self.screen.fill((10, 10, 14))
        hud = f"Score: {snapshot.score}  Level: {snapshot.level}  Lines: {snapshot.lines}"
        self.screen.blit(self._font.render(hud, True, (230, 230, 230)), (self.margin, 6))
        self.screen.blit(self._grid_surface(snapshot), (self.margin, self.margin + self.hud_height))
        message = {
            GameStatus.READY: "Press a game key to start",
            GameStatus.PAUSED: "Paused",
            GameStatus.OVER: f"Game Over - Score {snapshot.score}",
        }.get(snapshot.status)
        if message:
            text = self._font.render(message, True, (255, 100, 100))
            rect = text.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() // 2))
            self.screen.blit(text, rect)
        pygame.display.flip()
