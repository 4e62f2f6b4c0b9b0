from __future__ import annotations

from typing import Iterable

import numpy as np

from .geometry import Offset


class GameGrid:
    """Fixed-size occupancy grid for settled blocks.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values correspond to tetromino indices for optional coloring.
    Rows above the top (y < 0) are not stored and always count as empty.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_legal(self, cells: Iterable[Offset]) -> bool:
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return False
            if y >= 0 and self.grid[y, x] != 0:
                return False
        return True

    def merge(self, cells: Iterable[Offset], value: int = 1) -> None:
        """Mark every on-board cell as filled. Cells above the top are dropped."""
        for x, y in cells:
            if self.is_inside(x, y):
                self.grid[y, x] = value

    def clear_full_lines(self) -> int:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        self.grid = np.vstack((new_rows, kept))
        return num

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
