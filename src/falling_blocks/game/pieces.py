from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, NamedTuple, Optional

from .geometry import Cells, Offset, rotate90, translate


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


BASE_SHAPES: Dict[TetrominoType, Cells] = {
    TetrominoType.I: (Offset(0, 0), Offset(1, 0), Offset(2, 0), Offset(3, 0)),
    TetrominoType.O: (Offset(0, 0), Offset(1, 0), Offset(0, 1), Offset(1, 1)),
    TetrominoType.T: (Offset(0, 0), Offset(1, 0), Offset(2, 0), Offset(1, 1)),
    TetrominoType.S: (Offset(1, 0), Offset(2, 0), Offset(0, 1), Offset(1, 1)),
    TetrominoType.Z: (Offset(0, 0), Offset(1, 0), Offset(1, 1), Offset(2, 1)),
    TetrominoType.J: (Offset(0, 0), Offset(0, 1), Offset(1, 1), Offset(2, 1)),
    TetrominoType.L: (Offset(2, 0), Offset(0, 1), Offset(1, 1), Offset(2, 1)),
}


def _validate_shapes(shapes: Dict[TetrominoType, Cells]) -> None:
    missing = set(TetrominoType) - set(shapes)
    if missing:
        raise ValueError(f"Missing base shapes for {sorted(k.name for k in missing)}")
    for kind, cells in shapes.items():
        if len(cells) != 4 or len(set(cells)) != 4:
            raise ValueError(f"Shape {kind.name} must have exactly 4 distinct cells")


_validate_shapes(BASE_SHAPES)


def shape_width(kind: TetrominoType) -> int:
    xs = [x for x, _ in BASE_SHAPES[kind]]
    return max(xs) - min(xs) + 1


class Candidate(NamedTuple):
    """A proposed placement. Only committed once the board accepts `cells`."""

    cells: Cells
    origin: Offset
    rotation: int


@dataclass
class Piece:
    """A falling tetromino.

    `cells` are absolute board coordinates. `origin` is the board position of
    the shape's local (0, 0); rotation turns the local offsets about it, so
    there is no wall kick and no true-center pivot.
    """

    kind: TetrominoType
    cells: Cells
    origin: Offset
    rotation: int = 0  # 0..3

    @classmethod
    def spawn(cls, kind: TetrominoType, board_width: int, spawn_y: int = 0,
              spawn_x: Optional[int] = None) -> "Piece":
        x = (board_width - shape_width(kind)) // 2 if spawn_x is None else spawn_x
        origin = Offset(x, spawn_y)
        return cls(kind=kind, cells=translate(BASE_SHAPES[kind], x, spawn_y), origin=origin)

    def local_offsets(self) -> Cells:
        return translate(self.cells, -self.origin.x, -self.origin.y)

    def rotated_candidate(self) -> Candidate:
        local = tuple(rotate90(c) for c in self.local_offsets())
        cells = translate(local, self.origin.x, self.origin.y)
        return Candidate(cells, self.origin, (self.rotation + 1) % 4)

    def moved_candidate(self, dx: int, dy: int) -> Candidate:
        origin = Offset(self.origin.x + dx, self.origin.y + dy)
        return Candidate(translate(self.cells, dx, dy), origin, self.rotation)

    def commit(self, candidate: Candidate) -> None:
        self.cells = candidate.cells
        self.origin = candidate.origin
        self.rotation = candidate.rotation
