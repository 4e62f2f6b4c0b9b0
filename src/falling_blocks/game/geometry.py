from __future__ import annotations

from typing import Iterable, NamedTuple, Tuple


class Offset(NamedTuple):
    """Integer (column, row) pair. Row 0 is the top of the board."""

    x: int
    y: int


Cells = Tuple[Offset, ...]


def rotate90(offset: Offset) -> Offset:
    # (x, y) -> (-y, x); four applications give the identity
    return Offset(-offset.y, offset.x)


def translate(cells: Iterable[Offset], dx: int, dy: int) -> Cells:
    return tuple(Offset(x + dx, y + dy) for x, y in cells)
