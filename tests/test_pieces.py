import pytest

from falling_blocks.game import BASE_SHAPES, Offset, Piece, TetrominoType, rotate90


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_spawn_has_four_cells_and_rotation_zero(kind):
    piece = Piece.spawn(kind, board_width=10)
    assert len(piece.cells) == 4
    assert len(set(piece.cells)) == 4
    assert piece.rotation == 0
    assert all(0 <= x < 10 and y >= 0 for x, y in piece.cells)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_rotate90_four_times_restores_spawn_cells(kind):
    cells = Piece.spawn(kind, board_width=10).cells
    rotated = cells
    for _ in range(4):
        rotated = tuple(rotate90(c) for c in rotated)
    assert rotated == cells


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_committed_rotations_restore_piece(kind):
    piece = Piece.spawn(kind, board_width=10)
    original = piece.cells
    for _ in range(4):
        piece.commit(piece.rotated_candidate())
    assert piece.cells == original
    assert piece.rotation == 0


def test_base_shape_table_is_total():
    assert set(BASE_SHAPES) == set(TetrominoType)
    assert all(len(cells) == 4 for cells in BASE_SHAPES.values())


def test_spawn_is_horizontally_centered():
    o = Piece.spawn(TetrominoType.O, board_width=10)
    assert o.cells == (Offset(4, 0), Offset(5, 0), Offset(4, 1), Offset(5, 1))
    i = Piece.spawn(TetrominoType.I, board_width=10)
    assert i.cells == tuple(Offset(x, 0) for x in range(3, 7))


def test_rotated_candidate_turns_about_local_origin():
    piece = Piece.spawn(TetrominoType.T, board_width=10)
    assert piece.origin == Offset(3, 0)
    candidate = piece.rotated_candidate()
    assert candidate.cells == (Offset(3, 0), Offset(3, 1), Offset(3, 2), Offset(2, 1))
    assert candidate.rotation == 1
    # Candidates never touch the piece
    assert piece.rotation == 0
    assert piece.cells == (Offset(3, 0), Offset(4, 0), Offset(5, 0), Offset(4, 1))


def test_moved_candidate_and_commit():
    piece = Piece.spawn(TetrominoType.O, board_width=10)
    candidate = piece.moved_candidate(-1, 2)
    assert piece.origin == Offset(4, 0)
    piece.commit(candidate)
    assert piece.origin == Offset(3, 2)
    assert piece.cells == (Offset(3, 2), Offset(4, 2), Offset(3, 3), Offset(4, 3))
