from __future__ import annotations

from falling_block_puzzle.game import BASE_SHAPES, PIECE_COLORS, Piece, PieceKind


def test_spawn_uses_catalog_shape_and_color():
    piece = Piece.spawn(PieceKind.L, 3, 0)
    assert piece.shape == BASE_SHAPES[PieceKind.L]
    assert piece.color == PIECE_COLORS[PieceKind.L]
    assert piece.position == (3, 0)
    assert (piece.width, piece.height) == (2, 3)


def test_translate_updates_position_only():
    piece = Piece.spawn(PieceKind.T, 2, 1)
    piece.translate(-3, 5)
    assert piece.position == (-1, 6)
    assert piece.shape == BASE_SHAPES[PieceKind.T]


def test_rotated_shape_does_not_modify_piece():
    piece = Piece.spawn(PieceKind.I, 0, 0)
    rotated = piece.rotated_shape()
    assert (rotated.width, rotated.height) == (4, 1)
    assert (piece.width, piece.height) == (1, 4)


def test_cells_are_offset_by_position():
    piece = Piece.spawn(PieceKind.Z, 4, 2)
    assert piece.cells() == [(4, 2), (5, 2), (5, 3), (6, 3)]
