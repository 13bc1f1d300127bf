from __future__ import annotations

import pytest

from falling_block_rl.game import Color, Grid, Piece, PieceKind, Point


def _rotations(kind: PieceKind) -> list[list[list[int]]]:
    piece = Piece.from_kind(kind)
    out = []
    for _ in range(4):
        piece = piece.rotated()
        out.append(piece.grid.to_list())
    return out


def test_t_rotation() -> None:
    assert _rotations(PieceKind.T) == [
        [[0, 1, 0], [0, 1, 1], [0, 1, 0]],
        [[0, 0, 0], [1, 1, 1], [0, 1, 0]],
        [[0, 1, 0], [1, 1, 0], [0, 1, 0]],
        [[0, 1, 0], [1, 1, 1], [0, 0, 0]],
    ]


def test_i_rotation() -> None:
    assert _rotations(PieceKind.I) == [
        [[0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0]],
        [[0, 0, 0, 0], [0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0]],
        [[0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0], [0, 1, 0, 0]],
        [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
    ]


def test_l_rotation() -> None:
    assert _rotations(PieceKind.L) == [
        [[0, 1, 0], [0, 1, 0], [0, 1, 1]],
        [[0, 0, 0], [1, 1, 1], [1, 0, 0]],
        [[1, 1, 0], [0, 1, 0], [0, 1, 0]],
        [[0, 0, 1], [1, 1, 1], [0, 0, 0]],
    ]


def test_j_rotation() -> None:
    assert _rotations(PieceKind.J) == [
        [[0, 1, 1], [0, 1, 0], [0, 1, 0]],
        [[0, 0, 0], [1, 1, 1], [0, 0, 1]],
        [[0, 1, 0], [0, 1, 0], [1, 1, 0]],
        [[1, 0, 0], [1, 1, 1], [0, 0, 0]],
    ]


def test_s_rotation() -> None:
    assert _rotations(PieceKind.S) == [
        [[0, 1, 0], [0, 1, 1], [0, 0, 1]],
        [[0, 0, 0], [0, 1, 1], [1, 1, 0]],
        [[1, 0, 0], [1, 1, 0], [0, 1, 0]],
        [[0, 1, 1], [1, 1, 0], [0, 0, 0]],
    ]


def test_z_rotation() -> None:
    assert _rotations(PieceKind.Z) == [
        [[0, 0, 1], [0, 1, 1], [0, 1, 0]],
        [[0, 0, 0], [1, 1, 0], [0, 1, 1]],
        [[0, 1, 0], [1, 1, 0], [1, 0, 0]],
        [[1, 1, 0], [0, 1, 1], [0, 0, 0]],
    ]


def test_o_rotation_never_changes_pattern() -> None:
    assert _rotations(PieceKind.O) == [[[1, 1], [1, 1]]] * 4


@pytest.mark.parametrize("kind", list(PieceKind))
def test_four_rotations_restore_pattern(kind: PieceKind) -> None:
    piece = Piece.from_kind(kind)
    assert piece.rotated().rotated().rotated().rotated() == piece


@pytest.mark.parametrize("kind", list(PieceKind))
def test_every_kind_has_four_cells_on_square_grid(kind: PieceKind) -> None:
    grid = kind.initial_grid()
    assert grid.width == grid.height
    assert len(Piece.from_kind(kind).cells()) == 4


def test_grid_sizes_per_kind() -> None:
    assert PieceKind.I.initial_grid().width == 4
    assert PieceKind.O.initial_grid().width == 2
    for kind in (PieceKind.J, PieceKind.L, PieceKind.S, PieceKind.T, PieceKind.Z):
        assert kind.initial_grid().width == 3


def test_t_cells_are_row_major() -> None:
    assert Piece.from_kind(PieceKind.T).cells() == [Point(1, 0), Point(0, 1), Point(1, 1), Point(2, 1)]


def test_o_cells() -> None:
    assert Piece.from_kind(PieceKind.O).cells() == [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]


def test_o_has_a_single_empty_kick_list() -> None:
    assert PieceKind.O.wall_kicks() == [[]]


def test_default_kick_table() -> None:
    kicks = PieceKind.T.wall_kicks()
    assert len(kicks) == 4
    assert all(len(step) == 5 for step in kicks)
    assert kicks[0] == [Point(0, 0), Point(-1, 0), Point(-1, 1), Point(0, -2), Point(-1, -2)]
    assert kicks[1] == [Point(0, 0), Point(1, 0), Point(-1, 1), Point(0, 2), Point(1, 2)]
    for kind in (PieceKind.J, PieceKind.L, PieceKind.S, PieceKind.Z):
        assert kind.wall_kicks() == kicks


def test_i_kick_table() -> None:
    kicks = PieceKind.I.wall_kicks()
    assert len(kicks) == 4
    assert kicks[0] == [Point(0, 0), Point(-2, 0), Point(1, 0), Point(-2, -1), Point(1, 2)]
    assert kicks[3] == [Point(0, 0), Point(1, 0), Point(-2, 0), Point(1, -2), Point(-2, 1)]


def test_colors() -> None:
    assert PieceKind.T.color == Color(146 / 255, 45 / 255, 231 / 255, 1.0)
    assert PieceKind.I.color.to_rgba8() == (108, 237, 238, 255)
    assert Piece.from_kind(PieceKind.S).color == PieceKind.S.color


def test_piece_equality() -> None:
    assert Piece.from_kind(PieceKind.L) == Piece(PieceKind.L, Grid.from_rows([[0, 0, 1], [1, 1, 1], [0, 0, 0]]))
    assert Piece.from_kind(PieceKind.L) != Piece.from_kind(PieceKind.J)
