from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np

from .geometry import Color, Point
from .grid import Grid


class PieceKind(IntEnum):
    """The seven tetromino kinds, in draw order. 0 is reserved for empty board cells."""

    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7

    @property
    def color(self) -> Color:
        return PIECE_COLORS[self]

    def initial_grid(self) -> Grid:
        return Grid.from_rows(BASE_SHAPES[self], dtype=np.int8)

    def wall_kicks(self) -> List[List[Point]]:
        # Based on the Super Rotation System tables.
        if self is PieceKind.O:
            return [[]]
        table = I_WALL_KICKS if self is PieceKind.I else DEFAULT_WALL_KICKS
        return [[Point(dx, dy) for dx, dy in step] for step in table]


BASE_SHAPES: Dict[PieceKind, Tuple[Tuple[int, ...], ...]] = {
    PieceKind.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    PieceKind.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.O: (
        (1, 1),
        (1, 1),
    ),
    PieceKind.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    PieceKind.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    PieceKind.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
}

PIECE_COLORS: Dict[PieceKind, Color] = {
    PieceKind.I: Color.from_rgb8(108, 237, 238),
    PieceKind.J: Color.from_rgb8(0, 33, 230),
    PieceKind.L: Color.from_rgb8(229, 162, 67),
    PieceKind.O: Color.from_rgb8(241, 238, 79),
    PieceKind.S: Color.from_rgb8(221, 47, 23),
    PieceKind.T: Color.from_rgb8(146, 45, 231),
    PieceKind.Z: Color.from_rgb8(110, 235, 71),
}

# One row of five (dx, dy) candidates per rotation step.
DEFAULT_WALL_KICKS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
    ((0, 0), (1, 0), (-1, 1), (0, 2), (1, 2)),
    ((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
    ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
)

I_WALL_KICKS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)),
    ((0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)),
    ((0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)),
    ((0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)),
)


@dataclass(frozen=True, eq=False)
class Piece:
    kind: PieceKind
    grid: Grid

    @classmethod
    def from_kind(cls, kind: PieceKind) -> "Piece":
        return cls(kind=kind, grid=kind.initial_grid())

    @property
    def color(self) -> Color:
        return self.kind.color

    def wall_kicks(self) -> List[List[Point]]:
        return self.kind.wall_kicks()

    def rotated(self) -> "Piece":
        return Piece(kind=self.kind, grid=self.grid.rotated_clockwise())

    def cells(self) -> List[Point]:
        """Occupied cells in local coordinates, row-major (y outer, x inner)."""
        ys, xs = np.nonzero(self.grid.to_array())
        return [Point(int(x), int(y)) for y, x in zip(ys, xs)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.kind == other.kind and self.grid == other.grid

    __hash__ = None  # type: ignore[assignment]
