from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from .geometry import Point, Size
from .grid import Grid
from .pieces import PieceKind

EMPTY_CELL: int = 0


def _to_kind(value: int) -> Optional[PieceKind]:
    if value == EMPTY_CELL:
        return None
    return PieceKind(value)


class Board:
    """Playing field of locked cells.

    The backing grid stores 0 for empty cells and the ``PieceKind`` value of the
    piece that settled there otherwise. Boards are values: ``replace`` and
    ``remove_rows`` return new boards.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @classmethod
    def empty(cls, size: Size) -> "Board":
        return cls(Grid.filled(size.height, size.width, EMPTY_CELL, dtype=np.int8))

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def size(self) -> Size:
        return Size(height=self.height, width=self.width)

    def kind_at(self, x: int, y: int) -> Optional[PieceKind]:
        value = self._grid.at(x, y)
        if value is None:
            return None
        return _to_kind(int(value))

    def replace(self, x: int, y: int, kind: Optional[PieceKind]) -> "Board":
        value = EMPTY_CELL if kind is None else int(kind)
        return Board(self._grid.replace(x, y, value))

    def row(self, y: int) -> Optional[List[Optional[PieceKind]]]:
        values = self._grid.row(y)
        if values is None:
            return None
        return [_to_kind(int(v)) for v in values]

    def contains(self, point: Point) -> bool:
        if point.x < 0 or point.y < 0:
            return False
        return self.kind_at(point.x, point.y) is not None

    def is_row_complete(self, y: int) -> bool:
        values = self._grid.row(y)
        if values is None:
            return False
        return all(v != EMPTY_CELL for v in values)

    def completed_rows(self) -> List[int]:
        full = np.all(self._grid.to_array() != EMPTY_CELL, axis=1)
        return [int(y) for y in np.flatnonzero(full)]

    def remove_rows(self, rows: Iterable[int]) -> "Board":
        doomed = sorted({int(y) for y in rows if 0 <= int(y) < self.height})
        if not doomed:
            return Board(self._grid)
        kept = np.delete(self._grid.to_array(), doomed, axis=0)
        new_rows = np.full((len(doomed), self.width), EMPTY_CELL, dtype=self._grid.dtype)
        return Board(Grid(np.vstack((new_rows, kept))))

    def to_array(self) -> np.ndarray:
        return self._grid.to_array()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width})"
