from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np


class Grid:
    """Immutable rectangular 2D container.

    Cells are addressed as (x, y) with y=0 on top. Every operation that changes a
    cell returns a new Grid; the backing array is never written after construction.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        arr = np.array(cells, copy=True)
        if arr.size == 0:
            arr = arr.reshape((0, 0))
        if arr.ndim != 2:
            raise ValueError(f"Grid requires a 2D array, got ndim={arr.ndim}")
        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], dtype: Any = np.int8) -> "Grid":
        if len(rows) == 0:
            return cls(np.zeros((0, 0), dtype=dtype))
        widths = {len(r) for r in rows}
        if len(widths) != 1:
            raise ValueError(f"Grid rows must have equal length, got widths {sorted(widths)}")
        return cls(np.asarray(rows, dtype=dtype))

    @classmethod
    def filled(cls, height: int, width: int, value: Any = 0, dtype: Any = np.int8) -> "Grid":
        return cls(np.full((int(height), int(width)), value, dtype=dtype))

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def width(self) -> int:
        if self.height == 0:
            return 0
        return int(self._cells.shape[1])

    @property
    def dtype(self) -> np.dtype:
        return self._cells.dtype

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Optional[Any]:
        if not self.is_inside(x, y):
            return None
        return self._cells[y, x].item()

    def replace(self, x: int, y: int, value: Any) -> "Grid":
        # Out-of-bounds replacement leaves the contents untouched.
        cells = self._cells.copy()
        if self.is_inside(x, y):
            cells[y, x] = value
        return Grid(cells)

    def row(self, y: int) -> Optional[Tuple[Any, ...]]:
        if not 0 <= y < self.height:
            return None
        return tuple(v.item() for v in self._cells[y])

    def rows(self) -> Iterable[Tuple[Any, ...]]:
        for y in range(self.height):
            yield tuple(v.item() for v in self._cells[y])

    def rotated_clockwise(self) -> "Grid":
        h, w = self._cells.shape
        if h != w:
            raise ValueError(f"rotation requires a square grid, got {h}x{w}")
        return Grid(np.rot90(self._cells, 1, axes=(1, 0)))

    def to_array(self) -> np.ndarray:
        """Read-only view of the backing array (row-major, shape (height, width))."""
        return self._cells

    def to_list(self) -> List[List[Any]]:
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.to_list()!r})"
