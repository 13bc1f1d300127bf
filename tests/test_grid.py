from __future__ import annotations

import numpy as np
import pytest

from falling_block_rl.game import Grid


def test_at_returns_value_inside_bounds() -> None:
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert grid.at(0, 0) == 1
    assert grid.at(2, 1) == 6
    assert grid.height == 2
    assert grid.width == 3


def test_at_returns_none_outside_bounds() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.at(2, 0) is None
    assert grid.at(0, 2) is None
    assert grid.at(-1, 0) is None
    assert grid.at(0, -1) is None


def test_empty_grid_has_zero_width() -> None:
    grid = Grid.from_rows([])
    assert grid.width == 0
    assert grid.height == 0
    assert grid.at(0, 0) is None


def test_replace_returns_new_grid() -> None:
    grid = Grid.from_rows([[0, 0], [0, 0]])
    replaced = grid.replace(1, 0, 7)
    assert replaced.at(1, 0) == 7
    assert grid.at(1, 0) == 0
    assert replaced.to_list() == [[0, 7], [0, 0]]


def test_replace_out_of_bounds_leaves_contents_unchanged() -> None:
    grid = Grid.from_rows([[1, 0], [0, 1]])
    assert grid.replace(5, 5, 9) == grid
    assert grid.replace(-1, 0, 9) == grid


def test_rotated_clockwise() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.rotated_clockwise().to_list() == [[3, 1], [4, 2]]


def test_four_rotations_restore_grid() -> None:
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    rotated = grid
    for _ in range(4):
        rotated = rotated.rotated_clockwise()
    assert rotated == grid


def test_rotation_of_non_square_grid_is_rejected() -> None:
    with pytest.raises(ValueError, match="square"):
        Grid.from_rows([[1, 2, 3]]).rotated_clockwise()


def test_rows_must_have_equal_length() -> None:
    with pytest.raises(ValueError, match="equal length"):
        Grid.from_rows([[1, 2], [3]])


def test_row_access() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid.row(1) == (3, 4)
    assert grid.row(2) is None
    assert list(grid.rows()) == [(1, 2), (3, 4)]


def test_backing_array_is_read_only() -> None:
    source = np.zeros((2, 2), dtype=np.int8)
    grid = Grid(source)
    source[0, 0] = 1
    assert grid.at(0, 0) == 0
    with pytest.raises(ValueError):
        grid.to_array()[0, 0] = 1


def test_equality_compares_contents() -> None:
    assert Grid.from_rows([[1, 0]]) == Grid.from_rows([[1, 0]])
    assert Grid.from_rows([[1, 0]]) != Grid.from_rows([[0, 1]])
    assert Grid.from_rows([[1, 0]]) != Grid.from_rows([[1], [0]])
