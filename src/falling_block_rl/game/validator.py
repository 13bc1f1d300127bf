from __future__ import annotations

from .active_piece import ActivePiece
from .board import Board


def has_valid_position(active: ActivePiece, board: Board) -> bool:
    """True when the piece stays inside the field and overlaps no locked cell."""
    return not _collides_with_block(active, board) and not _collides_with_edge(active, board)


def can_move_down(active: ActivePiece, board: Board) -> bool:
    return not _is_at_the_bottom(active, board) and not _collides_with_block(active.moved_down(), board)


def _collides_with_block(active: ActivePiece, board: Board) -> bool:
    return any(board.contains(p) for p in active.cells())


def _collides_with_edge(active: ActivePiece, board: Board) -> bool:
    return (
        active.left_edge() < 0
        or active.right_edge() >= board.width
        or active.bottom_edge() >= board.height
    )


def _is_at_the_bottom(active: ActivePiece, board: Board) -> bool:
    return active.bottom_edge() == board.height - 1
