from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import List

from .geometry import Color, Direction, Point
from .pieces import Piece, PieceKind

ROTATION_STEPS = 4


@dataclass(frozen=True)
class ActivePiece:
    """A piece placed on the board: shape, anchor position and rotation step.

    ``rotation_step`` selects the row of the kind's wall-kick table used for the
    next rotation. The O piece has a single orientation and always stays at step 0.
    """

    piece: Piece
    position: Point
    rotation_step: int = 0

    @classmethod
    def spawn(cls, kind: PieceKind, position: Point) -> "ActivePiece":
        return cls(piece=Piece.from_kind(kind), position=position, rotation_step=0)

    @property
    def kind(self) -> PieceKind:
        return self.piece.kind

    @property
    def color(self) -> Color:
        return self.piece.color

    def cells(self) -> List[Point]:
        dx, dy = self.position.x, self.position.y
        return [p.translated(dx, dy) for p in self.piece.cells()]

    def left_edge(self) -> int:
        return min((p.x for p in self.cells()), default=sys.maxsize)

    def right_edge(self) -> int:
        return max((p.x for p in self.cells()), default=-sys.maxsize)

    def bottom_edge(self) -> int:
        return max((p.y for p in self.cells()), default=-sys.maxsize)

    def translated(self, dx: int, dy: int) -> "ActivePiece":
        return replace(self, position=self.position.translated(dx, dy))

    def moved(self, direction: Direction) -> "ActivePiece":
        dx, dy = direction.offset
        return self.translated(dx, dy)

    def moved_left(self) -> "ActivePiece":
        return self.moved(Direction.LEFT)

    def moved_right(self) -> "ActivePiece":
        return self.moved(Direction.RIGHT)

    def moved_down(self) -> "ActivePiece":
        return self.moved(Direction.DOWN)

    def rotated(self) -> "ActivePiece":
        return ActivePiece(
            piece=self.piece.rotated(),
            position=self.position,
            rotation_step=self._next_rotation_step(),
        )

    def wall_kicked_rotation_tests(self) -> List["ActivePiece"]:
        """Rotation candidates in kick-table order: offset first, then rotate."""
        kicks = self.piece.wall_kicks()[self.rotation_step]
        return [self.translated(k.x, k.y).rotated() for k in kicks]

    def _next_rotation_step(self) -> int:
        if self.kind is PieceKind.O:
            return 0
        return (self.rotation_step + 1) % ROTATION_STEPS
