from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

from .active_piece import ActivePiece
from .board import Board
from .geometry import Block, Point, Size
from .pieces import PieceKind
from .randomness import NumpyRandomSource, RandomSource
from .rules import GameRules
from .validator import can_move_down, has_valid_position

logger = logging.getLogger(__name__)

# Index drawn from the random source -> kind. Anything past the end falls back to Z.
SPAWN_ORDER: Tuple[PieceKind, ...] = (
    PieceKind.I,
    PieceKind.J,
    PieceKind.L,
    PieceKind.O,
    PieceKind.S,
    PieceKind.T,
    PieceKind.Z,
)


class Action(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    ROTATE = 3


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None

    @property
    def size(self) -> Size:
        return Size(height=self.height, width=self.width)


class FallingBlockGame:
    """Falling-block rules engine.

    The caller drives time with ``tick(elapsed)`` and forwards player input to
    ``apply(action)``. Rejected moves and rotations are silent no-ops; GAME_OVER is
    terminal and turns every further ``tick``/``apply`` into a no-op.
    """

    def __init__(self, size: Size, random_source: RandomSource, rules: Optional[GameRules] = None) -> None:
        if size.height <= 0 or size.width <= 0:
            raise ValueError(f"field size must be positive, got height={size.height} width={size.width}")
        self.size = size
        self.random_source = random_source
        self.rules = rules or GameRules()
        self.board = Board.empty(size)
        self.score = 0
        self.lines_cleared_total = 0
        self.waiting_time = 0.0
        self.state = GameState.PLAYING
        self.active: ActivePiece = self._random_piece()
        self.next_piece: ActivePiece = self._random_piece()

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None, rules: Optional[GameRules] = None) -> "FallingBlockGame":
        config = config or GameConfig()
        return cls(config.size, NumpyRandomSource.from_seed(config.random_seed), rules)

    @staticmethod
    def spawn_point(width: int) -> Point:
        return Point(width // 2 - 2, 0)

    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def _random_piece(self) -> ActivePiece:
        index = self.random_source.random_between(0, len(SPAWN_ORDER) - 1)
        kind = SPAWN_ORDER[index] if 0 <= index < len(SPAWN_ORDER) else PieceKind.Z
        return ActivePiece.spawn(kind, self.spawn_point(self.size.width))

    # ---- input ---------------------------------------------------------------

    def apply(self, action: Action) -> None:
        if self.is_game_over():
            return
        if action == Action.MOVE_LEFT:
            self._update_active_with(self.active.moved_left())
        elif action == Action.MOVE_RIGHT:
            self._update_active_with(self.active.moved_right())
        elif action == Action.MOVE_DOWN:
            self._update_active_with(self.active.moved_down())
        elif action == Action.ROTATE:
            rotated = self._wall_kicked_rotation()
            if rotated is not None:
                self.active = rotated

    def _update_active_with(self, candidate: ActivePiece) -> None:
        if has_valid_position(candidate, self.board):
            self.active = candidate

    def _wall_kicked_rotation(self) -> Optional[ActivePiece]:
        for candidate in self.active.wall_kicked_rotation_tests():
            if has_valid_position(candidate, self.board):
                return candidate
        return None

    # ---- simulation ----------------------------------------------------------

    def tick(self, elapsed: float) -> None:
        if self.is_game_over():
            return
        self.waiting_time += elapsed
        if self.waiting_time > self.rules.gravity_period:
            self.step()
            self.waiting_time = 0.0

    def step(self) -> int:
        """Run one gravity step and return the number of lines it cleared."""
        if self.is_game_over():
            return 0
        if can_move_down(self.active, self.board):
            self.active = self.active.moved_down()
            return 0
        return self._lock_active_piece()

    def _lock_active_piece(self) -> int:
        kind = self.active.kind
        for p in self.active.cells():
            self.board = self.board.replace(p.x, p.y, kind)

        rows = self.board.completed_rows()
        self.board = self.board.remove_rows(rows)
        lines = len(rows)
        self.score += self.rules.score_for_lines(lines)
        self.lines_cleared_total += lines
        logger.debug("locked %s at %s, cleared rows %s", kind.name, self.active.position, rows)

        self.active = self.next_piece
        self.next_piece = self._random_piece()

        if self.active.position.y == 0 and not has_valid_position(self.active, self.board):
            self.state = GameState.GAME_OVER
            logger.debug("game over: %s cannot spawn, final score %d", self.active.kind.name, self.score)
        return lines

    # ---- output --------------------------------------------------------------

    def draw(self) -> List[Block]:
        return self.draw_board() + self.draw_active_piece()

    def draw_board(self) -> List[Block]:
        blocks: List[Block] = []
        for y in range(self.board.height):
            for x in range(self.board.width):
                kind = self.board.kind_at(x, y)
                if kind is not None:
                    blocks.append(Block.unit(x, y, kind.color))
        return blocks

    def draw_active_piece(self) -> List[Block]:
        color = self.active.color
        return [Block.unit(p.x, p.y, color) for p in self.active.cells()]

    def get_state(self) -> np.ndarray:
        # Locked board ids with the active piece overlaid as negative ids
        state = self.board.to_array().copy()
        if not self.is_game_over():
            for p in self.active.cells():
                if 0 <= p.y < self.board.height and 0 <= p.x < self.board.width:
                    state[p.y, p.x] = -int(self.active.kind)
        return state
