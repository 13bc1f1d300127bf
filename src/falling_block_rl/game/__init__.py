"""Game module for Falling Block RL.

Exports the rules engine and its value types:
- Grid: Immutable 2D cell container
- PieceKind / Piece: Tetromino catalog and rotatable shape
- ActivePiece: Piece with board position and rotation step
- Board: Locked cells, row completion and removal
- has_valid_position / can_move_down: Collision rules
- GameRules: Gravity period and scoring
- FallingBlockGame: Spawn, gravity, lock, clear and game-over state machine
"""

from .active_piece import ActivePiece
from .board import Board
from .core import Action, FallingBlockGame, GameConfig, GameState
from .geometry import Block, Color, Direction, Point, Rect, Size, UPoint
from .grid import Grid
from .pieces import Piece, PieceKind
from .randomness import NumpyRandomSource, RandomSource
from .rules import GameRules
from .validator import can_move_down, has_valid_position

__all__ = [
    "Action",
    "ActivePiece",
    "Block",
    "Board",
    "Color",
    "Direction",
    "FallingBlockGame",
    "GameConfig",
    "GameRules",
    "GameState",
    "Grid",
    "NumpyRandomSource",
    "Piece",
    "PieceKind",
    "Point",
    "RandomSource",
    "Rect",
    "Size",
    "UPoint",
    "can_move_down",
    "has_valid_position",
]
