from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def translated(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class UPoint:
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"UPoint coordinates must be >= 0, got ({self.x}, {self.y})")


@dataclass(frozen=True)
class Size:
    height: int
    width: int


@dataclass(frozen=True)
class Rect:
    origin: Point
    size: Size


@dataclass(frozen=True)
class Color:
    """RGBA colour with float channels in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgb8(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
            int(round(self.alpha * 255)),
        )


@dataclass(frozen=True)
class Block:
    """A drawable coloured cell in board coordinates."""

    rect: Rect
    color: Color

    @classmethod
    def unit(cls, x: int, y: int, color: Color) -> "Block":
        return cls(rect=Rect(origin=Point(x, y), size=Size(height=1, width=1)), color=color)

    @property
    def position(self) -> Point:
        return self.rect.origin

    @property
    def size(self) -> Size:
        return self.rect.size


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))
