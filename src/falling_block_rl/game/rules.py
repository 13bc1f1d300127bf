from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameRules:
    gravity_period: float = 0.2  # seconds between gravity steps
    points_per_line: int = 100

    def __post_init__(self) -> None:
        if self.gravity_period < 0:
            raise ValueError(f"gravity_period must be >= 0, got {self.gravity_period}")

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line
