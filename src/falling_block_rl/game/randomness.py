from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def random_between(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""
        raise NotImplementedError


class NumpyRandomSource:
    """RandomSource over an injected numpy Generator (e.g. a Gymnasium env's np_random)."""

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    @classmethod
    def from_seed(cls, seed: int | None = None) -> "NumpyRandomSource":
        return cls(np.random.default_rng(seed))

    def random_between(self, low: int, high: int) -> int:
        return int(self._rng.integers(low, high, endpoint=True))
