"""Smooth pseudo-random noise used for organic size variation."""
from __future__ import annotations

from typing import Protocol

from opensimplex import OpenSimplex


class SmoothNoise(Protocol):
    """Continuous function of one variable with values in ``[0, 1]``."""

    def __call__(self, x: float) -> float: ...


class SimplexNoise:
    """One-dimensional slice of OpenSimplex noise remapped to ``[0, 1]``."""

    def __init__(self, seed: int = 0, *, row: float = 0.0) -> None:
        self._gen = OpenSimplex(seed=seed)
        self._row = row

    def __call__(self, x: float) -> float:
        value = self._gen.noise2(x, self._row)
        return max(0.0, min(1.0, (value + 1.0) * 0.5))


__all__ = ["SimplexNoise", "SmoothNoise"]
