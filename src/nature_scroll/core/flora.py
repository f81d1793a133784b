"""Trees and grass snapped to the near ground, sized by smooth noise."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .noise import SmoothNoise
from .terrain import Terrain


@dataclass(frozen=True)
class Tree:
    x: float
    ground_y: float
    height: float
    width: float


@dataclass(frozen=True)
class GrassField:
    """Two slanted blades per clump, stored column-wise."""

    xs: np.ndarray
    ground: np.ndarray
    heights: np.ndarray


def build_trees(xs: Iterable[float], terrain: Terrain, noise: SmoothNoise) -> list[Tree]:
    trees: list[Tree] = []
    for x in xs:
        trees.append(
            Tree(
                x=x,
                ground_y=terrain.ground_y(x),
                height=58.0 + noise(x * 0.01) * 38.0,
                width=46.0 + noise(x * 0.02 + 5.0) * 18.0,
            )
        )
    return trees


def build_grass(terrain: Terrain, noise: SmoothNoise, spacing: float) -> GrassField:
    xs = np.arange(0.0, terrain.world_width, spacing)
    ground = np.array([terrain.ground_y(x) for x in xs])
    heights = np.array([7.0 + noise(x * 0.14) * 10.0 for x in xs])
    return GrassField(xs=xs, ground=ground, heights=heights)


__all__ = ["GrassField", "Tree", "build_grass", "build_trees"]
