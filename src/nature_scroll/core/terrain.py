"""Static elevation profiles built from overlapping sine waves."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import SCENE_CFG, SceneCfg, TerrainLayerCfg


@dataclass(frozen=True)
class TerrainProfile:
    """Immutable ``(world_x, elevation_y)`` samples for one layer."""

    name: str
    xs: np.ndarray
    ys: np.ndarray
    parallax: float

    def __post_init__(self) -> None:
        self.xs.setflags(write=False)
        self.ys.setflags(write=False)

    def __len__(self) -> int:
        return int(self.xs.shape[0])

    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.xs.tolist(), self.ys.tolist()))

    def visible_points(
        self, offset_x: float, view_width: float, pad: float = 0.0
    ) -> np.ndarray:
        """Screen-space samples inside the view, plus one sample either side."""

        sx = self.xs + offset_x
        mask = (sx >= -pad) & (sx <= view_width + pad)
        idx = np.flatnonzero(mask)
        if idx.size == 0:
            return np.empty((0, 2), dtype=float)
        lo = max(0, int(idx[0]) - 1)
        hi = min(len(self) - 1, int(idx[-1]) + 1)
        return np.column_stack((sx[lo : hi + 1], self.ys[lo : hi + 1]))


def elevation(layer: TerrainLayerCfg, x, world_width: float):
    """Evaluate a layer's formula at scalar or array ``x``."""

    x = np.asarray(x, dtype=float)
    y = np.full_like(x, layer.base)
    for cycles, phase, amplitude in layer.waves:
        y = y + np.sin(x * layer.frequency(cycles, world_width) + phase) * amplitude
    return y


def build_profile(layer: TerrainLayerCfg, world_width: float, step: float) -> TerrainProfile:
    count = int(np.floor(world_width / step + 1e-9)) + 1
    xs = np.arange(count, dtype=float) * step
    if xs[-1] < world_width:
        xs = np.append(xs, world_width)
    ys = elevation(layer, xs, world_width)
    return TerrainProfile(name=layer.name, xs=xs, ys=ys, parallax=layer.parallax)


@dataclass(frozen=True)
class Terrain:
    far: TerrainProfile
    mid: TerrainProfile
    near: TerrainProfile
    near_layer: TerrainLayerCfg
    world_width: float

    def ground_y(self, world_x: float) -> float:
        """Near-ground surface height at any world x."""

        return float(elevation(self.near_layer, world_x, self.world_width))


def build_terrain(cfg: SceneCfg = SCENE_CFG) -> Terrain:
    layers = {layer.name: layer for layer in cfg.terrain_layers}
    try:
        far, mid, near = layers["far"], layers["mid"], layers["near"]
    except KeyError as exc:
        raise ValueError(f"Missing terrain layer {exc.args[0]!r}") from exc
    return Terrain(
        far=build_profile(far, cfg.world_width, cfg.terrain_step),
        mid=build_profile(mid, cfg.world_width, cfg.terrain_step),
        near=build_profile(near, cfg.world_width, cfg.terrain_step),
        near_layer=near,
        world_width=cfg.world_width,
    )


__all__ = ["Terrain", "TerrainProfile", "build_profile", "build_terrain", "elevation"]
