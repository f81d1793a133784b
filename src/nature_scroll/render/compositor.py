"""Back-to-front parallax compositing driven by an ordered layer table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

import pygame

from nature_scroll.core.config import RENDER_CFG, RenderCfg

from .landscape import (
    draw_clouds,
    draw_far_hills,
    draw_flowers,
    draw_mid_hills,
    draw_near_ground,
    draw_trees,
)
from .particles import draw_particles
from .sky import draw_sky, draw_stars
from .symbols import draw_symbols

if TYPE_CHECKING:  # pragma: no cover
    from nature_scroll.core.model import SceneState

LayerDraw = Callable[[pygame.Surface, "SceneState", float, RenderCfg], None]


@dataclass(frozen=True)
class LayerSpec:
    """One compositor layer; ``parallax == 0`` pins it to the viewport."""

    name: str
    parallax: float
    draw: LayerDraw


def default_layers(
    cfg: RenderCfg = RENDER_CFG,
    terrain_parallax: dict[str, float] | None = None,
) -> tuple[LayerSpec, ...]:
    hills = {"far": 0.35, "mid": 0.62}
    if terrain_parallax:
        hills.update(terrain_parallax)
    return (
        LayerSpec("sky", 0.0, draw_sky),
        LayerSpec("stars", 0.0, draw_stars),
        LayerSpec("clouds", cfg.cloud_parallax, draw_clouds),
        LayerSpec("far_hills", hills["far"], draw_far_hills),
        LayerSpec("mid_hills", hills["mid"], draw_mid_hills),
        LayerSpec("near_ground", 1.0, draw_near_ground),
        LayerSpec("trees", 1.0, draw_trees),
        LayerSpec("flowers", 1.0, draw_flowers),
        LayerSpec("particles", 1.0, draw_particles),
        LayerSpec("symbols", 1.0, draw_symbols),
    )


DEFAULT_LAYERS: tuple[LayerSpec, ...] = default_layers()


class Compositor:
    """Draws layers in table order, each shifted by ``-camera * parallax``."""

    def __init__(self, layers: Sequence[LayerSpec] = DEFAULT_LAYERS) -> None:
        if not layers:
            raise ValueError("Compositor needs at least one layer")
        names = [layer.name for layer in layers]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate layer names in {names}")
        self._layers = tuple(layers)

    @classmethod
    def for_scene(cls, scene: SceneState, cfg: RenderCfg = RENDER_CFG) -> "Compositor":
        parallax = {layer.name: layer.parallax for layer in scene.cfg.terrain_layers}
        return cls(default_layers(cfg, parallax))

    @property
    def layers(self) -> tuple[LayerSpec, ...]:
        return self._layers

    @property
    def names(self) -> list[str]:
        return [layer.name for layer in self._layers]

    @staticmethod
    def offset(position: float, parallax: float) -> float:
        if parallax == 0.0:
            return 0.0
        return -position * parallax

    def offsets(self, position: float) -> dict[str, float]:
        return {layer.name: self.offset(position, layer.parallax) for layer in self._layers}

    def render(self, surface: pygame.Surface, scene: SceneState, cfg: RenderCfg = RENDER_CFG) -> None:
        position = scene.camera.position
        for layer in self._layers:
            layer.draw(surface, scene, self.offset(position, layer.parallax), cfg)


def render_scene(
    surface: pygame.Surface,
    scene: SceneState,
    *,
    compositor: Compositor | None = None,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    """Draw one frame of ``scene``; ``tick`` must already have run."""

    (compositor or Compositor.for_scene(scene, render_cfg)).render(surface, scene, render_cfg)


__all__ = ["Compositor", "DEFAULT_LAYERS", "LayerSpec", "default_layers", "render_scene"]
