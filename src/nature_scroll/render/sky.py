"""Screen-fixed layers: sky gradient with horizon glow, and stars."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from nature_scroll.core.color import to_color
from nature_scroll.core.sky import star_visibility, twinkle
from nature_scroll.core.timeofday import horizon_glow

from .assets import SurfaceCache
from .draw import fill_circle

if TYPE_CHECKING:  # pragma: no cover
    from nature_scroll.core.config import RenderCfg
    from nature_scroll.core.model import SceneState

# Gradients are rebuilt at most once per 1/512 of the day.
_TOD_STEPS = 512
_SKY_CACHE = SurfaceCache(max_size=96)


def sky_column(tod: float, height: int, cfg: RenderCfg) -> np.ndarray:
    """``(height, 3)`` array of row colors from the top to the bottom stop."""

    top = np.asarray(cfg.sky_top.at(tod), dtype=float)
    bottom = np.asarray(cfg.sky_bottom.at(tod), dtype=float)
    t = (np.arange(height, dtype=float) / max(1, height))[:, None]
    rows = top * (1.0 - t) + bottom * t
    return np.clip(np.rint(rows), 0, 255).astype(np.uint8)


def glow_column(intensity: float, height: int, cfg: RenderCfg) -> np.ndarray:
    """``(height, 4)`` RGBA rows for the warm horizon band."""

    t = np.arange(height, dtype=float) / max(1, height)
    falloff = np.exp(-(((t - cfg.horizon_glow_center) / cfg.horizon_glow_spread) ** 2))
    alpha = np.clip(falloff * cfg.horizon_glow_max_alpha * intensity, 0, 255)
    rgba = np.empty((height, 4), dtype=np.uint8)
    rgba[:, :3] = cfg.horizon_glow_color
    rgba[:, 3] = np.rint(alpha).astype(np.uint8)
    return rgba


def _build_sky_surface(tod: float, size: tuple[int, int], cfg: RenderCfg) -> pygame.Surface:
    width, height = size
    column = pygame.surfarray.make_surface(sky_column(tod, height, cfg)[np.newaxis, :, :])
    sky = pygame.transform.scale(column, (width, height))
    intensity = horizon_glow(tod, cfg.horizon_glow_window)
    if intensity > 0.0:
        glow = glow_column(intensity, height, cfg)
        strip = pygame.image.frombuffer(glow.tobytes(), (1, height), "RGBA")
        sky.blit(pygame.transform.scale(strip, (width, height)), (0, 0))
    return sky


def draw_sky(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    size = surface.get_size()
    step = round(scene.tod * _TOD_STEPS)
    key = (step, size, cfg)
    sky = _SKY_CACHE.get(key, lambda: _build_sky_surface(step / _TOD_STEPS, size, cfg))
    surface.blit(sky, (0, 0))


def draw_stars(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    visibility = star_visibility(scene.tod, cfg.star_window)
    if visibility <= 0.0:
        return
    for star in scene.stars:
        amount = twinkle(star, scene.frame)
        alpha = star.brightness * visibility * amount
        if alpha < 1.0:
            continue
        radius = max(1.0, star.size * amount)
        fill_circle(surface, to_color(cfg.star_color, alpha), (star.x, star.y), radius)


__all__ = ["draw_sky", "draw_stars", "glow_column", "sky_column"]
