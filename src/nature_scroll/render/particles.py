from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from nature_scroll.core.color import to_color
from nature_scroll.core.particles import particle_look

from .draw import fill_circle, fill_polygon, rotated_ellipse_points

if TYPE_CHECKING:  # pragma: no cover
    from nature_scroll.core.config import RenderCfg
    from nature_scroll.core.model import SceneState


def draw_particles(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    night = scene.night_factor
    # offset_x is -camera * parallax, so -offset_x is where this layer's view starts.
    for p in scene.particles.visible(-offset_x):
        look = particle_look(
            p,
            night,
            firefly_color=cfg.petal_to_firefly,
            glow_threshold=cfg.firefly_glow_threshold,
            glow_alpha=cfg.firefly_glow_alpha,
        )
        center = (p.wx + offset_x, p.y)
        if look.glow_alpha >= 1.0:
            halo = to_color(cfg.firefly_glow_color, look.glow_alpha)
            fill_circle(surface, halo, center, p.size * cfg.firefly_glow_radius)
            fill_circle(surface, halo, center, p.size * cfg.firefly_glow_radius * 0.55)
        shape = rotated_ellipse_points(center, look.width, look.height, p.angle)
        fill_polygon(surface, to_color(look.color, look.alpha), shape)


__all__ = ["draw_particles"]
