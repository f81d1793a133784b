"""Scrolling scenery: clouds, hills, ground, trees, grass and flowers.

Every function here is a compositor layer: it receives the horizontal offset
for its parallax depth and draws world-space geometry shifted by it.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
import pygame

from nature_scroll.core.camera import in_view
from nature_scroll.core.color import lerp, lerp_rgb, night_scale, normalize, scale_rgb, to_color
from nature_scroll.core.terrain import TerrainProfile
from nature_scroll.data.scenery import CLOUD_PLACEMENTS, FLOWER_PLACEMENTS

from .draw import fill_circle, fill_ellipse, line, polyline, silhouette

if TYPE_CHECKING:  # pragma: no cover
    from nature_scroll.core.config import RenderCfg
    from nature_scroll.core.model import SceneState


def _fade_out(tod: float, threshold: float) -> float:
    """1 at full day, reaching 0 at ``threshold`` and staying there."""

    return 1.0 - normalize(tod, 0.0, threshold)


def draw_clouds(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    view_width = surface.get_width()
    tod = scene.tod
    body = to_color(
        lerp_rgb(cfg.cloud_day_color, cfg.cloud_night_color, tod),
        lerp(cfg.cloud_alpha[0], cfg.cloud_alpha[1], tod),
    )
    blush_alpha = cfg.cloud_blush_color[3] * _fade_out(tod, cfg.cloud_blush_fade)
    blush = to_color(cfg.cloud_blush_color[:3], blush_alpha)
    for cloud in CLOUD_PLACEMENTS:
        s = cloud.scale
        x = cloud.x + offset_x
        if not in_view(x, view_width, 80.0 * s):
            continue
        y = cloud.y
        fill_ellipse(surface, body, (x, y), 80 * s, 38 * s)
        fill_ellipse(surface, body, (x - 34 * s, y + 10 * s), 56 * s, 30 * s)
        fill_ellipse(surface, body, (x + 38 * s, y + 8 * s), 60 * s, 28 * s)
        if blush[3] > 0:
            fill_ellipse(surface, blush, (x, y - 5), 60 * s, 22 * s)


def _draw_hill(
    surface: pygame.Surface,
    profile: TerrainProfile,
    offset_x: float,
    color: tuple[int, int, int],
    factor: float,
) -> np.ndarray:
    points = profile.visible_points(offset_x, surface.get_width())
    silhouette(surface, to_color(scale_rgb(color, factor)), points, surface.get_height())
    return points


def draw_far_hills(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    factor = night_scale(scene.tod, cfg.night_floor)
    points = _draw_hill(surface, scene.terrain.far, offset_x, cfg.far_hill_color, factor)
    rim_alpha = cfg.far_rim_color[3] * _fade_out(scene.tod, cfg.far_rim_fade)
    if rim_alpha >= 1.0 and len(points) > 1:
        rim = to_color(cfg.far_rim_color[:3], rim_alpha)
        polyline(surface, rim, points, dy=-2.0)
        polyline(surface, to_color(cfg.far_rim_color[:3], rim_alpha * 0.5), points, dy=-1.0)


def draw_mid_hills(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    factor = night_scale(scene.tod, cfg.night_floor)
    _draw_hill(surface, scene.terrain.mid, offset_x, cfg.mid_hill_color, factor)


def draw_near_ground(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    factor = night_scale(scene.tod, cfg.night_floor)
    _draw_hill(surface, scene.terrain.near, offset_x, cfg.near_ground_color, factor)


def draw_trees(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    view_width = surface.get_width()
    factor = night_scale(scene.tod, cfg.night_floor)
    trunk = to_color(scale_rgb(cfg.trunk_color, factor))
    crowns = [to_color(scale_rgb(c[:3], factor), c[3]) for c in cfg.crown_colors]
    for tree in scene.trees:
        tx = tree.x + offset_x
        if not in_view(tx, view_width, tree.width):
            continue
        gy, h, w = tree.ground_y, tree.height, tree.width
        pygame.draw.rect(surface, trunk, pygame.Rect(round(tx - 5), round(gy - h + 12), 10, round(h)))
        fill_ellipse(surface, crowns[0], (tx, gy - h - 4), w, w * 0.95)
        fill_ellipse(surface, crowns[1], (tx - 14, gy - h + 9), w * 0.8, w * 0.8)
        fill_ellipse(surface, crowns[2], (tx + 11, gy - h + 11), w * 0.74, w * 0.74)


def _draw_grass(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    grass = scene.grass
    sx = grass.xs + offset_x
    mask = (sx >= -12.0) & (sx <= surface.get_width() + 12.0)
    factor = night_scale(scene.tod, cfg.night_floor)
    color = to_color(scale_rgb(cfg.grass_color[:3], factor), cfg.grass_color[3])
    for x, gy, bh in zip(sx[mask], grass.ground[mask], grass.heights[mask]):
        line(surface, color, (x, gy), (x - 2, gy - bh))
        line(surface, color, (x + 7, gy), (x + 9, gy - bh * 0.75))


def draw_flowers(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    _draw_grass(surface, scene, offset_x, cfg)

    view_width = surface.get_width()
    factor = night_scale(scene.tod, cfg.night_floor)
    stem = to_color(scale_rgb(cfg.stem_color, factor))
    petal_factor = max(cfg.flower_petal_floor, factor)
    center_alpha = 255.0 * _fade_out(scene.tod, cfg.flower_center_fade)
    center = to_color(cfg.flower_center_color, center_alpha)
    for flower in FLOWER_PLACEMENTS:
        fx = flower.x + offset_x
        if not in_view(fx, view_width, 16.0):
            continue
        gy = scene.terrain.ground_y(flower.x)
        head_y = gy - 20
        pygame.draw.line(surface, stem, (round(fx), round(gy)), (round(fx), round(head_y)), 1)
        petal = to_color(scale_rgb(flower.color, petal_factor), cfg.flower_petal_alpha)
        for i in range(6):
            a = i / 6 * math.tau
            fill_circle(surface, petal, (fx + math.cos(a) * 6, head_y + math.sin(a) * 6), 4)
        if center[3] > 0:
            fill_circle(surface, center, (fx, head_y), 3.5)


__all__ = [
    "draw_clouds",
    "draw_far_hills",
    "draw_flowers",
    "draw_mid_hills",
    "draw_near_ground",
    "draw_trees",
]
