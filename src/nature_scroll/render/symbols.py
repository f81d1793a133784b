"""Landmark glow and the per-type icons."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

import pygame

from nature_scroll.core.color import to_color
from nature_scroll.core.symbols import SymbolType, visible_symbols

from .draw import (
    cubic_bezier,
    fill_circle,
    fill_polygon,
    line,
    outline_polygon,
    thick_line,
)

if TYPE_CHECKING:  # pragma: no cover
    from nature_scroll.core.config import RenderCfg
    from nature_scroll.core.model import SceneState

IconDrawer = Callable[[pygame.Surface, float, float, float, "RenderCfg"], None]

MOON_COLOR = (255, 242, 185)
LEAF_FILL = (158, 225, 158)
LEAF_VEIN = (95, 182, 108)
SUN_DISC = (255, 235, 98)
SUN_RAY = (255, 215, 65)


def glow_rings(pulse: float, cfg: RenderCfg) -> list[tuple[float, float]]:
    """``(radius, alpha)`` for each concentric disc, outermost first."""

    max_r = cfg.symbol_glow_radius[0] + pulse * cfg.symbol_glow_radius[1]
    peak = cfg.symbol_glow_alpha[0] + pulse * cfg.symbol_glow_alpha[1]
    rings: list[tuple[float, float]] = []
    r = max_r
    while r > 0.0:
        rings.append((r, (max_r - r) / max_r * peak))
        r -= cfg.symbol_glow_step
    return rings


def star_points(x: float, y: float, inner: float, outer: float, count: int) -> list[tuple[float, float]]:
    points = []
    for i in range(count * 2):
        r = outer if i % 2 == 0 else inner
        a = i / (count * 2) * math.tau - math.pi / 2
        points.append((x + math.cos(a) * r, y + math.sin(a) * r))
    return points


def draw_star_icon(surface: pygame.Surface, x: float, y: float, pulse: float, cfg: RenderCfg) -> None:
    alpha = 175 + pulse * 80
    points = star_points(x, y, 8, 18, 5)
    fill_polygon(surface, to_color(cfg.symbol_fill_color, alpha), points)
    outline_polygon(surface, to_color(cfg.symbol_outline_color, alpha), points)


def draw_moon_icon(surface: pygame.Surface, x: float, y: float, pulse: float, cfg: RenderCfg) -> None:
    r = 13
    size = r * 2 + 4
    c = size // 2
    sprite = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(sprite, to_color(MOON_COLOR, 200 + pulse * 55), (c, c), r)
    # Clearing pixels directly carves the crescent, whatever the sky behind it.
    bite = pygame.Rect(0, 0, round(r * 1.52), round(r * 1.72))
    bite.center = (round(c + r * 0.48), c)
    pygame.draw.ellipse(sprite, (0, 0, 0, 0), bite)
    surface.blit(sprite, sprite.get_rect(center=(round(x), round(y))))


def leaf_outline(x: float, y: float, r: float) -> list[tuple[float, float]]:
    right = cubic_bezier((x, y - r), (x + r, y - r * 0.3), (x + r, y + r * 0.3), (x, y + r))
    left = cubic_bezier((x, y + r), (x - r, y + r * 0.3), (x - r, y - r * 0.3), (x, y - r))
    return right + left[1:-1]


def draw_leaf_icon(surface: pygame.Surface, x: float, y: float, pulse: float, cfg: RenderCfg) -> None:
    r = 13
    outline = leaf_outline(x, y, r)
    fill_polygon(surface, to_color(LEAF_FILL, 200 + pulse * 55), outline)
    outline_polygon(surface, to_color(LEAF_VEIN, 220), outline)
    line(surface, to_color(LEAF_VEIN, 175), (x, y - r), (x, y + r))


def draw_sun_icon(surface: pygame.Surface, x: float, y: float, pulse: float, cfg: RenderCfg) -> None:
    r = 10
    fill_circle(surface, to_color(SUN_DISC, 200 + pulse * 55), (x, y), r)
    ray = to_color(SUN_RAY, 175 + pulse * 80)
    inner = r + 3
    outer = r + 8 + pulse * 5
    for i in range(8):
        a = i / 8 * math.tau
        thick_line(
            surface,
            ray,
            (x + math.cos(a) * inner, y + math.sin(a) * inner),
            (x + math.cos(a) * outer, y + math.sin(a) * outer),
            2,
        )


ICON_DRAWERS: dict[SymbolType, IconDrawer] = {
    SymbolType.SUN: draw_sun_icon,
    SymbolType.LEAF: draw_leaf_icon,
    SymbolType.STAR: draw_star_icon,
    SymbolType.MOON: draw_moon_icon,
}


def draw_symbols(surface: pygame.Surface, scene: SceneState, offset_x: float, cfg: RenderCfg) -> None:
    for symbol in visible_symbols(
        scene.symbols,
        -offset_x,
        surface.get_width(),
        scene.cfg.symbol_cull_margin,
    ):
        pulse = symbol.pulse
        x = symbol.wx + offset_x
        y = symbol.wy
        for radius, alpha in glow_rings(pulse, cfg):
            if alpha >= 1.0:
                fill_circle(surface, to_color(cfg.symbol_glow_color, alpha), (x, y), radius)
        ICON_DRAWERS[symbol.kind](surface, x, y, pulse, cfg)


__all__ = [
    "ICON_DRAWERS",
    "draw_leaf_icon",
    "draw_moon_icon",
    "draw_sun_icon",
    "draw_star_icon",
    "draw_symbols",
    "glow_rings",
    "leaf_outline",
    "star_points",
]
