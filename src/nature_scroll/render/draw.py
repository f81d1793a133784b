"""Alpha-blended pygame primitives and small geometry helpers."""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pygame
from pygame import gfxdraw

from .assets import Color


def _ipt(point: Sequence[float]) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def fill_polygon(surface: pygame.Surface, color: Color, points: Sequence[Sequence[float]]) -> None:
    """Alpha-blended filled polygon with an anti-aliased edge."""

    if len(points) < 3:
        return
    pts = [_ipt(p) for p in points]
    gfxdraw.filled_polygon(surface, pts, color)
    gfxdraw.aapolygon(surface, pts, color)


def outline_polygon(surface: pygame.Surface, color: Color, points: Sequence[Sequence[float]]) -> None:
    if len(points) < 2:
        return
    gfxdraw.aapolygon(surface, [_ipt(p) for p in points], color)


def fill_ellipse(
    surface: pygame.Surface,
    color: Color,
    center: Sequence[float],
    width: float,
    height: float,
) -> None:
    """Ellipse given by its full ``width`` and ``height``, like a bounding box."""

    rx = int(round(width / 2.0))
    ry = int(round(height / 2.0))
    if rx < 1 or ry < 1:
        return
    cx, cy = _ipt(center)
    gfxdraw.filled_ellipse(surface, cx, cy, rx, ry, color)
    gfxdraw.aaellipse(surface, cx, cy, rx, ry, color)


def fill_circle(surface: pygame.Surface, color: Color, center: Sequence[float], radius: float) -> None:
    r = int(round(radius))
    if r < 1:
        return
    cx, cy = _ipt(center)
    gfxdraw.filled_circle(surface, cx, cy, r, color)


def line(surface: pygame.Surface, color: Color, start: Sequence[float], end: Sequence[float]) -> None:
    x1, y1 = _ipt(start)
    x2, y2 = _ipt(end)
    gfxdraw.line(surface, x1, y1, x2, y2, color)


def thick_line(
    surface: pygame.Surface,
    color: Color,
    start: Sequence[float],
    end: Sequence[float],
    width: float,
) -> None:
    """Line of arbitrary width drawn as a blended quad."""

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length <= 0.0 or width <= 0.0:
        return
    if width <= 1.0:
        line(surface, color, start, end)
        return
    nx = -dy / length * width / 2.0
    ny = dx / length * width / 2.0
    quad = [
        (start[0] + nx, start[1] + ny),
        (end[0] + nx, end[1] + ny),
        (end[0] - nx, end[1] - ny),
        (start[0] - nx, start[1] - ny),
    ]
    gfxdraw.filled_polygon(surface, [_ipt(p) for p in quad], color)


def polyline(surface: pygame.Surface, color: Color, points: np.ndarray, dy: float = 0.0) -> None:
    for (x1, y1), (x2, y2) in zip(points[:-1], points[1:]):
        line(surface, color, (x1, y1 + dy), (x2, y2 + dy))


def silhouette(
    surface: pygame.Surface,
    color: Color,
    points: np.ndarray,
    bottom: float,
) -> None:
    """Fill the area between a ridge line and the bottom of the surface."""

    if len(points) < 2:
        return
    outline = [(float(points[0, 0]), bottom), *map(tuple, points.tolist()), (float(points[-1, 0]), bottom)]
    pygame.draw.polygon(surface, color, [_ipt(p) for p in outline])


def rotated_ellipse_points(
    center: Sequence[float],
    width: float,
    height: float,
    angle: float,
    segments: int = 14,
) -> list[tuple[float, float]]:
    cx, cy = center
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    points: list[tuple[float, float]] = []
    for i in range(segments):
        t = i / segments * math.tau
        ex = math.cos(t) * width / 2.0
        ey = math.sin(t) * height / 2.0
        points.append((cx + ex * cos_a - ey * sin_a, cy + ex * sin_a + ey * cos_a))
    return points


def cubic_bezier(
    p0: Sequence[float],
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    samples: int = 12,
) -> list[tuple[float, float]]:
    t = np.linspace(0.0, 1.0, samples)[:, None]
    pts = (
        (1 - t) ** 3 * np.asarray(p0, dtype=float)
        + 3 * (1 - t) ** 2 * t * np.asarray(p1, dtype=float)
        + 3 * (1 - t) * t**2 * np.asarray(p2, dtype=float)
        + t**3 * np.asarray(p3, dtype=float)
    )
    return [tuple(p) for p in pts.tolist()]


__all__ = [
    "cubic_bezier",
    "fill_circle",
    "fill_ellipse",
    "fill_polygon",
    "line",
    "outline_polygon",
    "polyline",
    "rotated_ellipse_points",
    "silhouette",
    "thick_line",
]
