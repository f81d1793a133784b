"""Screen-fixed star field that fades in after sunset."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .color import normalize


@dataclass
class SkyStar:
    """Represents a single star pinned to the viewport."""

    x: float
    y: float
    size: float
    brightness: int
    twinkle_rate: float
    twinkle_phase: float


def generate_stars(
    count: int,
    *,
    size: tuple[int, int],
    sky_fraction: float,
    twinkle_rate: tuple[float, float],
    rng: random.Random,
) -> list[SkyStar]:
    width, height = size
    stars: list[SkyStar] = []
    for _ in range(count):
        depth = rng.uniform(0.1, 0.5)
        # Map depth [0.1, 0.5] to brightness [120, 255]
        brightness = int(120 + (depth - 0.1) / 0.4 * 135)
        stars.append(
            SkyStar(
                x=rng.uniform(0, width),
                y=rng.uniform(0, height * sky_fraction),
                size=rng.choice([1.0, 1.0, 1.5, 2.0]),
                brightness=max(120, min(255, brightness)),
                twinkle_rate=rng.uniform(*twinkle_rate),
                twinkle_phase=rng.uniform(0.0, math.tau),
            )
        )
    return stars


def star_visibility(tod: float, window: tuple[float, float] = (0.32, 0.72)) -> float:
    """Global star alpha factor: 0 before ``window[0]``, 1 from ``window[1]``."""

    return normalize(tod, *window)


def twinkle(star: SkyStar, frame: int) -> float:
    """Per-star oscillation in ``[0.55, 1]`` applied to size and alpha."""

    return 0.775 + 0.225 * math.sin(frame * star.twinkle_rate + star.twinkle_phase)


__all__ = ["SkyStar", "generate_stars", "star_visibility", "twinkle"]
