"""Camera position to time-of-day mapping."""
from __future__ import annotations

import math
from typing import Sequence

from .color import clamp01, lerp, normalize, smoothstep

# (input breakpoint, output value) pairs between the fixed ends (0, 0) and (1, 1).
DEFAULT_BREAKPOINTS: tuple[tuple[float, float], ...] = ((0.22, 0.12), (0.52, 0.88))


def eased_progress(
    p: float,
    breakpoints: Sequence[tuple[float, float]] = DEFAULT_BREAKPOINTS,
) -> float:
    """Piecewise map of ``p`` in ``[0, 1]`` with smooth-step inside each segment.

    Every segment eases its own local fraction, so slopes at the joins are
    not matched; values are.
    """

    p = clamp01(p)
    knots = [(0.0, 0.0), *breakpoints, (1.0, 1.0)]
    for (x0, y0), (x1, y1) in zip(knots, knots[1:]):
        if p < x1 or x1 >= 1.0:
            return lerp(y0, y1, smoothstep(normalize(p, x0, x1)))
    return 1.0


def compute_tod(
    position: float,
    world_width: float,
    viewport_width: float,
    breakpoints: Sequence[tuple[float, float]] = DEFAULT_BREAKPOINTS,
) -> float:
    """Return the day/night scalar for a camera position (0 day, 1 night)."""

    scroll_range = world_width - viewport_width
    if scroll_range <= 0:
        return 0.0
    return eased_progress(position / scroll_range, breakpoints)


def night_factor(tod: float, window: tuple[float, float] = (0.52, 0.88)) -> float:
    """Sub-range remap of ``tod`` used for the petal to firefly morph."""

    return normalize(tod, *window)


def horizon_glow(tod: float, window: tuple[float, float] = (0.14, 0.74)) -> float:
    """Sunset band intensity: zero outside ``window`` and 1 at its midpoint."""

    lo, hi = window
    if tod <= lo or tod >= hi:
        return 0.0
    return math.sin(math.pi * normalize(tod, lo, hi))


__all__ = [
    "DEFAULT_BREAKPOINTS",
    "compute_tod",
    "eased_progress",
    "horizon_glow",
    "night_factor",
]
