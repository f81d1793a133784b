"""Scalar easing and multi-stop color interpolation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

RGB = tuple[float, float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Interpolate from ``a`` to ``b``; ``t`` is clamped to ``[0, 1]``.

    Written as a weighted sum so both endpoints are reproduced exactly.
    """

    t = clamp01(t)
    return a * (1.0 - t) + b * t


def smoothstep(t: float) -> float:
    t = clamp01(t)
    return t * t * (3.0 - 2.0 * t)


def normalize(value: float, lo: float, hi: float) -> float:
    """Map ``value`` from ``[lo, hi]`` onto ``[0, 1]``, clamped."""

    if hi <= lo:
        return 1.0 if value >= hi else 0.0
    return clamp01((value - lo) / (hi - lo))


def lerp_rgb(a: Sequence[float], b: Sequence[float], t: float) -> RGB:
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))


@dataclass(frozen=True)
class ColorStopTable:
    """Ordered RGB waypoints, e.g. afternoon, golden hour, dusk, night."""

    stops: tuple[tuple[float, float, float], ...]

    def __post_init__(self) -> None:
        if len(self.stops) < 2:
            raise ValueError("A color stop table needs at least 2 stops")
        for stop in self.stops:
            if len(stop) != 3:
                raise ValueError(f"Color stop {stop!r} is not an RGB triple")

    def __len__(self) -> int:
        return len(self.stops)

    def at(self, t: float) -> RGB:
        return lerp_stops(self.stops, t)


def lerp_stops(stops: Sequence[Sequence[float]], t: float) -> RGB:
    """Interpolate across ``n + 1`` stops with a global scalar ``t``.

    The segment is ``min(floor(t * n), n - 1)`` so ``t == 1`` lands on the
    last segment with a local fraction of exactly 1.
    """

    n = len(stops) - 1
    if n < 1:
        raise ValueError("A color stop table needs at least 2 stops")
    t = clamp01(t)
    scaled = t * n
    index = min(int(scaled), n - 1)
    local = scaled - index
    return lerp_rgb(stops[index], stops[index + 1], local)


def night_scale(tod: float, floor: float = 0.12) -> float:
    """Brightness multiplier for silhouettes: 1 at day, ``floor`` at night."""

    return lerp(1.0, floor, tod)


def scale_rgb(rgb: Sequence[float], factor: float) -> RGB:
    return (rgb[0] * factor, rgb[1] * factor, rgb[2] * factor)


def to_color(rgb: Sequence[float], alpha: float | None = None) -> tuple[int, ...]:
    """Round to drawable 8-bit channels, optionally appending an alpha."""

    channels = [int(round(clamp(c, 0.0, 255.0))) for c in rgb[:3]]
    if alpha is not None:
        channels.append(int(round(clamp(alpha, 0.0, 255.0))))
    return tuple(channels)


__all__ = [
    "ColorStopTable",
    "RGB",
    "clamp",
    "clamp01",
    "lerp",
    "lerp_rgb",
    "lerp_stops",
    "night_scale",
    "normalize",
    "scale_rgb",
    "smoothstep",
    "to_color",
]
