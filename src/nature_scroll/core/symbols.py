"""Hidden landmark symbols with independent pulse phases."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .camera import in_view


class SymbolType(Enum):
    SUN = "sun"
    LEAF = "leaf"
    STAR = "star"
    MOON = "moon"


@dataclass
class LandmarkSymbol:
    """Fixed world-space marker; only its phase ever changes."""

    wx: float
    wy: float
    kind: SymbolType
    phase: float = 0.0

    @property
    def pulse(self) -> float:
        return (math.sin(self.phase) + 1.0) * 0.5

    def advance(self, step: float) -> None:
        self.phase += step

    def screen_x(self, camera_position: float) -> float:
        return self.wx - camera_position

    def is_visible(self, camera_position: float, viewport_width: float, margin: float) -> bool:
        return in_view(self.screen_x(camera_position), viewport_width, margin)


def advance_symbols(symbols: Iterable[LandmarkSymbol], step: float) -> None:
    for symbol in symbols:
        symbol.advance(step)


def visible_symbols(
    symbols: Iterable[LandmarkSymbol],
    camera_position: float,
    viewport_width: float,
    margin: float,
) -> Iterator[LandmarkSymbol]:
    for symbol in symbols:
        if symbol.is_visible(camera_position, viewport_width, margin):
            yield symbol


__all__ = ["LandmarkSymbol", "SymbolType", "advance_symbols", "visible_symbols"]
