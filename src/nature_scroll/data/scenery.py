"""Hand-placed scenery: landmark symbols, clouds, trees and flowers."""
from __future__ import annotations

import math
from dataclasses import dataclass

from nature_scroll.core.symbols import LandmarkSymbol, SymbolType


@dataclass(frozen=True)
class SymbolPlacement:
    kind: SymbolType
    wx: float
    wy: float
    phase: float

    def create(self) -> LandmarkSymbol:
        return LandmarkSymbol(wx=self.wx, wy=self.wy, kind=self.kind, phase=self.phase)


@dataclass(frozen=True)
class CloudPlacement:
    x: float
    y: float
    scale: float


@dataclass(frozen=True)
class FlowerPlacement:
    x: float
    color: tuple[int, int, int]
    name: str


# The leaf sits where the camera passes through the fast dusk transition.
SYMBOL_PLACEMENTS: tuple[SymbolPlacement, ...] = (
    SymbolPlacement(SymbolType.SUN, 480.0, 192.0, 0.0),
    SymbolPlacement(SymbolType.LEAF, 1110.0, 180.0, math.pi / 2),
    SymbolPlacement(SymbolType.STAR, 1670.0, 202.0, math.pi),
    SymbolPlacement(SymbolType.MOON, 2210.0, 188.0, math.pi + math.pi / 2),
)

CLOUD_PLACEMENTS: tuple[CloudPlacement, ...] = (
    CloudPlacement(150.0, 65.0, 1.2),
    CloudPlacement(490.0, 52.0, 0.9),
    CloudPlacement(830.0, 70.0, 1.4),
    CloudPlacement(1170.0, 56.0, 1.0),
    CloudPlacement(1500.0, 68.0, 1.15),
    CloudPlacement(1840.0, 50.0, 0.85),
    CloudPlacement(2180.0, 73.0, 1.1),
)

TREE_XS: tuple[float, ...] = (
    85.0, 255.0, 435.0, 615.0, 800.0,
    1015.0, 1195.0, 1385.0, 1570.0, 1755.0,
    1945.0, 2135.0, 2325.0,
)

FLOWER_PLACEMENTS: tuple[FlowerPlacement, ...] = (
    FlowerPlacement(140.0, (255, 172, 185), "blush pink"),
    FlowerPlacement(305.0, (255, 228, 142), "butter yellow"),
    FlowerPlacement(485.0, (212, 172, 255), "soft violet"),
    FlowerPlacement(665.0, (255, 188, 200), "rose"),
    FlowerPlacement(865.0, (255, 235, 152), "warm yellow"),
    FlowerPlacement(1055.0, (188, 172, 255), "periwinkle"),
    FlowerPlacement(1235.0, (255, 198, 168), "apricot"),
    FlowerPlacement(1425.0, (172, 218, 255), "sky blue"),
    FlowerPlacement(1615.0, (255, 172, 212), "carnation"),
    FlowerPlacement(1805.0, (255, 225, 152), "golden"),
    FlowerPlacement(1995.0, (192, 255, 192), "mint"),
    FlowerPlacement(2195.0, (255, 192, 225), "cotton candy"),
    FlowerPlacement(2365.0, (255, 240, 158), "lemon"),
)


def create_symbols() -> list[LandmarkSymbol]:
    return [placement.create() for placement in SYMBOL_PLACEMENTS]


__all__ = [
    "CLOUD_PLACEMENTS",
    "CloudPlacement",
    "FLOWER_PLACEMENTS",
    "FlowerPlacement",
    "SYMBOL_PLACEMENTS",
    "SymbolPlacement",
    "TREE_XS",
    "create_symbols",
]
