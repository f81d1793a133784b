"""Configuration dataclasses for the nature scroll scene."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from .color import ColorStopTable


@dataclass(frozen=True)
class TerrainLayerCfg:
    """Elevation formula for one terrain profile.

    Each wave is ``(cycles, phase, amplitude)``; ``cycles`` counts full periods
    across the world width so the profile meets itself at both world edges.
    """

    name: str
    base: float
    waves: tuple[tuple[float, float, float], ...]
    parallax: float

    def frequency(self, cycles: float, world_width: float) -> float:
        return 2.0 * math.pi * cycles / world_width


@dataclass(frozen=True)
class SceneCfg:
    world_width: float = 2400.0
    viewport_width: int = 800
    viewport_height: int = 400
    auto_speed: float = 0.5
    manual_speed: float = 3.0
    terrain_step: float = 6.0
    particle_count: int = 55
    particle_cull_margin: float = 15.0
    particle_float_rate: float = 0.018
    particle_float_amplitude: float = 0.35
    particle_spawn_y: tuple[float, float] = (80.0, 345.0)
    particle_reset_y: float = 85.0
    particle_floor_offset: float = 25.0
    symbol_cull_margin: float = 60.0
    symbol_phase_step: float = 0.055
    star_count: int = 90
    star_sky_fraction: float = 0.62
    star_twinkle_rate: tuple[float, float] = (0.03, 0.09)
    grass_spacing: float = 18.0
    tod_breakpoints: tuple[tuple[float, float], ...] = ((0.22, 0.12), (0.52, 0.88))
    particle_night_window: tuple[float, float] = (0.52, 0.88)
    seed: int | None = None
    terrain_layers: tuple[TerrainLayerCfg, ...] = (
        TerrainLayerCfg(
            "far", 212.0, ((1.0, 0.0, 52.0), (3.0, 1.2, 26.0)), parallax=0.35
        ),
        TerrainLayerCfg(
            "mid", 270.0, ((2.0, 2.0, 34.0), (4.0, 4.5, 15.0)), parallax=0.62
        ),
        TerrainLayerCfg(
            "near", 316.0, ((2.0, 1.0, 9.0), (5.0, 2.4, 3.0)), parallax=1.0
        ),
    )

    @property
    def scroll_range(self) -> float:
        return self.world_width - self.viewport_width

    def validate(self) -> None:
        if self.world_width <= 0 or self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("World and viewport dimensions must be positive")
        if self.world_width <= self.viewport_width:
            raise ValueError("World width must exceed viewport width")
        if self.terrain_step <= 0:
            raise ValueError("Terrain step must be positive")


@dataclass(frozen=True)
class RenderCfg:
    sky_top: ColorStopTable = field(
        default_factory=lambda: ColorStopTable(
            (
                (185, 172, 230),
                (214, 150, 170),
                (82, 64, 132),
                (12, 16, 44),
            )
        )
    )
    sky_bottom: ColorStopTable = field(
        default_factory=lambda: ColorStopTable(
            (
                (255, 210, 178),
                (255, 176, 118),
                (178, 104, 128),
                (28, 30, 66),
            )
        )
    )
    horizon_glow_color: tuple[int, int, int] = (255, 150, 92)
    horizon_glow_window: tuple[float, float] = (0.14, 0.74)
    horizon_glow_max_alpha: int = 150
    horizon_glow_center: float = 0.72
    horizon_glow_spread: float = 0.16
    star_window: tuple[float, float] = (0.32, 0.72)
    star_color: tuple[int, int, int] = (246, 244, 255)
    night_floor: float = 0.12
    cloud_parallax: float = 0.15
    cloud_day_color: tuple[int, int, int] = (255, 245, 250)
    cloud_night_color: tuple[int, int, int] = (68, 72, 108)
    cloud_alpha: tuple[int, int] = (195, 130)
    cloud_blush_color: tuple[int, int, int, int] = (255, 220, 235, 55)
    cloud_blush_fade: float = 0.45
    far_hill_color: tuple[int, int, int] = (205, 188, 225)
    far_rim_color: tuple[int, int, int, int] = (225, 212, 240, 110)
    far_rim_fade: float = 0.5
    mid_hill_color: tuple[int, int, int] = (162, 204, 170)
    near_ground_color: tuple[int, int, int] = (130, 182, 142)
    trunk_color: tuple[int, int, int] = (148, 108, 78)
    crown_colors: tuple[tuple[int, int, int, int], ...] = (
        (108, 162, 122, 218),
        (92, 150, 110, 200),
        (122, 175, 136, 200),
    )
    grass_color: tuple[int, int, int, int] = (90, 152, 100, 165)
    stem_color: tuple[int, int, int] = (92, 145, 80)
    flower_petal_alpha: int = 200
    flower_petal_floor: float = 0.35
    flower_center_color: tuple[int, int, int] = (255, 242, 100)
    flower_center_fade: float = 0.6
    petal_to_firefly: tuple[int, int, int] = (214, 255, 122)
    firefly_glow_color: tuple[int, int, int] = (200, 255, 110)
    firefly_glow_threshold: float = 0.08
    firefly_glow_radius: float = 3.2
    firefly_glow_alpha: int = 70
    symbol_glow_color: tuple[int, int, int] = (255, 228, 115)
    symbol_glow_radius: tuple[float, float] = (20.0, 14.0)
    symbol_glow_alpha: tuple[float, float] = (65.0, 115.0)
    symbol_glow_step: float = 2.5
    symbol_fill_color: tuple[int, int, int] = (255, 245, 158)
    symbol_outline_color: tuple[int, int, int] = (255, 205, 55)
    hud_text_color: tuple[int, int, int] = (250, 244, 236)
    hud_text_alpha: int = int(255 * 0.7)
    card_background_color: tuple[int, int, int, int] = (36, 28, 58, int(255 * 0.72))
    card_title_color: tuple[int, int, int] = (255, 236, 214)
    card_text_color: tuple[int, int, int] = (226, 214, 240)
    button_color: tuple[int, int, int, int] = (48, 36, 78, int(255 * 0.7))
    button_hover_color: tuple[int, int, int, int] = (72, 56, 112, int(255 * 0.85))
    button_text_color: tuple[int, int, int] = (250, 244, 236)
    button_border_color: tuple[int, int, int, int] = (255, 236, 214, int(255 * 0.45))
    button_radius: int = 14


SCENE_CFG = SceneCfg()
RENDER_CFG = RenderCfg()


__all__ = ["RENDER_CFG", "SCENE_CFG", "RenderCfg", "SceneCfg", "TerrainLayerCfg"]
