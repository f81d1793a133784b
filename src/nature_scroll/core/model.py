"""Scene state container and the per-frame update."""
from __future__ import annotations

import random
from dataclasses import dataclass, field, replace

from nature_scroll.data.scenery import TREE_XS, create_symbols

from .camera import Camera, Direction
from .config import SCENE_CFG, SceneCfg
from .flora import GrassField, Tree, build_grass, build_trees
from .noise import SimplexNoise, SmoothNoise
from .particles import ParticleSystem
from .sky import SkyStar, generate_stars
from .symbols import LandmarkSymbol, advance_symbols
from .terrain import Terrain, build_terrain
from .timeofday import compute_tod, night_factor


@dataclass(frozen=True)
class TickInputs:
    """Level-triggered input sampled at the start of a frame."""

    autoscroll_enabled: bool = True
    direction: Direction = Direction.NONE


@dataclass
class SceneState:
    """Everything that one scene instance owns."""

    cfg: SceneCfg
    camera: Camera
    terrain: Terrain
    particles: ParticleSystem
    symbols: list[LandmarkSymbol]
    stars: list[SkyStar]
    trees: list[Tree]
    grass: GrassField
    noise: SmoothNoise
    tod: float = 0.0
    frame: int = 0
    wrapped: bool = False
    seed: int | None = field(default=None)

    @property
    def night_factor(self) -> float:
        return night_factor(self.tod, self.cfg.particle_night_window)

    def refresh_tod(self) -> None:
        self.tod = compute_tod(
            self.camera.position,
            self.cfg.world_width,
            self.cfg.viewport_width,
            self.cfg.tod_breakpoints,
        )


def initialize_scene(
    world_width: float,
    viewport_width: int,
    viewport_height: int,
    *,
    seed: int | None = None,
    noise: SmoothNoise | None = None,
    cfg: SceneCfg = SCENE_CFG,
) -> SceneState:
    cfg = replace(
        cfg,
        world_width=float(world_width),
        viewport_width=viewport_width,
        viewport_height=viewport_height,
    )
    cfg.validate()
    seed = seed if seed is not None else cfg.seed
    rng = random.Random(seed)
    if noise is None:
        noise = SimplexNoise(seed=rng.randrange(2**31))

    terrain = build_terrain(cfg)
    camera = Camera(
        cfg.world_width,
        cfg.viewport_width,
        auto_speed=cfg.auto_speed,
        manual_speed=cfg.manual_speed,
    )
    scene = SceneState(
        cfg=cfg,
        camera=camera,
        terrain=terrain,
        particles=ParticleSystem.create(cfg, rng),
        symbols=create_symbols(),
        stars=generate_stars(
            cfg.star_count,
            size=(cfg.viewport_width, cfg.viewport_height),
            sky_fraction=cfg.star_sky_fraction,
            twinkle_rate=cfg.star_twinkle_rate,
            rng=rng,
        ),
        trees=build_trees(TREE_XS, terrain, noise),
        grass=build_grass(terrain, noise, cfg.grass_spacing),
        noise=noise,
        seed=seed,
    )
    scene.refresh_tod()
    return scene


def tick(scene: SceneState, inputs: TickInputs) -> None:
    """Advance one frame: camera, then time of day, then particles and symbols."""

    scene.frame += 1
    scene.wrapped = scene.camera.update(inputs.autoscroll_enabled, inputs.direction)
    scene.refresh_tod()
    scene.particles.update(scene.frame)
    advance_symbols(scene.symbols, scene.cfg.symbol_phase_step)


__all__ = ["SceneState", "TickInputs", "initialize_scene", "tick"]
