"""Drifting petals that turn into fireflies after dusk."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator

from .camera import in_view
from .color import RGB, lerp, lerp_rgb
from .config import SCENE_CFG, SceneCfg


@dataclass
class Particle:
    wx: float
    y: float
    size: float
    vx: float
    phase: float
    angle: float
    spin: float
    color: tuple[float, float, float]
    alpha: float


@dataclass(frozen=True)
class ParticleLook:
    """Resolved appearance of one particle for a given night factor."""

    color: RGB
    alpha: float
    width: float
    height: float
    glow_alpha: float


def spawn_particles(count: int, cfg: SceneCfg, rng: random.Random) -> list[Particle]:
    y_lo, y_hi = cfg.particle_spawn_y
    particles: list[Particle] = []
    for _ in range(count):
        particles.append(
            Particle(
                wx=rng.uniform(0.0, cfg.world_width),
                y=rng.uniform(y_lo, y_hi),
                size=rng.uniform(3.0, 7.5),
                vx=rng.uniform(0.18, 0.65),
                phase=rng.uniform(0.0, math.tau),
                angle=rng.uniform(0.0, math.tau),
                spin=rng.uniform(-0.025, 0.025),
                color=(
                    rng.uniform(230, 255),
                    rng.uniform(148, 218),
                    rng.uniform(182, 234),
                ),
                alpha=rng.uniform(140, 210),
            )
        )
    return particles


class ParticleSystem:
    """Fixed-size pool of world-space particles."""

    def __init__(self, particles: list[Particle], cfg: SceneCfg = SCENE_CFG) -> None:
        self._particles = particles
        self._cfg = cfg

    @classmethod
    def create(cls, cfg: SceneCfg, rng: random.Random) -> "ParticleSystem":
        return cls(spawn_particles(cfg.particle_count, cfg, rng), cfg)

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def update(self, frame: int) -> None:
        cfg = self._cfg
        floor_y = cfg.viewport_height - cfg.particle_floor_offset
        for p in self._particles:
            p.wx += p.vx
            p.y += math.sin(frame * cfg.particle_float_rate + p.phase) * cfg.particle_float_amplitude
            p.angle += p.spin
            if p.wx > cfg.world_width:
                p.wx = 0.0
            if p.y > floor_y:
                p.y = cfg.particle_reset_y

    def visible(self, camera_position: float) -> Iterator[Particle]:
        """Particles within the cull margin of a view starting at world x ``camera_position``."""

        cfg = self._cfg
        for p in self._particles:
            if in_view(p.wx - camera_position, cfg.viewport_width, cfg.particle_cull_margin):
                yield p


def particle_look(
    particle: Particle,
    night: float,
    *,
    firefly_color: tuple[int, int, int] = (214, 255, 122),
    glow_threshold: float = 0.08,
    glow_alpha: float = 70.0,
) -> ParticleLook:
    """Blend a petal towards a firefly; ``night`` is the clamped night factor."""

    night = max(0.0, min(1.0, night))
    color = lerp_rgb(particle.color, firefly_color, night)
    width = particle.size * lerp(2.3, 1.05, night)
    height = particle.size * lerp(1.0, 0.95, night)
    alpha = lerp(particle.alpha, 235.0, night)
    if night > glow_threshold:
        glow = glow_alpha * (night - glow_threshold) / (1.0 - glow_threshold)
    else:
        glow = 0.0
    return ParticleLook(color=color, alpha=alpha, width=width, height=height, glow_alpha=glow)


__all__ = ["Particle", "ParticleLook", "ParticleSystem", "particle_look", "spawn_particles"]
