"""Tests for the petal/firefly particle pool."""

import random

import pytest

from nature_scroll.core.config import SCENE_CFG
from nature_scroll.core.particles import (
    Particle,
    ParticleSystem,
    particle_look,
    spawn_particles,
)


def make_particle(**overrides):
    values = dict(
        wx=100.0,
        y=200.0,
        size=5.0,
        vx=0.4,
        phase=0.0,
        angle=0.0,
        spin=0.01,
        color=(240.0, 180.0, 200.0),
        alpha=180.0,
    )
    values.update(overrides)
    return Particle(**values)


class TestSpawn:
    def test_count_and_ranges(self):
        particles = spawn_particles(55, SCENE_CFG, random.Random(7))
        assert len(particles) == 55
        for p in particles:
            assert 0.0 <= p.wx <= SCENE_CFG.world_width
            assert 80.0 <= p.y <= 345.0
            assert 3.0 <= p.size <= 7.5
            assert 0.18 <= p.vx <= 0.65

    def test_seeded_spawn_is_reproducible(self):
        a = spawn_particles(10, SCENE_CFG, random.Random(3))
        b = spawn_particles(10, SCENE_CFG, random.Random(3))
        assert a == b


class TestUpdate:
    def test_pool_size_is_fixed(self):
        system = ParticleSystem.create(SCENE_CFG, random.Random(11))
        for frame in range(1, 2001):
            system.update(frame)
            assert len(system) == 55
            for p in system:
                assert 0.0 <= p.wx <= SCENE_CFG.world_width

    def test_wraps_to_world_start_on_same_update(self):
        p = make_particle(wx=2399.9, vx=0.5)
        ParticleSystem([p], SCENE_CFG).update(1)
        assert p.wx == 0.0

    def test_resets_below_floor(self):
        p = make_particle(y=390.0)
        ParticleSystem([p], SCENE_CFG).update(1)
        assert p.y == 85.0

    def test_drift_and_spin(self):
        p = make_particle(wx=100.0, vx=0.4, spin=0.02, y=200.0)
        ParticleSystem([p], SCENE_CFG).update(0)
        assert p.wx == pytest.approx(100.4)
        assert p.angle == pytest.approx(0.02)
        # sin(0 * rate + 0) is zero, so no vertical movement on frame 0.
        assert p.y == pytest.approx(200.0)

    def test_visible_uses_cull_margin(self):
        inside_left = make_particle(wx=485.0)
        outside_left = make_particle(wx=484.0)
        inside_right = make_particle(wx=1315.0)
        outside_right = make_particle(wx=1316.0)
        system = ParticleSystem(
            [inside_left, outside_left, inside_right, outside_right], SCENE_CFG
        )
        visible = list(system.visible(500.0))
        assert visible == [inside_left, inside_right]


class TestLook:
    def test_daytime_petal(self):
        p = make_particle()
        look = particle_look(p, 0.0)
        assert look.color == pytest.approx(p.color)
        assert look.alpha == pytest.approx(p.alpha)
        assert look.width == pytest.approx(5.0 * 2.3)
        assert look.height == pytest.approx(5.0)
        assert look.glow_alpha == 0.0

    def test_full_night_firefly(self):
        look = particle_look(make_particle(), 1.0)
        assert look.color == pytest.approx((214, 255, 122))
        assert look.alpha == pytest.approx(235.0)
        assert look.width == pytest.approx(5.0 * 1.05)
        assert look.height == pytest.approx(5.0 * 0.95)
        assert look.glow_alpha == pytest.approx(70.0)

    def test_glow_starts_after_threshold(self):
        p = make_particle()
        assert particle_look(p, 0.08).glow_alpha == 0.0
        assert particle_look(p, 0.54).glow_alpha == pytest.approx(35.0)

    def test_night_factor_is_clamped(self):
        p = make_particle()
        assert particle_look(p, 3.0) == particle_look(p, 1.0)
        assert particle_look(p, -1.0) == particle_look(p, 0.0)
