"""Tests for terrain profiles and the ground sampler."""

import numpy as np
import pytest

from nature_scroll.core.config import SCENE_CFG
from nature_scroll.core.terrain import build_terrain, elevation


@pytest.fixture(scope="module")
def terrain():
    return build_terrain(SCENE_CFG)


class TestProfiles:
    def test_covers_world_at_fixed_step(self, terrain):
        for profile in (terrain.far, terrain.mid, terrain.near):
            assert len(profile) == 401
            assert profile.xs[0] == 0.0
            assert profile.xs[-1] == 2400.0
            assert np.allclose(np.diff(profile.xs), 6.0)

    def test_first_and_last_samples_meet(self, terrain):
        for profile in (terrain.far, terrain.mid, terrain.near):
            assert profile.ys[0] == pytest.approx(profile.ys[-1], abs=1e-6)

    def test_layers_are_stacked_back_to_front(self, terrain):
        assert terrain.far.ys.mean() < terrain.mid.ys.mean() < terrain.near.ys.mean()

    def test_parallax_coefficients(self, terrain):
        assert (terrain.far.parallax, terrain.mid.parallax, terrain.near.parallax) == (0.35, 0.62, 1.0)

    def test_samples_are_read_only(self, terrain):
        with pytest.raises(ValueError):
            terrain.far.ys[0] = 0.0

    def test_deterministic(self, terrain):
        again = build_terrain(SCENE_CFG)
        assert np.array_equal(again.mid.ys, terrain.mid.ys)

    def test_uneven_step_still_reaches_world_edge(self):
        from dataclasses import replace

        profile = build_terrain(replace(SCENE_CFG, terrain_step=7.0)).far
        assert profile.xs[-1] == 2400.0


class TestGroundSampler:
    def test_matches_near_profile(self, terrain):
        for x, y in terrain.near.points()[::37]:
            assert terrain.ground_y(x) == pytest.approx(y)

    def test_between_samples(self, terrain):
        near_cfg = terrain.near_layer
        assert terrain.ground_y(100.5) == pytest.approx(float(elevation(near_cfg, 100.5, 2400.0)))

    def test_stays_near_base(self, terrain):
        values = [terrain.ground_y(x) for x in range(0, 2400, 13)]
        assert min(values) >= 316 - 12 - 1e-9
        assert max(values) <= 316 + 12 + 1e-9


class TestVisiblePoints:
    def test_culls_to_view(self, terrain):
        points = terrain.far.visible_points(-350.0, 800.0)
        inner = points[1:-1]
        assert (inner[:, 0] >= 0.0).all() and (inner[:, 0] <= 800.0).all()
        # One extra sample on each side so the silhouette reaches the edges.
        assert points[0, 0] < 0.0
        assert points[-1, 0] > 800.0

    def test_empty_when_offscreen(self, terrain):
        assert terrain.far.visible_points(-5000.0, 800.0).shape == (0, 2)
