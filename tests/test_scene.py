"""Tests for scene construction and the per-frame tick."""

from dataclasses import replace

import pytest

from nature_scroll.core.camera import Direction
from nature_scroll.core.config import SCENE_CFG
from nature_scroll.core.model import TickInputs, initialize_scene, tick
from nature_scroll.data.scenery import TREE_XS


class TestInitialize:
    def test_initial_state(self, scene):
        assert scene.frame == 0
        assert scene.camera.position == 0.0
        assert scene.tod == 0.0
        assert len(scene.particles) == SCENE_CFG.particle_count
        assert len(scene.symbols) == 4
        assert len(scene.stars) == SCENE_CFG.star_count
        assert [t.x for t in scene.trees] == list(TREE_XS)

    def test_same_seed_same_scene(self):
        a = initialize_scene(2400, 800, 400, seed=99)
        b = initialize_scene(2400, 800, 400, seed=99)
        assert list(a.particles) == list(b.particles)
        assert a.stars == b.stars
        assert a.trees == b.trees

    def test_dimensions_flow_into_config(self):
        scene = initialize_scene(3000, 640, 360, seed=1)
        assert scene.cfg.world_width == 3000.0
        assert scene.camera.max_position == 2360.0
        assert all(star.y <= 360 * SCENE_CFG.star_sky_fraction for star in scene.stars)

    @pytest.mark.parametrize(
        "dims",
        [(800, 800, 400), (600, 800, 400), (2400, 800, 0), (2400, 0, 400)],
    )
    def test_invalid_dimensions_raise(self, dims):
        with pytest.raises(ValueError):
            initialize_scene(*dims)

    def test_flat_noise_sizes(self, flat_noise_scene):
        for tree in flat_noise_scene.trees:
            assert tree.height == pytest.approx(77.0)
            assert tree.width == pytest.approx(55.0)
        assert (flat_noise_scene.grass.heights == 12.0).all()

    def test_trees_sit_on_ground(self, scene):
        for tree in scene.trees:
            assert tree.ground_y == pytest.approx(scene.terrain.ground_y(tree.x))

    def test_missing_terrain_layer_raises(self):
        cfg = replace(SCENE_CFG, terrain_layers=SCENE_CFG.terrain_layers[:2])
        with pytest.raises(ValueError):
            initialize_scene(2400, 800, 400, cfg=cfg)


class TestTick:
    def test_autoscroll_tick(self, scene):
        tick(scene, TickInputs(autoscroll_enabled=True))
        assert scene.frame == 1
        assert scene.camera.position == 0.5
        assert 0.0 <= scene.tod < 0.01
        assert scene.wrapped is False

    def test_manual_tick(self, scene):
        tick(scene, TickInputs(autoscroll_enabled=False, direction=Direction.RIGHT))
        assert scene.camera.position == 3.0
        tick(scene, TickInputs(autoscroll_enabled=False, direction=Direction.LEFT))
        tick(scene, TickInputs(autoscroll_enabled=False, direction=Direction.LEFT))
        assert scene.camera.position == 0.0

    def test_wrap_is_reported(self, scene):
        scene.camera.set_position(1599.8)
        tick(scene, TickInputs(autoscroll_enabled=True))
        assert scene.wrapped is True
        assert scene.camera.position == pytest.approx(0.3)
        assert scene.tod < 0.01
        tick(scene, TickInputs(autoscroll_enabled=True))
        assert scene.wrapped is False

    def test_tod_follows_camera(self, scene):
        scene.camera.set_position(scene.camera.max_position)
        tick(scene, TickInputs(autoscroll_enabled=False))
        assert scene.tod == 1.0
        assert scene.night_factor == 1.0

    def test_tod_is_pure_function_of_position(self, scene):
        other = initialize_scene(2400, 800, 400, seed=5)
        scene.camera.set_position(700.0)
        other.camera.set_position(700.0)
        for _ in range(30):
            tick(scene, TickInputs(autoscroll_enabled=False))
        tick(other, TickInputs(autoscroll_enabled=False))
        assert scene.tod == other.tod
