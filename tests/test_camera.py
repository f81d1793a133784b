"""Tests for the autoscroll and manual camera drivers."""

import pytest

from nature_scroll.core.camera import Camera, Direction, in_view


@pytest.fixture
def camera():
    return Camera(2400.0, 800.0, auto_speed=0.5, manual_speed=3.0)


class TestAutoscroll:
    def test_loops_back_to_start(self, camera):
        steps = int(camera.max_position / 0.5)
        wraps = sum(camera.advance_auto() for _ in range(steps))
        assert camera.position == pytest.approx(0.0, abs=1e-9)
        assert wraps == 1

    def test_stays_inside_range(self, camera):
        for _ in range(7000):
            camera.advance_auto()
            assert 0.0 <= camera.position < camera.max_position

    def test_autoscroll_ignores_direction(self, camera):
        camera.update(True, Direction.LEFT)
        assert camera.position == 0.5


class TestManual:
    def test_sustained_right_input_clamps(self, camera):
        for _ in range(5000):
            camera.update(False, Direction.RIGHT)
            assert 0.0 <= camera.position <= camera.max_position
        assert camera.position == camera.max_position

    def test_sustained_left_input_clamps(self, camera):
        camera.set_position(900.0)
        for _ in range(5000):
            camera.update(False, Direction.LEFT)
        assert camera.position == 0.0

    def test_no_direction_holds_position(self, camera):
        camera.set_position(321.0)
        camera.update(False, Direction.NONE)
        assert camera.position == 321.0

    def test_manual_step_size(self, camera):
        camera.update(False, Direction.RIGHT)
        camera.update(False, Direction.RIGHT)
        assert camera.position == 6.0

    def test_seek_is_clamped(self, camera):
        camera.set_position(99999.0)
        assert camera.position == 1600.0
        camera.set_position(-10.0)
        assert camera.position == 0.0


class TestViewWindow:
    def test_in_view_margin(self):
        assert in_view(-60.0, 800.0, 60.0)
        assert not in_view(-61.0, 800.0, 60.0)
        assert in_view(860.0, 800.0, 60.0)
        assert not in_view(861.0, 800.0, 60.0)

    def test_rejects_world_narrower_than_view(self):
        with pytest.raises(ValueError):
            Camera(800.0, 800.0, auto_speed=0.5, manual_speed=3.0)
