"""Tests for the screen-fixed star field."""

import random

import pytest

from nature_scroll.core.sky import generate_stars, star_visibility, twinkle


@pytest.fixture
def stars():
    return generate_stars(
        90,
        size=(800, 400),
        sky_fraction=0.62,
        twinkle_rate=(0.03, 0.09),
        rng=random.Random(21),
    )


def test_stars_stay_in_upper_sky(stars):
    assert len(stars) == 90
    for star in stars:
        assert 0.0 <= star.x <= 800.0
        assert 0.0 <= star.y <= 400 * 0.62
        assert 120 <= star.brightness <= 255


def test_visibility_window():
    assert star_visibility(0.0) == 0.0
    assert star_visibility(0.32) == 0.0
    assert star_visibility(0.52) == pytest.approx(0.5)
    assert star_visibility(0.72) == 1.0
    assert star_visibility(1.0) == 1.0


def test_twinkle_range(stars):
    for star in stars[:10]:
        values = [twinkle(star, frame) for frame in range(400)]
        assert min(values) >= 0.55 - 1e-9
        assert max(values) <= 1.0 + 1e-9
