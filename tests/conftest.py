"""Shared fixtures; pygame runs headless."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from nature_scroll.core.model import initialize_scene


class ConstantNoise:
    def __init__(self, value: float = 0.5) -> None:
        self.value = value

    def __call__(self, x: float) -> float:
        return self.value


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def scene():
    return initialize_scene(2400, 800, 400, seed=1234)


@pytest.fixture
def flat_noise_scene():
    return initialize_scene(2400, 800, 400, seed=1234, noise=ConstantNoise(0.5))


@pytest.fixture
def surface():
    return pygame.Surface((800, 400))
