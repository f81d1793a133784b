"""Scroll camera with autoscroll and manual drivers, plus the view-window test."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .color import clamp


class Direction(Enum):
    NONE = 0
    LEFT = -1
    RIGHT = 1


@dataclass
class CameraState:
    position: float = 0.0


class Camera:
    """Horizontal scroll camera with an autoscroll and a manual driver."""

    def __init__(
        self,
        world_width: float,
        viewport_width: float,
        *,
        auto_speed: float,
        manual_speed: float,
    ) -> None:
        if world_width <= viewport_width:
            raise ValueError("World width must exceed viewport width")
        self._world_width = world_width
        self._viewport_width = viewport_width
        self._auto_speed = auto_speed
        self._manual_speed = manual_speed
        self._state = CameraState()

    @property
    def position(self) -> float:
        return self._state.position

    @property
    def max_position(self) -> float:
        return self._world_width - self._viewport_width

    @property
    def world_width(self) -> float:
        return self._world_width

    @property
    def viewport_width(self) -> float:
        return self._viewport_width

    def set_position(self, position: float) -> None:
        self._state.position = clamp(position, 0.0, self.max_position)

    def advance_auto(self) -> bool:
        """Scroll right by the autoscroll speed; returns ``True`` on a wrap."""

        previous = self._state.position
        self._state.position = (previous + self._auto_speed) % self.max_position
        return self._state.position < previous

    def advance_manual(self, direction: Direction) -> None:
        step = self._manual_speed * direction.value
        self._state.position = clamp(self._state.position + step, 0.0, self.max_position)

    def update(self, autoscroll_enabled: bool, direction: Direction) -> bool:
        if autoscroll_enabled:
            return self.advance_auto()
        self.advance_manual(direction)
        return False


def in_view(screen_x: float, view_width: float, margin: float) -> bool:
    """Whether a screen-space x lies within ``[-margin, view_width + margin]``."""

    return -margin <= screen_x <= view_width + margin


__all__ = ["Camera", "CameraState", "Direction", "in_view"]
