"""Wall-clock helpers for the interactive window."""
from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt


@dataclass
class FpsMeter:
    """Rolling average of frame durations."""

    window: int = 60
    _samples: deque = field(default_factory=deque, repr=False)

    def add(self, dt: float) -> None:
        if dt <= 0.0:
            return
        self._samples.append(dt)
        while len(self._samples) > max(1, self.window):
            self._samples.popleft()

    @property
    def fps(self) -> float:
        if not self._samples:
            return 0.0
        return len(self._samples) / sum(self._samples)


__all__ = ["FpsMeter", "FrameTimer"]
