"""Run recording for the nature scroll scene."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from .symbols import visible_symbols

if TYPE_CHECKING:  # pragma: no cover
    from .model import SceneState


class RunLogger:
    """Buffered logger that stores per-frame scene data to CSV files."""

    TIMESERIES_HEADER = [
        "frame",
        "cam_x",
        "tod",
        "night_factor",
        "visible_symbols",
    ]
    EVENTS_HEADER = ["frame", "type", "symbol", "cam_x", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 20,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        def make_candidate(suffix: Optional[int] = None) -> str:
            base = run_id or f"{timestamp}_scroll"
            if suffix is None:
                return base
            if run_id:
                return f"{run_id}_{suffix}"
            return f"{base}_{suffix:02d}"

        candidate_id = make_candidate()
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = make_candidate(suffix)
            suffix += 1

        self.run_id = candidate_id
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.run_dir / "timeseries.csv"
        self.events_path = self.run_dir / "events.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="")
        self._ts_file.write(",".join(self.TIMESERIES_HEADER) + "\n")
        self._ev_file = self.events_path.open("w", newline="")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")

        self._ts_buffer: list[str] = []
        self._ev_buffer: list[str] = []
        self._ts_threshold = max(1, timeseries_flush_threshold)
        self._ev_threshold = max(1, events_flush_threshold)

        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_frame(
        self,
        frame: int,
        cam_x: float,
        tod: float,
        night_factor: float,
        visible: Sequence[str],
    ) -> None:
        row = [
            str(frame),
            self._format_value(cam_x),
            self._format_value(tod),
            self._format_value(night_factor),
            "|".join(visible),
        ]
        self._ts_buffer.append(",".join(row))
        if len(self._ts_buffer) >= self._ts_threshold:
            self._flush_timeseries()

    def log_event(
        self,
        frame: int,
        event_type: str,
        cam_x: float,
        *,
        symbol: str = "",
        details: dict | None = None,
    ) -> None:
        details_text = json.dumps(details, sort_keys=True) if details else ""
        if details_text:
            details_text = '"' + details_text.replace('"', '""') + '"'
        row = [str(frame), event_type, symbol, self._format_value(cam_x), details_text]
        self._ev_buffer.append(",".join(row))
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def close(self) -> None:
        self._flush_timeseries()
        self._flush_events()
        self._ts_file.close()
        self._ev_file.close()

    def _flush_timeseries(self) -> None:
        if self._ts_buffer:
            self._ts_file.write("\n".join(self._ts_buffer) + "\n")
            self._ts_file.flush()
            self._ts_buffer.clear()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_file.write("\n".join(self._ev_buffer) + "\n")
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: float) -> str:
        return f"{value:.10g}"

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


class SceneRecorder:
    """Feeds a :class:`RunLogger` from scene state once per tick."""

    def __init__(self, logger: RunLogger, *, sample_every: int = 10) -> None:
        self.logger = logger
        self._sample_every = max(1, sample_every)
        self._visible: set[str] = set()
        self._autoscroll: bool | None = None

    def record(self, scene: SceneState, autoscroll_enabled: bool) -> None:
        cfg = scene.cfg
        cam_x = scene.camera.position
        visible = {
            symbol.kind.value
            for symbol in visible_symbols(
                scene.symbols, cam_x, cfg.viewport_width, cfg.symbol_cull_margin
            )
        }
        for name in sorted(visible - self._visible):
            self.logger.log_event(scene.frame, "symbol_revealed", cam_x, symbol=name)
        for name in sorted(self._visible - visible):
            self.logger.log_event(scene.frame, "symbol_hidden", cam_x, symbol=name)
        self._visible = visible

        if scene.wrapped:
            self.logger.log_event(scene.frame, "loop_wrap", cam_x)
        if self._autoscroll is not None and autoscroll_enabled != self._autoscroll:
            self.logger.log_event(
                scene.frame,
                "autoscroll_toggled",
                cam_x,
                details={"enabled": autoscroll_enabled},
            )
        self._autoscroll = autoscroll_enabled

        if scene.frame % self._sample_every == 0:
            self.logger.log_frame(
                scene.frame, cam_x, scene.tod, scene.night_factor, sorted(visible)
            )


__all__ = ["RunLogger", "SceneRecorder"]
