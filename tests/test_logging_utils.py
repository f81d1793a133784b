"""Tests for run recording."""

import csv
import json

from nature_scroll.core.logging_utils import RunLogger, SceneRecorder


def read_rows(path):
    with path.open(newline="") as fh:
        return list(csv.reader(fh))


class TestRunLogger:
    def test_creates_run_layout(self, tmp_path):
        logger = RunLogger(tmp_path, run_id="demo")
        logger.close()
        assert logger.run_dir == tmp_path / "demo"
        assert read_rows(logger.timeseries_path) == [RunLogger.TIMESERIES_HEADER]
        assert read_rows(logger.events_path) == [RunLogger.EVENTS_HEADER]
        assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo"

    def test_run_ids_are_unique(self, tmp_path):
        first = RunLogger(tmp_path, run_id="demo")
        second = RunLogger(tmp_path, run_id="demo")
        first.close()
        second.close()
        assert second.run_id == "demo_1"
        assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo_1"

    def test_default_run_id_names_the_scroll(self, tmp_path):
        with RunLogger(tmp_path) as logger:
            assert logger.run_id.endswith("_scroll")

    def test_frame_row_format(self, tmp_path):
        logger = RunLogger(tmp_path, run_id="buffered")
        logger.log_frame(10, 12.5, 0.25, 0.0, ["sun", "leaf"])
        logger.close()
        rows = read_rows(logger.timeseries_path)
        assert rows[1] == ["10", "12.5", "0.25", "0", "sun|leaf"]

    def test_flush_threshold(self, tmp_path):
        logger = RunLogger(tmp_path, run_id="flush", timeseries_flush_threshold=2)
        logger.log_frame(1, 0.5, 0.0, 0.0, [])
        logger.log_frame(2, 1.0, 0.0, 0.0, [])
        assert len(read_rows(logger.timeseries_path)) == 3
        logger.close()

    def test_event_details_survive_csv(self, tmp_path):
        with RunLogger(tmp_path, run_id="events") as logger:
            logger.log_event(7, "autoscroll_toggled", 3.5, details={"enabled": False})
            logger.log_event(8, "symbol_revealed", 4.0, symbol="sun")
        rows = read_rows(logger.events_path)
        assert rows[1][:4] == ["7", "autoscroll_toggled", "", "3.5"]
        assert json.loads(rows[1][4]) == {"enabled": False}
        assert rows[2] == ["8", "symbol_revealed", "sun", "4", ""]

    def test_write_meta(self, tmp_path):
        with RunLogger(tmp_path, run_id="meta") as logger:
            logger.write_meta({"seed": 4, "world_width": 2400.0})
        meta = json.loads(logger.meta_path.read_text(encoding="utf-8"))
        assert meta == {"seed": 4, "world_width": 2400.0}


class TestSceneRecorder:
    def _events(self, logger):
        return [row[1:3] for row in read_rows(logger.events_path)[1:]]

    def test_symbol_reveal_and_hide(self, tmp_path, scene):
        logger = RunLogger(tmp_path, run_id="symbols")
        recorder = SceneRecorder(logger)
        recorder.record(scene, True)

        scene.camera.set_position(1000.0)
        scene.frame = 1
        recorder.record(scene, True)
        logger.close()

        assert self._events(logger) == [
            ["symbol_revealed", "sun"],
            ["symbol_revealed", "leaf"],
            ["symbol_revealed", "star"],
            ["symbol_hidden", "sun"],
        ]

    def test_wrap_and_toggle_events(self, tmp_path, scene):
        logger = RunLogger(tmp_path, run_id="wrap")
        recorder = SceneRecorder(logger)
        recorder.record(scene, True)

        scene.frame = 1
        scene.wrapped = True
        recorder.record(scene, False)
        logger.close()

        events = self._events(logger)
        assert ["loop_wrap", ""] in events
        assert ["autoscroll_toggled", ""] in events
        toggle = [row for row in read_rows(logger.events_path) if row[1] == "autoscroll_toggled"]
        assert json.loads(toggle[0][4]) == {"enabled": False}

    def test_samples_every_nth_frame(self, tmp_path, scene):
        logger = RunLogger(tmp_path, run_id="samples")
        recorder = SceneRecorder(logger, sample_every=5)
        for frame in range(1, 11):
            scene.frame = frame
            recorder.record(scene, True)
        logger.close()
        rows = read_rows(logger.timeseries_path)[1:]
        assert [row[0] for row in rows] == ["5", "10"]
        assert rows[0][4] == "sun"
