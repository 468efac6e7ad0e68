"""Tests for the replay CLI."""

import json
import logging
import logging.handlers

import pytest

from inkpath.cli import load_events, main, replay, setup_logging
from inkpath.capture import CaptureConfig, DrawingSession
from inkpath.models import CanvasSize
from tests.fixtures import stroke_events


@pytest.fixture(autouse=True)
def restore_log_handlers():
    """main() installs handlers on the inkpath logger; drop them afterwards."""
    inkpath_logger = logging.getLogger("inkpath")
    handlers = list(inkpath_logger.handlers)
    level = inkpath_logger.level
    yield
    inkpath_logger.handlers = handlers
    inkpath_logger.setLevel(level)


@pytest.fixture
def events_file(tmp_path):
    events = stroke_events([(100, 100), (200, 150), (300, 300)])
    events += stroke_events([(400, 400), (400, 600)], t0=1000)
    path = tmp_path / "events.json"
    path.write_text(json.dumps(events))
    return path


def test_load_events_accepts_list_and_object(tmp_path, events_file):
    events = load_events(str(events_file))
    assert len(events) == 7

    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"events": json.loads(events_file.read_text())}))
    assert load_events(str(wrapped)) == events


def test_replay_counts_commits(events_file):
    session = DrawingSession(canvas_size=CanvasSize(w=1000, h=1000))
    assert replay(load_events(str(events_file)), session) == 2
    assert len(session.strokes) == 2


def test_replay_leaves_unfinished_stroke_open(events_file):
    session = DrawingSession(canvas_size=CanvasSize(w=1000, h=1000))
    events = load_events(str(events_file))[:-1]

    assert replay(events, session) == 1
    assert session.is_drawing


def test_main_writes_session_record(tmp_path, events_file):
    out = tmp_path / "record.json"
    code = main([
        str(events_file),
        "-o", str(out),
        "--width", "1000",
        "--height", "1000",
        "--user-id", "user_7",
    ])
    assert code == 0

    record = json.loads(out.read_text())
    assert record["userId"] == "user_7"
    assert record["canvasSize"] == {"w": 1000, "h": 1000}
    assert len(record["strokes"]) == 2
    assert record["strokes"][1]["points"][-1] == {"x": 0.4, "y": 0.6, "t": 1010}


def test_main_uses_config_file(tmp_path, events_file):
    config = tmp_path / "config.yaml"
    config.write_text("canvas:\n  width: 500\n  height: 500\ncleanup:\n  min_distance: 0.5\n")
    out = tmp_path / "record.json"

    assert main([str(events_file), "-c", str(config), "-o", str(out)]) == 0

    record = json.loads(out.read_text())
    assert record["canvasSize"] == {"w": 500, "h": 500}
    # Coarse noise threshold: (0.4, 0.3) and (0.8, 1.0) are dropped
    assert [len(s["points"]) for s in record["strokes"]] == [2, 1]


def test_main_rejects_unreadable_input(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("[{\"type\": \"teleport\"}]")

    assert main([str(bad)]) == 1
    assert main([str(tmp_path / "missing.json")]) == 1


def test_setup_logging_does_not_stack_handlers(tmp_path):
    config = CaptureConfig()
    config.logging.file = str(tmp_path / "logs" / "replay.log")

    setup_logging(config)
    setup_logging(config)

    handlers = logging.getLogger("inkpath").handlers
    assert len(handlers) == 2
    assert sum(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers) == 1


def test_repeated_main_logs_once(tmp_path, events_file, capsys):
    out = tmp_path / "record.json"
    main([str(events_file), "-o", str(out)])
    capsys.readouterr()

    main([str(events_file), "-o", str(out)])
    err = capsys.readouterr().err
    assert err.count("Wrote session record") == 1
