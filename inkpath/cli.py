"""inkpath replay CLI - run recorded pointer events through the capture pipeline."""

import argparse
import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .capture import CaptureConfig, DrawingSession
from .models import CanvasSize, PointerEvent, PointerEventBatch

logger = logging.getLogger("inkpath.cli")


def setup_logging(config: CaptureConfig, verbose: bool = False):
    """Configure console logging, plus a rotating file if one is configured."""
    root_logger = logging.getLogger("inkpath")
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Replace handlers from an earlier call in the same process
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.logging.file:
        log_dir = os.path.dirname(config.logging.file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            config.logging.file,
            maxBytes=config.logging.max_size_mb * 1024 * 1024,
            backupCount=config.logging.backup_count,
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # stdout may carry the session record, so log to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def load_events(path: str) -> List[PointerEvent]:
    """Read pointer events from a JSON file.

    Accepts either a bare list of events or an object with an "events" key.
    """
    with open(path, "r") as f:
        data = json.load(f)
    if isinstance(data, list):
        data = {"events": data}
    return PointerEventBatch.model_validate(data).events


def replay(events: List[PointerEvent], session: DrawingSession) -> int:
    """Feed events to a session in order. Returns the number of commits."""
    commits = 0
    for event in events:
        if session.apply_event(event) is not None:
            commits += 1

    if session.is_drawing:
        logger.warning("Input ended mid-stroke; the open stroke was not committed")
    return commits


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Replay recorded pointer events and print the session record",
    )
    parser.add_argument("events", help="JSON file with pointer events in device pixels")
    parser.add_argument(
        "-c", "--config",
        help="Path to capture config YAML",
        default=None,
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the session record here instead of stdout",
        default=None,
    )
    parser.add_argument("--width", type=float, default=None, help="Surface width in pixels")
    parser.add_argument("--height", type=float, default=None, help="Surface height in pixels")
    parser.add_argument("--user-id", default="", help="User id stamped on the record")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    config = CaptureConfig.load(args.config)
    setup_logging(config, verbose=args.verbose)
    logger.info("inkpath v%s replaying %s", __version__, args.events)

    try:
        events = load_events(args.events)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Could not read events from %s: %s", args.events, e)
        return 1

    canvas = CanvasSize(
        w=args.width or config.canvas.width,
        h=args.height or config.canvas.height,
    )
    session = DrawingSession(canvas_size=canvas, user_id=args.user_id, config=config)
    commits = replay(events, session)
    logger.info("Replayed %d events into %d strokes", len(events), commits)

    payload = json.dumps(session.get_session_data().to_payload(), indent=2)
    if args.output:
        Path(args.output).write_text(payload)
        logger.info("Wrote session record to %s", args.output)
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
