"""Coordinate normalization between device pixels and the unit square."""

from typing import Tuple

from ..models import CanvasSize, Point, PointerSample


def _check_dimensions(width: float, height: float):
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")


def normalize(px: float, py: float, width: float, height: float) -> Tuple[float, float]:
    """Map device pixels to [0, 1] space.

    Out-of-surface input saturates to the boundary instead of being rejected.
    """
    _check_dimensions(width, height)
    return (
        max(0.0, min(1.0, px / width)),
        max(0.0, min(1.0, py / height)),
    )


def denormalize(nx: float, ny: float, width: float, height: float) -> Tuple[float, float]:
    """Map [0, 1] space back to device pixels. No clamping."""
    _check_dimensions(width, height)
    return nx * width, ny * height


def point_from_sample(sample: PointerSample, canvas_size: CanvasSize) -> Point:
    """Build a normalized Point from a raw device sample.

    Non-positive pressure means the device did not report any, so it is
    stored as absent.
    """
    x, y = normalize(sample.x, sample.y, canvas_size.w, canvas_size.h)
    pressure = sample.pressure
    if pressure is not None and pressure <= 0:
        pressure = None
    return Point(x=x, y=y, t=sample.t, pressure=pressure)
