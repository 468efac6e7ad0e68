"""Stroke cleanup stages for inkpath.

Operates on sequences of normalized Point models (x, y, t, pressure).
All stages return new Point lists without modifying their input.

The per-stroke order is fixed: noise filter, smoothing, then
Douglas-Peucker simplification for long strokes only.
"""

import logging
from typing import List, Sequence

from ..models import Point, Stroke
from .config import CleanupConfig
from .geometry import distance, perpendicular_distance

logger = logging.getLogger("inkpath.capture.cleanup")

DEFAULT_MIN_DISTANCE = 0.002
DEFAULT_TOLERANCE = 0.001
DEFAULT_SIMPLIFY_THRESHOLD = 50


def filter_noise(points: Sequence[Point], min_distance: float = DEFAULT_MIN_DISTANCE) -> List[Point]:
    """Drop micro-movements.

    Keeps the first point, then keeps each later point only if it is at
    least min_distance away from the last point kept.
    """
    if not points:
        return []

    filtered = [points[0]]
    for point in points[1:]:
        if distance(filtered[-1], point) >= min_distance:
            filtered.append(point)
    return filtered


def smooth(points: Sequence[Point]) -> List[Point]:
    """Apply one pass of 1-2-1 weighted averaging to stroke points.

    Smooths x, y of interior points while preserving t and pressure.
    First and last points are passed through unchanged.
    """
    if len(points) < 3:
        return list(points)

    result = [points[0]]
    for i in range(1, len(points) - 1):
        prev, cur, nxt = points[i - 1], points[i], points[i + 1]
        result.append(Point(
            x=0.25 * prev.x + 0.5 * cur.x + 0.25 * nxt.x,
            y=0.25 * prev.y + 0.5 * cur.y + 0.25 * nxt.y,
            t=cur.t,
            pressure=cur.pressure,
        ))
    result.append(points[-1])
    return result


def simplify(points: Sequence[Point], tolerance: float = DEFAULT_TOLERANCE) -> List[Point]:
    """Apply Ramer-Douglas-Peucker simplification.

    Removes points that deviate less than tolerance from the chord of the
    segment they sit in. Endpoints are always kept. Uses an explicit stack
    of (start, end) index ranges instead of recursion so long strokes
    cannot exhaust the interpreter stack.
    """
    if len(points) <= 2:
        return list(points)

    keep = [False] * len(points)
    keep[0] = keep[-1] = True
    stack = [(0, len(points) - 1)]

    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        max_dist = 0.0
        max_idx = start
        for i in range(start + 1, end):
            d = perpendicular_distance(points[i], points[start], points[end])
            if d > max_dist:
                max_dist = d
                max_idx = i

        if max_dist > tolerance:
            keep[max_idx] = True
            stack.append((max_idx, end))
            stack.append((start, max_idx))

    return [p for p, kept in zip(points, keep) if kept]


def process_points(points: Sequence[Point], config: CleanupConfig) -> List[Point]:
    """Apply all configured cleanup to a single stroke's points."""
    result = filter_noise(points, config.min_distance)

    if config.smoothing_enabled:
        result = smooth(result)

    if config.simplify_enabled and len(result) > config.simplify_threshold:
        before = len(result)
        result = simplify(result, config.tolerance)
        logger.debug("Simplified stroke from %d to %d points", before, len(result))

    return result


def process_stroke(stroke: Stroke, config: CleanupConfig) -> Stroke:
    """Return a copy of stroke with its points run through the cleanup pipeline."""
    points = process_points(stroke.points, config)
    return stroke.model_copy(update={"points": tuple(points)})
