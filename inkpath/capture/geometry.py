"""Distance math shared by the cleanup stages."""

import math

from ..models import Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Calculate distance from point to the segment line_start-line_end.

    The projection is clamped to the segment. A zero-length segment falls
    back to plain point-to-point distance.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return distance(point, line_start)

    t = max(0, min(1, ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / length_sq))
    proj_x = line_start.x + t * dx
    proj_y = line_start.y + t * dy
    return math.hypot(point.x - proj_x, point.y - proj_y)
