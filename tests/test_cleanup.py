"""Tests for stroke cleanup algorithms."""

import random

import pytest

from inkpath.capture import (
    CleanupConfig,
    distance,
    filter_noise,
    perpendicular_distance,
    process_points,
    simplify,
    smooth,
)
from inkpath.models import Point
from tests.fixtures import make_points, near_straight_line


def _recursive_rdp(points, tolerance):
    """Textbook recursive Douglas-Peucker, used as a reference."""
    if len(points) < 3:
        return list(points)

    max_dist = 0.0
    max_idx = 0
    for i in range(1, len(points) - 1):
        d = perpendicular_distance(points[i], points[0], points[-1])
        if d > max_dist:
            max_dist = d
            max_idx = i

    if max_dist > tolerance:
        left = _recursive_rdp(points[:max_idx + 1], tolerance)
        right = _recursive_rdp(points[max_idx:], tolerance)
        return left[:-1] + right
    return [points[0], points[-1]]


def _random_walk(n, seed=7, step=0.01):
    rng = random.Random(seed)
    x, y = 0.5, 0.5
    coords = []
    for _ in range(n):
        x += rng.uniform(-step, step)
        y += rng.uniform(-step, step)
        coords.append((x, y))
    return make_points(coords)


def test_distance():
    a = Point(x=0.0, y=0.0, t=0)
    b = Point(x=0.3, y=0.4, t=1)
    assert distance(a, b) == pytest.approx(0.5)


def test_perpendicular_distance_degenerate_chord():
    """A zero-length chord falls back to point-to-point distance."""
    p = Point(x=0.3, y=0.4, t=0)
    anchor = Point(x=0.0, y=0.0, t=0)
    assert perpendicular_distance(p, anchor, anchor) == pytest.approx(0.5)


def test_perpendicular_distance_to_chord():
    start = Point(x=0.0, y=0.5, t=0)
    end = Point(x=1.0, y=0.5, t=1)
    assert perpendicular_distance(Point(x=0.5, y=0.6, t=0), start, end) == pytest.approx(0.1)


def test_filter_noise_drops_close_points():
    points = make_points([(0.5, 0.5), (0.51, 0.50), (0.5101, 0.5001), (0.52, 0.5)])
    filtered = filter_noise(points)

    assert [p.t for p in filtered] == [0, 10, 30]
    assert filtered[0] == points[0]


def test_filter_noise_measures_from_last_kept_point():
    """Many tiny steps still add up to a kept point."""
    coords = [(0.5 + 0.0006 * i, 0.5) for i in range(10)]
    filtered = filter_noise(make_points(coords), min_distance=0.002)

    # Kept every 4th point, 0.0024 apart
    assert [p.t for p in filtered] == [0, 40, 80]


def test_filter_noise_is_idempotent():
    points = _random_walk(200, step=0.003)
    once = filter_noise(points)
    twice = filter_noise(once)

    assert len(once) <= len(points)
    assert twice == once


def test_filter_noise_short_inputs():
    assert filter_noise([]) == []
    single = make_points([(0.2, 0.2)])
    assert filter_noise(single) == single


def test_smooth_weights_interior_points():
    points = make_points([(0.0, 0.0), (0.5, 1.0), (1.0, 0.0)], pressure=0.7)
    smoothed = smooth(points)

    assert len(smoothed) == 3
    assert smoothed[1].x == pytest.approx(0.5)
    assert smoothed[1].y == pytest.approx(0.5)
    # Only geometry changes
    assert smoothed[1].t == points[1].t
    assert smoothed[1].pressure == 0.7


def test_smooth_preserves_endpoints_and_length():
    points = _random_walk(50)
    smoothed = smooth(points)

    assert len(smoothed) == len(points)
    assert smoothed[0] == points[0]
    assert smoothed[-1] == points[-1]


def test_smooth_is_single_pass():
    points = make_points([(0.0, 0.0), (0.0, 1.0), (0.0, 0.0), (0.0, 1.0), (0.0, 0.0)])
    smoothed = smooth(points)

    # Each interior point uses the original neighbours, not smoothed ones
    assert [p.y for p in smoothed] == pytest.approx([0.0, 0.5, 0.5, 0.5, 0.0])


def test_smooth_short_strokes_unchanged():
    points = make_points([(0.1, 0.1), (0.9, 0.9)])
    assert smooth(points) == points


def test_simplify_collapses_near_straight_line():
    points = near_straight_line(60)
    simplified = simplify(points, tolerance=0.001)

    assert len(simplified) == 2
    assert simplified[0] == points[0]
    assert simplified[-1] == points[-1]


def test_simplify_keeps_outlier():
    points = make_points([(0.0, 0.0), (0.25, 0.001), (0.5, 0.05), (0.75, 0.001), (1.0, 0.0)])

    simplified = simplify(points, tolerance=0.03)
    assert points[2] in simplified
    assert len(simplified) == 3

    simplified = simplify(points, tolerance=0.5)
    assert len(simplified) == 2


def test_simplify_zero_tolerance_keeps_curved_path():
    coords = [(i / 20, (i / 20) ** 2) for i in range(21)]
    points = make_points(coords)
    assert simplify(points, tolerance=0.0) == points


def test_simplify_matches_recursive_reference():
    points = _random_walk(300)
    for tolerance in (0.0005, 0.002, 0.01):
        assert simplify(points, tolerance) == _recursive_rdp(points, tolerance)


def test_simplify_handles_long_strokes_without_recursion():
    # Zig-zag: each split peels off about one point, so depth grows with length
    coords = [(i / 1200, (i % 2) * 0.5 + i / 10000) for i in range(1200)]
    points = make_points(coords, dt=1)
    simplified = simplify(points, tolerance=0.0001)

    assert simplified[0] == points[0]
    assert simplified[-1] == points[-1]
    assert len(simplified) <= len(points)


def test_simplify_short_inputs():
    single = make_points([(0.5, 0.5)])
    pair = make_points([(0.1, 0.1), (0.9, 0.9)])
    assert simplify(single) == single
    assert simplify(pair) == pair


def test_process_points_only_simplifies_long_strokes():
    config = CleanupConfig()

    short = near_straight_line(40)
    assert len(process_points(short, config)) == 40

    long = near_straight_line(60)
    assert len(process_points(long, config)) == 2


def test_process_points_respects_toggles():
    config = CleanupConfig(smoothing_enabled=False, simplify_enabled=False)
    points = near_straight_line(60)
    assert process_points(points, config) == points


def test_process_points_order_is_filter_smooth_simplify():
    points = _random_walk(120, step=0.004)
    config = CleanupConfig()

    expected = smooth(filter_noise(points, config.min_distance))
    if len(expected) > config.simplify_threshold:
        expected = simplify(expected, config.tolerance)
    assert process_points(points, config) == expected


def test_cleanup_does_not_mutate_input():
    points = _random_walk(80)
    original = list(points)
    process_points(points, CleanupConfig())
    assert points == original
