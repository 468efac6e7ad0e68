"""Test fixtures for inkpath tests."""

from inkpath.models import Point


def make_points(coords, t0=0.0, dt=10.0, pressure=None):
    """Build Points from (x, y) pairs with evenly spaced timestamps."""
    return [
        Point(x=x, y=y, t=t0 + i * dt, pressure=pressure)
        for i, (x, y) in enumerate(coords)
    ]


def near_straight_line(n=60, jitter=0.0002):
    """n points across the unit square, alternating slightly above and below y=0.5."""
    coords = []
    for i in range(n):
        x = 0.05 + 0.9 * i / (n - 1)
        y = 0.5 + (jitter if i % 2 else -jitter)
        coords.append((x, y))
    return make_points(coords)


def stroke_events(coords, t0=0.0, dt=10.0):
    """Pointer events (device pixels) for one down-move-up gesture."""
    events = []
    for i, (x, y) in enumerate(coords):
        events.append({
            "type": "down" if i == 0 else "move",
            "x": x,
            "y": y,
            "t": t0 + i * dt,
        })
    events.append({"type": "up"})
    return events


def draw(session, coords, t0=0.0, dt=10.0):
    """Draw and commit one stroke of normalized coords on a DrawingSession."""
    points = make_points(coords, t0=t0, dt=dt)
    session.start(points[0])
    for point in points[1:]:
        session.extend(point)
    return session.end()
