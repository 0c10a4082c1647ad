"""Midpoint (Bresenham) circle rasterisation using eight-way symmetry."""

from __future__ import annotations

Point = tuple[int, int]

DEFAULT_CENTER: Point = (320, 240)


def eight_way(x: int, y: int, center: Point = DEFAULT_CENTER) -> list[Point]:
    """Return the eight symmetric points of (x, y) around ``center``."""
    cx, cy = center
    return [
        (x + cx, y + cy),
        (y + cx, x + cy),
        (y + cx, -x + cy),
        (x + cx, -y + cy),
        (-x + cx, -y + cy),
        (-y + cx, -x + cy),
        (-y + cx, x + cy),
        (-x + cx, y + cy),
    ]


def bresenham_circle(radius: int, center: Point = DEFAULT_CENTER) -> list[Point]:
    """Rasterise a circle of ``radius`` around ``center``.

    Points are returned in plotting order, eight per step of the octant walk.
    At least one step is always plotted, so a radius of zero yields the
    centre point eight times.
    """
    decision = 3.0 - 2 * radius
    x, y = 0, radius
    points: list[Point] = []
    while True:
        points.extend(eight_way(x, y, center))
        if decision < 0:
            decision += 4 * x + 6
        else:
            decision += 4 * (x - y) + 10
            y -= 1
        x += 1
        if not x < y:
            break
    return points