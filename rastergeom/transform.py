"""Two-dimensional polygon transformations: translation, rotation, scaling, reflection."""

from __future__ import annotations

import math
from collections.abc import Iterable

Point = tuple[int, int]

# Degrees are converted with this approximation of pi, so rotations are
# reproducible to the pixel with the original drawings.
_PI_APPROX = 3.14


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def translate(points: Iterable[Point], tx: int, ty: int) -> list[Point]:
    """Shift every point by (tx, ty)."""
    return [(x + tx, y + ty) for x, y in points]


def rotate(points: Iterable[Point], pivot: Point, degrees: float) -> list[Point]:
    """Rotate points anticlockwise by ``degrees`` about ``pivot``, rounding to pixels."""
    cx, cy = pivot
    theta = degrees * _PI_APPROX / 180
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return [
        (
            _round_half_up((x - cx) * cos_t - (y - cy) * sin_t + cx),
            _round_half_up((x - cx) * sin_t + (y - cy) * cos_t + cy),
        )
        for x, y in points
    ]


def scale(points: Iterable[Point], sx: int, sy: int) -> list[Point]:
    """Scale points about the origin by ``sx`` horizontally and ``sy`` vertically."""
    return [(x * sx, y * sy) for x, y in points]


def reflect(points: Iterable[Point], axis: str) -> list[Point]:
    """Mirror points in the x axis (``"x"``) or the y axis (``"y"``), case-insensitive."""
    key = axis.lower() if isinstance(axis, str) else axis
    if key == "x":
        return [(x, -y) for x, y in points]
    if key == "y":
        return [(-x, y) for x, y in points]
    raise ValueError(f"unknown reflection axis: {axis!r}")