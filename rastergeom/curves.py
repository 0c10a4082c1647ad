"""Curve generation: cubic Bezier sampling and the Koch fractal."""

from __future__ import annotations

import math
from collections.abc import Sequence

Point = tuple[int, int]
FloatPoint = tuple[float, float]
Segment = tuple[Point, Point]


def cubic_bezier(control_points: Sequence[Point], step: float = 0.0005) -> list[FloatPoint]:
    """Sample the cubic Bezier curve of four control points for t in [0, 1).

    ``t`` starts at zero and is advanced by ``step`` while it stays below one.
    """
    if len(control_points) != 4:
        raise ValueError("a cubic Bezier curve needs exactly four control points")
    if step <= 0:
        raise ValueError("step must be positive")
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = control_points
    samples: list[FloatPoint] = []
    t = 0.0
    while t < 1.0:
        u = 1 - t
        b0 = u**3
        b1 = 3 * t * u**2
        b2 = 3 * t**2 * u
        b3 = t**3
        samples.append(
            (
                b0 * x0 + b1 * x1 + b2 * x2 + b3 * x3,
                b0 * y0 + b1 * y1 + b2 * y2 + b3 * y3,
            )
        )
        t += step
    return samples


def _segments(x: float, y: float, length: float, angle: float, iterations: int):
    if iterations > 0:
        length /= 3
        for turn in (0, 60, -60, 0):
            heading = angle + turn
            yield from _segments(x, y, length, heading, iterations - 1)
            x += length * math.cos(math.radians(heading))
            y += length * math.sin(math.radians(heading))
    else:
        rad = math.radians(angle)
        end = (
            int(x + length * math.cos(rad) + 0.5),
            int(y + length * math.sin(rad) + 0.5),
        )
        yield (int(x), int(y)), end


def koch_curve(
    start: tuple[float, float], length: float, angle: float, iterations: int
) -> list[Segment]:
    """Return the line segments of a Koch curve, in drawing order.

    ``angle`` is in degrees. With zero (or fewer) iterations a single straight
    segment is produced; each iteration replaces a segment with four.
    """
    x, y = start
    return list(_segments(float(x), float(y), float(length), float(angle), iterations))