"""Polygon clipping against one edge of a rectangular window at a time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

Point = tuple[int, int]


class Edge(Enum):
    """Window edges, numbered as in the clipping menu."""

    LEFT = 1
    RIGHT = 2
    TOP = 3
    BOTTOM = 4


@dataclass(frozen=True)
class ClipWindow:
    """An axis-aligned clipping rectangle."""

    xmin: int = 200
    xmax: int = 500
    ymin: int = 100
    ymax: int = 350


def _edges(polygon: Sequence[Point]):
    return zip(polygon, [*polygon[1:], *polygon[:1]])


def _clip(
    polygon: Sequence[Point],
    inside: Callable[[Point], bool],
    outside: Callable[[Point], bool],
    intersect: Callable[[Point, Point], Point],
) -> list[Point]:
    # Vertices lying exactly on the clip line are neither inside nor outside
    # and are dropped, as is the edge that starts from them.
    result: list[Point] = []
    for p, q in _edges(polygon):
        if outside(p):
            if inside(q):
                result.append(intersect(p, q))
        elif inside(p):
            if inside(q):
                result.append(p)
            elif outside(q):
                result.append(p)
                result.append(intersect(p, q))
    return result


def _x_at(y_line: int) -> Callable[[Point, Point], Point]:
    def intersect(p: Point, q: Point) -> Point:
        (x1, y1), (x2, y2) = p, q
        if x2 == x1:
            x = float(x1)
        else:
            x = (1 / ((y2 - y1) / (x2 - x1))) * (y_line - y1) + x1
        return int(x), y_line

    return intersect


def _y_at(x_line: int) -> Callable[[Point, Point], Point]:
    def intersect(p: Point, q: Point) -> Point:
        (x1, y1), (x2, y2) = p, q
        y = ((y2 - y1) / (x2 - x1)) * (x_line - x1) + y1
        return x_line, int(y)

    return intersect


def clip_left(polygon: Sequence[Point], window: ClipWindow = ClipWindow()) -> list[Point]:
    """Keep the part of ``polygon`` to the right of ``window.xmin``."""
    w = window.xmin
    return _clip(polygon, lambda p: p[0] > w, lambda p: p[0] < w, _y_at(w))


def clip_right(polygon: Sequence[Point], window: ClipWindow = ClipWindow()) -> list[Point]:
    """Keep the part of ``polygon`` to the left of ``window.xmax``."""
    w = window.xmax
    return _clip(polygon, lambda p: p[0] < w, lambda p: p[0] > w, _y_at(w))


def clip_top(polygon: Sequence[Point], window: ClipWindow = ClipWindow()) -> list[Point]:
    """Keep the part of ``polygon`` below ``window.ymax``."""
    w = window.ymax
    return _clip(polygon, lambda p: p[1] < w, lambda p: p[1] > w, _x_at(w))


def clip_bottom(polygon: Sequence[Point], window: ClipWindow = ClipWindow()) -> list[Point]:
    """Keep the part of ``polygon`` above ``window.ymin``."""
    w = window.ymin
    return _clip(polygon, lambda p: p[1] > w, lambda p: p[1] < w, _x_at(w))


_CLIPPERS = {
    Edge.LEFT: clip_left,
    Edge.RIGHT: clip_right,
    Edge.TOP: clip_top,
    Edge.BOTTOM: clip_bottom,
}


def clip_polygon(
    polygon: Sequence[Point], window: ClipWindow = ClipWindow(), edge: Edge = Edge.LEFT
) -> list[Point]:
    """Clip ``polygon`` against a single ``edge`` of ``window``."""
    return _CLIPPERS[Edge(edge)](polygon, window)