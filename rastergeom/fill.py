"""A small raster canvas with seed-fill algorithms (boundary and flood fill)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range 0..1."""

    r: float
    g: float
    b: float


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
PINK = Color(1.0, 0.0, 1.0)

_MENU_COLORS = {1: GREEN, 2: YELLOW, 3: PINK}

_TRIANGLE: tuple[Point, Point, Point] = ((150, 100), (300, 300), (450, 100))


class Canvas:
    """A width x height grid of colours addressed by (x, y), y growing upwards."""

    def __init__(self, width: int = 640, height: int = 480, background: Color = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.background = background
        self._pixels = [[background] * width for _ in range(height)]

    def __contains__(self, point: object) -> bool:
        try:
            x, y = point  # type: ignore[misc]
        except (TypeError, ValueError):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if (x, y) not in self:
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")

    def get(self, x: int, y: int) -> Color:
        """Return the colour at (x, y)."""
        self._check(x, y)
        return self._pixels[y][x]

    def set(self, x: int, y: int, color: Color) -> None:
        """Paint the pixel at (x, y)."""
        self._check(x, y)
        self._pixels[y][x] = color

    def _clear(self) -> None:
        self._pixels = [[self.background] * self.width for _ in range(self.height)]

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        """Draw a straight line including both end points; off-canvas pixels are skipped."""
        x0, y0 = start
        x1, y1 = end
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            if (x0, y0) in self:
                self._pixels[y0][x0] = color
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def draw_polygon_outline(self, vertices: Sequence[Point], color: Color) -> None:
        """Draw a closed outline through ``vertices``."""
        if not vertices:
            return
        for start, end in zip(vertices, [*vertices[1:], vertices[0]]):
            self.draw_line(start, end, color)


def menu_color(choice: int) -> Color:
    """Return the fill colour for a menu entry: 1 green, 2 yellow, 3 pink."""
    try:
        return _MENU_COLORS[choice]
    except KeyError:
        raise ValueError(f"unknown colour choice: {choice!r}") from None


def draw_boundary_scene(canvas: Canvas) -> None:
    """Clear the canvas and draw a red triangle outline."""
    canvas._clear()
    canvas.draw_polygon_outline(_TRIANGLE, RED)


def draw_flood_scene(canvas: Canvas) -> None:
    """Clear the canvas and draw a triangle whose sides are red, blue and black."""
    canvas._clear()
    a, b, c = _TRIANGLE
    canvas.draw_line(a, b, RED)
    canvas.draw_line(b, c, BLUE)
    canvas.draw_line(c, a, BLACK)


def _seed_fill(canvas: Canvas, seed: Point, should_paint, color: Color) -> int:
    painted = 0
    stack = [seed]
    while stack:
        x, y = stack.pop()
        if (x, y) not in canvas or not should_paint(canvas.get(x, y)):
            continue
        canvas.set(x, y, color)
        painted += 1
        # Reversed so the first neighbour is visited first.
        stack.extend(_neighbours_reversed(x, y))
    return painted


def _neighbours_reversed(x: int, y: int) -> Iterable[Point]:
    return ((x - 1, y), (x, y - 1), (x + 1, y), (x, y + 1))


def flood_fill(
    canvas: Canvas, seed: Point, new_color: Color, old_color: Color = WHITE
) -> int:
    """Repaint the 4-connected region of ``old_color`` containing ``seed``.

    Returns the number of pixels painted.
    """
    if new_color == old_color:
        return 0
    return _seed_fill(canvas, seed, lambda c: c == old_color, new_color)


def boundary_fill(
    canvas: Canvas, seed: Point, fill_color: Color, boundary_color: Color = RED
) -> int:
    """Paint outward from ``seed`` until ``boundary_color`` or ``fill_color`` is met.

    Returns the number of pixels painted.
    """
    return _seed_fill(
        canvas,
        seed,
        lambda c: c != boundary_color and c != fill_color,
        fill_color,
    )