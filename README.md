# rastergeom

Classic raster graphics algorithms in plain Python, with no drawing library
and no dependencies. Every algorithm returns coordinates or works on an
in-memory canvas, so results are easy to inspect, test or hand to a renderer
of your choice.

## Installation

```
pip install rastergeom
```

To run the test suite:

```
pip install "rastergeom[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `rastergeom.circle` | `bresenham_circle` and the `eight_way` symmetry helper |
| `rastergeom.fill` | `Canvas`, `Color`, `flood_fill`, `boundary_fill`, `menu_color` and two demo scenes |
| `rastergeom.clipping` | Edge-by-edge polygon clipping against a `ClipWindow` |
| `rastergeom.transform` | `translate`, `rotate`, `scale`, `reflect` |
| `rastergeom.curves` | `cubic_bezier` and `koch_curve` |
| `rastergeom.animation` | `Slider`, a square bouncing across the screen |
| `rastergeom.cli` | The `rastergeom` command |

Points are `(x, y)` tuples throughout.

### Circles

```python
from rastergeom.circle import bresenham_circle

pixels = bresenham_circle(10, center=(320, 240))
```

`bresenham_circle(radius, center)` walks one octant with the midpoint
decision variable and returns, in plotting order, the eight points that
`eight_way(x, y, center)` mirrors from each step. At least one step is
always plotted, so a radius of zero gives the centre point eight times.
The default centre is `(320, 240)`.

### Filling

A `Canvas(width=640, height=480, background=WHITE)` is a grid of `Color`
values (frozen RGB triples with components from 0 to 1) addressed by
`(x, y)`. `get` and `set` raise `IndexError` outside the canvas;
`draw_line` and `draw_polygon_outline` skip off-canvas pixels. A point can
be tested with `(x, y) in canvas`.

- `boundary_fill(canvas, seed, fill_color, boundary_color=RED)` paints the
  4-connected area around `seed` until it meets the boundary colour or the
  fill colour.
- `flood_fill(canvas, seed, new_color, old_color=WHITE)` repaints the
  4-connected region of `old_color` that contains `seed`; it does nothing
  when the two colours are equal.

Both return the number of pixels painted. `draw_boundary_scene(canvas)`
clears the canvas and draws a red triangle outline through
`(150, 100)`, `(300, 300)`, `(450, 100)`; `draw_flood_scene(canvas)` draws
the same triangle with red, blue and black sides. `menu_color(choice)` maps
1, 2 and 3 to green, yellow and pink and raises `ValueError` for anything
else.

```python
from rastergeom.fill import Canvas, draw_boundary_scene, boundary_fill, menu_color

canvas = Canvas()
draw_boundary_scene(canvas)
painted = boundary_fill(canvas, (300, 150), menu_color(1))
```

### Clipping

`ClipWindow` defaults to `xmin=200, xmax=500, ymin=100, ymax=350`.
`clip_left`, `clip_right`, `clip_top` and `clip_bottom` each clip a
polygon against one side of the window and return the new vertex list;
`clip_polygon(polygon, window, edge)` does the same for an `Edge`
(`LEFT`, `RIGHT`, `TOP`, `BOTTOM`, numbered 1 to 4). Apply them in turn to
clip against the whole window. Intersection coordinates are truncated to
integers, and vertices lying exactly on the clip line are dropped.

### Transformations

- `translate(points, tx, ty)` shifts every point.
- `rotate(points, pivot, degrees)` rotates anticlockwise about `pivot`,
  converting degrees with π taken as 3.14 and rounding results half up to
  whole pixels.
- `scale(points, sx, sy)` scales about the origin.
- `reflect(points, axis)` mirrors in the x axis (`"x"`) or the y axis
  (`"y"`), case-insensitive; any other axis raises `ValueError`.

### Curves

`cubic_bezier(control_points, step=0.0005)` samples the Bézier curve of
exactly four control points for `t` from 0 while `t < 1`, returning float
points. It raises `ValueError` for a wrong number of points or a
non-positive step.

`koch_curve(start, length, angle, iterations)` returns the Koch curve as a
list of integer-pixel line segments `((x0, y0), (x1, y1))` in drawing
order; `angle` is in degrees, and each iteration replaces every segment
with four.

### Animation

`Slider` tracks a 40-pixel square at height 220 moving 3 pixels per frame
between `left=0` and `right=600`, reversing when it reaches either end.
`step()` advances one frame and returns the new x position;
`frames(count)` advances `count` frames and returns the list of positions
(a negative count raises `ValueError`). The `rectangle` property gives the
square's corners at the current position.

## Command line

The `rastergeom` command applies one transformation to a polygon read from
standard input and prints the result:

```
rastergeom --help
```

Input is whitespace-separated: a choice (1 scaling, 2 rotation about a
point, 3 reflection, 4 translation), the number of vertices, the vertices,
and then the parameters of the chosen transformation (`sx sy`; pivot
`x y` and an angle in degrees; an axis letter `x` or `y`; or `tx ty`).
Prompts are printed as it reads. For example:

```
printf '4\n3\n0 0\n10 0\n0 10\n5 5\n' | rastergeom
```

translates the triangle by `(5, 5)` and ends with:

```
Transformed polygon:
5 5
15 5
5 15
```

An unknown choice prints `Check Input run again` and exits with status 0;
missing or malformed input is reported on standard error with status 1.
A reflection axis other than x or y gives an empty result.

## What it does not do

rastergeom opens no window and draws nothing on screen: there is no
interactive display, mouse-driven filling, clipping menu or running
animation. The circle, fill, clipping, curve and animation algorithms are
available only as library functions; the command covers the
transformations alone.