import pytest
from hypothesis import given
from hypothesis import strategies as st

from rastergeom.transform import reflect, rotate, scale, translate

coords = st.integers(min_value=-1000, max_value=1000)
polygons = st.lists(st.tuples(coords, coords), min_size=1, max_size=10)


@given(polygons, coords, coords)
def test_translate_round_trip(points, tx, ty):
    assert translate(translate(points, tx, ty), -tx, -ty) == points


def test_translate_moves_each_vertex():
    assert translate([(0, 0), (10, 0), (0, 10)], 5, 7) == [(5, 7), (15, 7), (5, 17)]


@given(polygons, coords, coords)
def test_rotate_by_zero_is_identity(points, px, py):
    assert rotate(points, (px, py), 0) == points


@given(st.tuples(coords, coords), st.floats(min_value=-720, max_value=720))
def test_rotate_keeps_pivot_fixed(pivot, degrees):
    assert rotate([pivot], pivot, degrees) == [pivot]


def test_rotate_quarter_turn():
    assert rotate([(10, 0)], (0, 0), 90) == [(0, 10)]


@given(polygons, st.floats(min_value=-360, max_value=360))
def test_rotate_preserves_distance_from_pivot_approximately(points, degrees):
    pivot = (3, -4)
    for (x, y), (rx, ry) in zip(points, rotate(points, pivot, degrees)):
        before = ((x - 3) ** 2 + (y + 4) ** 2) ** 0.5
        after = ((rx - 3) ** 2 + (ry + 4) ** 2) ** 0.5
        assert abs(before - after) <= 1.5


@given(polygons)
def test_scale_by_one_is_identity(points):
    assert scale(points, 1, 1) == points


@given(polygons, st.integers(-5, 5), st.integers(-5, 5), st.integers(-5, 5), st.integers(-5, 5))
def test_scale_composes(points, a, b, c, d):
    assert scale(scale(points, a, b), c, d) == scale(points, a * c, b * d)


@given(polygons, st.sampled_from(["x", "X", "y", "Y"]))
def test_reflect_twice_is_identity(points, axis):
    assert reflect(reflect(points, axis), axis) == points


def test_reflect_in_x_axis_negates_y():
    assert reflect([(1, 2), (3, 4)], "x") == [(1, -2), (3, -4)]


def test_reflect_in_y_axis_negates_x():
    assert reflect([(1, 2), (3, 4)], "Y") == [(-1, 2), (-3, 4)]


def test_reflect_unknown_axis_raises():
    with pytest.raises(ValueError):
        reflect([(1, 2)], "z")