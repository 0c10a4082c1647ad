import pytest

from rastergeom.curves import cubic_bezier, koch_curve

LINE = [(0, 0), (10, 0), (20, 0), (30, 0)]


def test_bezier_starts_at_first_control_point():
    points = cubic_bezier([(5, 6), (100, 200), (300, 50), (400, 400)])
    assert points[0] == (5.0, 6.0)


def test_bezier_sample_count_follows_step():
    assert len(cubic_bezier(LINE, 0.25)) == 4


def test_bezier_on_collinear_points_stays_on_line():
    points = cubic_bezier(LINE, 0.1)
    assert all(y == 0 for _, y in points)
    xs = [x for x, _ in points]
    assert xs == sorted(xs)
    assert all(0 <= x < 30 for x in xs)


def test_bezier_stays_in_control_hull_box():
    ctrl = [(100, 100), (150, 400), (400, 20), (500, 300)]
    for x, y in cubic_bezier(ctrl, 0.01):
        assert 100 - 1e-9 <= x <= 500 + 1e-9
        assert 20 - 1e-9 <= y <= 400 + 1e-9


def test_bezier_approaches_last_control_point():
    points = cubic_bezier([(0, 0), (50, 80), (90, 10), (120, 60)])
    x, y = points[-1]
    assert abs(x - 120) < 1 and abs(y - 60) < 1


def test_bezier_rejects_wrong_point_count():
    with pytest.raises(ValueError):
        cubic_bezier(LINE[:3])


def test_bezier_rejects_non_positive_step():
    with pytest.raises(ValueError):
        cubic_bezier(LINE, 0)


def test_koch_zero_iterations_is_single_segment():
    assert koch_curve((0, 0), 100, 0, 0) == [((0, 0), (100, 0))]


@pytest.mark.parametrize("iterations", [1, 2, 3, 4])
def test_koch_segment_count(iterations):
    assert len(koch_curve((50, 50), 300, 0, iterations)) == 4**iterations


def test_koch_negative_iterations_draws_straight_line():
    assert koch_curve((10, 20), 90, 0, -2) == koch_curve((10, 20), 90, 0, 0)


def test_koch_segments_are_chained():
    segments = koch_curve((50, 100), 540, 0, 3)
    assert segments[0][0] == (50, 100)
    for (_, end), (start, _) in zip(segments, segments[1:]):
        assert abs(end[0] - start[0]) <= 1
        assert abs(end[1] - start[1]) <= 1


def test_koch_curve_ends_near_straight_line_end():
    segments = koch_curve((50, 100), 540, 0, 3)
    end = segments[-1][1]
    assert abs(end[0] - 590) <= 2
    assert abs(end[1] - 100) <= 2