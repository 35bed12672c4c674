import math

import pytest

from tangyutil.curve import CurvePoints, solve_curve_points, solve_self_curve_points


def test_straight_curve_has_midpoint_apex():
    pts = solve_curve_points((0, 0), (100, 0), 0)
    assert pts.p1 == (0, 0)
    assert pts.p4 == (100, 0)
    assert pts.p2 == (50, 0)
    assert pts.p3 == pts.p2


def test_angles_follow_chord_and_bulge():
    pts = solve_curve_points((10, 20), (110, 120), 30)
    th = math.atan2(100, 100)
    assert pts.mu == pytest.approx(th + math.radians(30))
    assert pts.mv == pytest.approx(th + math.pi - math.radians(30))


def test_zero_chop_keeps_endpoints():
    pts = solve_curve_points((-40, 15), (300, -70), 25, 0, 0)
    assert pts.p1 == (-40, 15)
    assert pts.p4 == (300, -70)


def test_apex_is_equidistant_from_ends():
    start, end = (0, 0), (400, 0)
    pts = solve_curve_points(start, end, 40)
    d1 = math.dist(start, pts.p2)
    d2 = math.dist(end, pts.p2)
    assert abs(d1 - d2) <= 2


def test_opposite_bulges_mirror_across_chord():
    up = solve_curve_points((0, 0), (500, 0), 20)
    down = solve_curve_points((0, 0), (500, 0), -20)
    assert up.p2[0] == down.p2[0]
    assert up.p2[1] == -down.p2[1]
    assert up.p2[1] > 0


def test_chops_move_ends_by_chop_length():
    start, end = (0, 0), (1000, 0)
    pts = solve_curve_points(start, end, 30, 50, 80)
    assert math.dist(start, pts.p1) == pytest.approx(50, abs=1.5)
    assert math.dist(end, pts.p4) == pytest.approx(80, abs=1.5)


def test_curve_points_is_frozen():
    pts = solve_curve_points((0, 0), (10, 0), 0)
    original_mu = pts.mu
    with pytest.raises(AttributeError):
        pts.mu = 1.0
    assert pts.mu == original_mu
    assert pts.mu == pytest.approx(0.0)


def test_self_curve_zero_chop_returns_to_start():
    pts = solve_self_curve_points((30, 40), 90, 100, 30, 0)
    assert pts.p1 == (30, 40)
    assert pts.p4 == (30, 40)


def test_self_curve_angles():
    pts = solve_self_curve_points((0, 0), 45, 100, 20)
    assert pts.mu == pytest.approx(math.radians(65))
    assert pts.mv == pytest.approx(math.radians(25))


def test_self_curve_symmetric_about_direction():
    pts = solve_self_curve_points((0, 0), 0, 200, 30)
    assert pts.p2[0] == pts.p3[0]
    assert pts.p2[1] == -pts.p3[1]


def test_self_curve_control_distance():
    radius, bulge = 150, 30
    pts = solve_self_curve_points((0, 0), 0, radius, bulge)
    expected = radius / math.cos(math.radians(bulge))
    assert math.dist((0, 0), pts.p2) == pytest.approx(expected, abs=1.5)


def test_self_curve_chop_moves_both_ends():
    pts = solve_self_curve_points((0, 0), 0, 200, 45, 60)
    assert math.dist((0, 0), pts.p1) == pytest.approx(60, abs=1.5)
    assert math.dist((0, 0), pts.p4) == pytest.approx(60, abs=1.5)
    assert pts.p1[1] == -pts.p4[1]