import math

import pytest

from patternkit.points import Point, PointFactory


def test_new_cartesian_keeps_coordinates():
    p = PointFactory.new_cartesian(3, 4)
    assert (p.x, p.y) == (3, 4)


def test_str_format():
    assert str(Point(1, 2)) == "x: 1 y: 2"


def test_polar_on_x_axis():
    p = PointFactory.new_polar(2, 0)
    assert p.x == pytest.approx(2)
    assert p.y == pytest.approx(0)


def test_polar_at_quarter_pi_is_symmetric():
    p = PointFactory.new_polar(5, math.pi / 4)
    assert p.x == pytest.approx(p.y)
    assert math.hypot(p.x, p.y) == pytest.approx(5)


@pytest.mark.parametrize("r,theta", [(1, 0.3), (7.5, 2.0), (3, -1.2)])
def test_polar_round_trip(r, theta):
    p = PointFactory.new_polar(r, theta)
    assert math.hypot(p.x, p.y) == pytest.approx(r)
    assert math.atan2(p.y, p.x) == pytest.approx(theta)


def test_points_are_immutable():
    p = PointFactory.new_cartesian(1, 1)
    with pytest.raises(AttributeError):
        p.x = 5
    assert (p.x, p.y) == (1, 1)