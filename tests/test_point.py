import math

from implicitplot.point import Point


def test_default_point_is_origin_and_unlinked():
    p = Point()
    assert (p.x, p.y) == (0.0, 0.0)
    assert p.previous is None and p.next is None


def test_dist_to_none_is_minus_one():
    assert Point(1.0, 2.0).dist(None) == -1


def test_dist_pythagorean_triple():
    assert Point(0.0, 0.0).dist(Point(3.0, 4.0)) == 5.0


def test_dist_is_symmetric():
    a = Point(1.5, -2.0)
    b = Point(-3.25, 7.0)
    assert math.isclose(a.dist(b), b.dist(a))


def test_dist_to_self_is_zero():
    a = Point(2.0, 9.0)
    assert a.dist(a) == 0.0


def test_points_compare_by_identity():
    a = Point(1.0, 1.0)
    b = Point(1.0, 1.0)
    assert a == a
    assert not (a == b)


def test_coordinates_can_be_changed():
    p = Point(1.0, 1.0)
    p.x = 4.0
    p.y = 5.0
    assert p.dist(Point(1.0, 1.0)) == 5.0