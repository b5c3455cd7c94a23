from itertools import permutations

import pytest

from cg2d.geom import Pt, as_points
from cg2d.predicates import circumcircle, in_circumcircle, orient2d


def test_circumcircle_right_triangle():
    xc, yc, r = circumcircle(Pt(0, 0), Pt(4, 0), Pt(0, 4))
    assert (xc, yc, r) == pytest.approx((2.0, 2.0, 8.0))


def test_circumcircle_order_independent():
    pts = [Pt(3, 0), Pt(5, 5), Pt(0, 2)]
    ref = circumcircle(*pts)
    for perm in permutations(pts):
        assert circumcircle(*perm) == pytest.approx(ref)


@pytest.mark.parametrize("a, b, c, expected", [
    ((0, 0), (1, 1), (2, 2), (1.0, 1.0, 2.0)),
    ((0, 0), (4, 0), (2, 0), (2.0, 0.0, 4.0)),
    ((5, -3), (5, 3), (5, 1), (5.0, 0.0, 9.0)),
    ((7, 7), (7, 7), (7, 7), (7.0, 7.0, 0.0)),
])
def test_collinear_falls_back_to_bounding_box(a, b, c, expected):
    assert circumcircle(Pt(*a), Pt(*b), Pt(*c)) == pytest.approx(expected)


def test_orient2d_sign():
    assert orient2d(Pt(0, 0), Pt(1, 0), Pt(0, 1)) > 0
    assert orient2d(Pt(0, 0), Pt(0, 1), Pt(1, 0)) < 0
    assert orient2d(Pt(0, 0), Pt(1, 1), Pt(3, 3)) == 0


def test_in_circumcircle_is_strict():
    xc, yc, r = circumcircle(Pt(0, 0), Pt(4, 0), Pt(0, 4))
    assert in_circumcircle(xc, yc, r, Pt(1, 1))
    assert not in_circumcircle(xc, yc, r, Pt(4, 4))     # на колі
    assert not in_circumcircle(xc, yc, r, Pt(10, 10))


def test_as_points_coerces_and_rejects():
    assert as_points([(1, 2), Pt(3, 4)]) == [Pt(1, 2), Pt(3, 4)]
    with pytest.raises(TypeError):
        as_points([(1.5, 2)])
    with pytest.raises(ValueError):
        as_points([(1, 2, 3)])

