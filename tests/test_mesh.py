from itertools import permutations

import pytest

from cg2d.geom import Pt
from cg2d.mesh import Triangle, canonical_edge, dedupe_edges


PTS = [Pt(3, 0), Pt(5, 5), Pt(0, 2), Pt(3, 7)]


def test_canonical_edge_orders_by_x_then_y():
    assert canonical_edge(PTS, 0, 1) == (0, 1)
    assert canonical_edge(PTS, 1, 0) == (0, 1)
    assert canonical_edge(PTS, 0, 2) == (2, 0)
    # однаковий x - вирішує y
    assert canonical_edge(PTS, 3, 0) == (0, 3)


def test_build_stores_circumcircle_once():
    t = Triangle.build(PTS, 0, 1, 2)
    assert t.v == (0, 1, 2)
    assert t.vertices() == (Pt(3, 0), Pt(5, 5), Pt(0, 2))
    assert t.r == pytest.approx((t.xc - 3) ** 2 + (t.yc - 0) ** 2)


def test_edges_layout():
    t = Triangle.build(PTS, 0, 1, 2)
    # (A,B), (B,C), (C,A), кожне канонічне
    assert t.edges() == (0, 1, 2, 1, 2, 0)
    assert t.edge_pairs() == [(0, 1), (2, 1), (2, 0)]


def test_edges_orientation_invariant():
    ref = sorted(Triangle.build(PTS, 0, 1, 2).edge_pairs())
    for perm in permutations((0, 1, 2)):
        t = Triangle.build(PTS, *perm)
        assert sorted(t.edge_pairs()) == ref
        assert t.edges() == t.edges()


def test_dedupe_self_concatenation_is_empty():
    t = Triangle.build(PTS, 0, 1, 2)
    assert dedupe_edges(t.edges() + t.edges()) == []


def test_dedupe_drops_shared_edge_only():
    t1 = Triangle.build(PTS, 0, 1, 2)
    t2 = Triangle.build(PTS, 1, 0, 3)
    out = dedupe_edges(t1.edges() + t2.edges())
    pairs = {frozenset(out[i:i + 2]) for i in range(0, len(out), 2)}
    assert len(out) == 8
    assert frozenset((0, 1)) not in pairs
    assert pairs == {frozenset(e) for e in [(1, 2), (2, 0), (1, 3), (3, 0)]}


def test_dedupe_matches_either_orientation():
    assert dedupe_edges([0, 1, 5, 6, 1, 0]) == [5, 6]


def test_dedupe_uses_slot_identity_not_coordinates():
    pts = [Pt(0, 0), Pt(1, 0), Pt(0, 0)]
    # слоти 0 і 2 мають однакові координати, але це різні вершини
    edges = list(canonical_edge(pts, 0, 1) + canonical_edge(pts, 2, 1))
    assert edges == [0, 1, 2, 1]
    assert dedupe_edges(edges) == edges


def test_dedupe_keeps_survivor_order():
    assert dedupe_edges([1, 2, 3, 4, 2, 1, 5, 6]) == [3, 4, 5, 6]


def test_dedupe_rejects_odd_length():
    with pytest.raises(ValueError):
        dedupe_edges([0, 1, 2])


def test_triangles_compare_by_identity():
    a = Triangle.build(PTS, 0, 1, 2)
    b = Triangle.build(PTS, 0, 1, 2)
    assert a != b
    assert a == a
