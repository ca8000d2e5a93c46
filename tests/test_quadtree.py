import pytest

from compgeom.geometry import Point
from compgeom.quadtree import AABB, QuadTree

UNIT = AABB(0.0, 1.0, 0.0, 1.0)


def _leaves(tree):
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
        else:
            stack.extend(node.children.values())


def _leaf_points(tree):
    return [leaf.point for leaf in _leaves(tree) if leaf.point is not None]


def _adjacent(a, b):
    def overlap(lo1, hi1, lo2, hi2):
        return min(hi1, hi2) - max(lo1, lo2) > 0

    vertical = (a.x_max == b.x_min or b.x_max == a.x_min) and overlap(
        a.y_min, a.y_max, b.y_min, b.y_max
    )
    horizontal = (a.y_max == b.y_min or b.y_max == a.y_min) and overlap(
        a.x_min, a.x_max, b.x_min, b.x_max
    )
    return vertical or horizontal


def _unbalanced_pairs(tree):
    boxes = [leaf.box for leaf in _leaves(tree)]
    bad = 0
    for i, a in enumerate(boxes):
        for b in boxes[i + 1 :]:
            if _adjacent(a, b):
                wa, wb = a.x_max - a.x_min, b.x_max - b.x_min
                if max(wa, wb) > 2 * min(wa, wb):
                    bad += 1
    return bad


CENTRE_CLUSTER = [Point(0.49, 0.49), Point(0.48, 0.48), Point(0.9, 0.1)]


def test_aabb_contains():
    assert UNIT.contains(Point(0.5, 0.5))
    assert UNIT.contains(Point(0.0, 1.0))
    assert not UNIT.contains(Point(1.5, 0.5))
    assert not UNIT.contains(Point(0.5, -0.1))


def test_empty_tree_has_no_segments():
    tree = QuadTree([], UNIT)
    assert tree.root is None
    assert tree.segments() == []
    tree.balance()
    assert tree.segments() == []


def test_single_point_gives_only_the_bounding_box():
    tree = QuadTree([Point(0.3, 0.3)], UNIT)
    assert tree.root.is_leaf
    assert tree.root.point == Point(0.3, 0.3)
    assert tree.segments() == [
        (Point(0.0, 0.0), Point(1.0, 0.0)),
        (Point(1.0, 0.0), Point(1.0, 1.0)),
        (Point(1.0, 1.0), Point(0.0, 1.0)),
        (Point(0.0, 1.0), Point(0.0, 0.0)),
    ]


def test_two_points_split_once():
    tree = QuadTree([Point(0.25, 0.75), Point(0.75, 0.25)], UNIT)
    segs = tree.segments()
    assert len(segs) == 6
    assert segs[4] == (Point(0.5, 0.0), Point(0.5, 1.0))
    assert segs[5] == (Point(0.0, 0.5), Point(1.0, 0.5))
    assert tree.root.children["nw"].point == Point(0.25, 0.75)
    assert tree.root.children["se"].point == Point(0.75, 0.25)
    assert tree.root.children["ne"].point is None


def test_every_leaf_holds_at_most_one_point_and_all_points_kept():
    pts = CENTRE_CLUSTER + [Point(0.1, 0.8), Point(0.7, 0.7), Point(0.2, 0.15)]
    tree = QuadTree(pts, UNIT)
    assert sorted(_leaf_points(tree), key=lambda p: (p.x, p.y)) == sorted(
        pts, key=lambda p: (p.x, p.y)
    )
    for leaf in _leaves(tree):
        if leaf.point is not None:
            assert leaf.box.contains(leaf.point)


def test_balance_removes_size_jumps():
    tree = QuadTree(CENTRE_CLUSTER, UNIT)
    assert _unbalanced_pairs(tree) > 0
    before = len(tree.segments())
    tree.balance()
    assert _unbalanced_pairs(tree) == 0
    assert len(tree.segments()) > before


def test_balance_keeps_points_in_their_leaves():
    tree = QuadTree(CENTRE_CLUSTER, UNIT)
    tree.balance()
    kept = _leaf_points(tree)
    assert sorted(kept, key=lambda p: (p.x, p.y)) == sorted(
        CENTRE_CLUSTER, key=lambda p: (p.x, p.y)
    )
    for leaf in _leaves(tree):
        if leaf.point is not None:
            assert leaf.box.contains(leaf.point)


def test_balanced_tree_is_left_unchanged():
    tree = QuadTree([Point(0.25, 0.75), Point(0.75, 0.25)], UNIT)
    before = tree.segments()
    tree.balance()
    assert tree.segments() == before


def test_segments_stay_inside_bounds():
    tree = QuadTree(CENTRE_CLUSTER, UNIT)
    tree.balance()
    for a, b in tree.segments():
        assert UNIT.contains(a)
        assert UNIT.contains(b)


def test_duplicate_points_rejected():
    with pytest.raises(ValueError):
        QuadTree([Point(0.2, 0.2), Point(0.2, 0.2)], UNIT)


def test_points_outside_bounds_rejected():
    with pytest.raises(ValueError):
        QuadTree([Point(0.2, 0.2), Point(2.0, 0.2)], UNIT)