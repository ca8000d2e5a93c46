import pytest

from compgeom.dcel import Polygon
from compgeom.geometry import Point
from compgeom.monotone import monotone_partition
from compgeom.triangulation import triangulate_ear_clipping, triangulate_monotone

PENTAGON = [Point(0, 0), Point(3, 0), Point(4, 2), Point(1.5, 4), Point(-1, 2)]
MERGE_POLY = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 1), Point(0, 4)]


def area(points):
    return sum(p.x * q.y - q.x * p.y for p, q in zip(points, points[1:] + points[:1])) / 2


def test_monotone_convex():
    poly = Polygon(PENTAGON)
    diagonals = triangulate_monotone(poly)
    assert len(diagonals) == len(PENTAGON) - 3
    assert all(len(f.points()) == 3 for f in poly.faces)
    assert sum(area(f.points()) for f in poly.faces) == pytest.approx(area(PENTAGON))


def test_monotone_triangle_untouched():
    poly = Polygon(PENTAGON[:3])
    assert triangulate_monotone(poly) == []
    assert len(poly.faces) == 1


def test_partition_then_triangulate():
    pieces = monotone_partition(Polygon(MERGE_POLY))
    for piece in pieces:
        triangulate_monotone(piece)
    faces = [f for piece in pieces for f in piece.faces]
    assert len(faces) == len(MERGE_POLY) - 2
    assert all(len(f.points()) == 3 for f in faces)
    assert sum(area(f.points()) for f in faces) == pytest.approx(area(MERGE_POLY))


@pytest.mark.parametrize("points", [PENTAGON, MERGE_POLY, list(reversed(MERGE_POLY))])
def test_ear_clipping_count(points):
    diagonals = triangulate_ear_clipping(points)
    assert len(diagonals) == len(points) - 3
    for a, b in diagonals:
        assert a in points and b in points


def test_ear_clipping_skips_reflex_vertex():
    diagonals = triangulate_ear_clipping(MERGE_POLY)
    assert (Point(4, 4), Point(0, 4)) not in diagonals
    assert (Point(0, 4), Point(4, 4)) not in diagonals


def test_ear_clipping_errors():
    assert triangulate_ear_clipping(PENTAGON[:3]) == []
    with pytest.raises(ValueError):
        triangulate_ear_clipping(PENTAGON[:2])