import pytest

from compgeom.dcel import Polygon
from compgeom.geometry import Point

SQUARE = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]


def test_build():
    poly = Polygon(SQUARE)
    assert len(poly.faces) == 1
    assert poly.faces[0].points() == SQUARE
    assert len(poly.edge_list()) == len(SQUARE)


def test_clockwise_input_is_reoriented():
    poly = Polygon(list(reversed(SQUARE)))
    pts = poly.faces[0].points()
    assert set(pts) == set(SQUARE)
    assert len(list(poly.faces[0].edges())) == 4


def test_split():
    poly = Polygon(SQUARE)
    v = poly.vertices
    new_face = poly.split(v[0], v[2])
    assert new_face in poly.faces
    assert len(poly.faces) == 2
    assert all(len(f.points()) == 3 for f in poly.faces)
    assert len(poly.edge_list()) == 5
    assert (v[0].point, v[2].point) in poly.edge_list()


def test_split_errors():
    poly = Polygon(SQUARE)
    with pytest.raises(ValueError):
        poly.split(poly.vertices[0], poly.vertices[1])
    with pytest.raises(ValueError):
        Polygon(SQUARE[:2])