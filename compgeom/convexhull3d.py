"""Incremental convex hull of a point set in space."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from compgeom.geometry import EPSILON, Point, coplanar, signed_volume


class CoplanarPointsError(ValueError):
    """Raised when every point lies in one plane, so no solid hull exists."""


@dataclass(eq=False)
class HullEdge:
    """An edge of the hull and the two faces that meet at it."""

    vertices: tuple[Point, Point]
    faces: list[HullFace] = field(default_factory=list)


@dataclass(eq=False)
class HullFace:
    """A triangular face, its vertices ordered counter-clockwise seen from outside."""

    vertices: tuple[Point, Point, Point]
    edges: list[HullEdge] = field(default_factory=list)


_Triangle = tuple[int, int, int]


def _directed_edges(face: _Triangle) -> Iterator[tuple[int, int]]:
    i, j, k = face
    yield (i, j)
    yield (j, k)
    yield (k, i)


def _build(points: list[Point], faces: list[_Triangle]) -> list[HullFace]:
    edges: dict[frozenset[int], HullEdge] = {}
    result = []
    for face in faces:
        hull_face = HullFace(tuple(points[i] for i in face))
        for u, v in _directed_edges(face):
            key = frozenset((u, v))
            edge = edges.get(key)
            if edge is None:
                edge = edges[key] = HullEdge((points[u], points[v]))
            edge.faces.append(hull_face)
            hull_face.edges.append(edge)
        result.append(hull_face)
    return result


def convex_hull_3d(points: Sequence[Point]) -> list[HullFace]:
    """Triangular faces of the convex hull, built by adding points one by one.

    The starting tetrahedron is the first run of four consecutive points
    that do not lie in one plane. Duplicate points are ignored.
    """
    pts = list(points)
    if len(pts) < 4:
        raise ValueError("a 3D hull needs at least four points")

    start = next(
        (i for i in range(len(pts) - 3) if not coplanar(*pts[i : i + 4])), None
    )
    if start is None:
        raise CoplanarPointsError("all the points are coplanar")

    seed = range(start, start + 4)
    corners = [pts[i] for i in seed]
    ref = Point(
        sum(p.x for p in corners) / 4,
        sum(p.y for p in corners) / 4,
        sum(p.z for p in corners) / 4,
    )

    def outward(i: int, j: int, k: int) -> _Triangle:
        if signed_volume(pts[i], pts[j], pts[k], ref) < 0:
            return (i, j, k)
        return (j, i, k)

    a, b, c, d = seed
    faces = [outward(a, b, c), outward(a, b, d), outward(b, c, d), outward(c, a, d)]

    for index, p in enumerate(pts):
        if index in seed:
            continue
        visible = [
            f for f in faces if signed_volume(pts[f[0]], pts[f[1]], pts[f[2]], p) > EPSILON
        ]
        if not visible:
            continue
        directed = {e for f in visible for e in _directed_edges(f)}
        horizon = [
            (u, v)
            for f in visible
            for u, v in _directed_edges(f)
            if (v, u) not in directed
        ]
        faces = [f for f in faces if f not in visible]
        faces += [(u, v, index) for u, v in horizon]

    return _build(pts, faces)