"""A doubly connected edge list for subdividing simple polygons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from compgeom.geometry import Point


@dataclass(eq=False)
class Vertex:
    point: Point
    incident_edge: HalfEdge | None = None


@dataclass(eq=False)
class HalfEdge:
    origin: Vertex
    twin: HalfEdge | None = None
    next: HalfEdge | None = None
    prev: HalfEdge | None = None
    face: Face | None = None


@dataclass(eq=False)
class Face:
    outer: HalfEdge | None = None

    def edges(self) -> Iterator[HalfEdge]:
        """Half-edges of the face boundary, in order."""
        if self.outer is None:
            return
        edge = self.outer
        while True:
            yield edge
            edge = edge.next
            if edge is self.outer:
                break

    def points(self) -> list[Point]:
        """Boundary points of the face, counter-clockwise."""
        return [edge.origin.point for edge in self.edges()]


def _signed_area(points: Sequence[Point]) -> float:
    return sum(
        p.x * q.y - q.x * p.y for p, q in zip(points, [*points[1:], points[0]])
    ) / 2


@dataclass(eq=False)
class _Store:
    vertices: list[Vertex] = field(default_factory=list)
    half_edges: list[HalfEdge] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)


class Polygon:
    """A simple polygon whose interior can be split by diagonals."""

    def __init__(self, points: Sequence[Point]):
        points = list(points)
        if len(points) < 3:
            raise ValueError("a polygon needs at least three points")
        if _signed_area(points) < 0:
            points.reverse()
        self.vertices = [Vertex(p) for p in points]
        self.half_edges: list[HalfEdge] = []
        face = Face()
        n = len(points)
        inner = [HalfEdge(self.vertices[i], face=face) for i in range(n)]
        outer = [HalfEdge(self.vertices[(i + 1) % n]) for i in range(n)]
        for i in range(n):
            e, t = inner[i], outer[i]
            e.twin, t.twin = t, e
            e.next, e.prev = inner[(i + 1) % n], inner[i - 1]
            t.next, t.prev = outer[i - 1], outer[(i + 1) % n]
            self.vertices[i].incident_edge = e
            self.half_edges += [e, t]
        face.outer = inner[0]
        self.faces = [face]

    def split(self, v1: Vertex, v2: Vertex) -> Face:
        """Add the diagonal v1-v2 inside a face holding both; return the new face."""
        for edge in self.half_edges:
            if edge.origin is not v1 or edge.face is None:
                continue
            face = edge.face
            other = next((e for e in face.edges() if e.origin is v2), None)
            if other is None:
                continue
            if edge.next.origin is v2 or edge.prev.origin is v2:
                raise ValueError("vertices are adjacent; no diagonal to add")
            h1, h2 = HalfEdge(v1), HalfEdge(v2)
            h1.twin, h2.twin = h2, h1
            a_prev, b_prev = edge.prev, other.prev
            h1.prev, a_prev.next = a_prev, h1
            h1.next, other.prev = other, h1
            h2.prev, b_prev.next = b_prev, h2
            h2.next, edge.prev = edge, h2
            face.outer = h1
            new_face = Face(h2)
            for e in face.edges():
                e.face = face
            for e in new_face.edges():
                e.face = new_face
            self.faces.append(new_face)
            self.half_edges += [h1, h2]
            return new_face
        raise ValueError("vertices share no face")

    def edge_list(self) -> list[tuple[Point, Point]]:
        """Each undirected edge once, as a pair of end points."""
        seen: set[int] = set()
        result = []
        for edge in self.half_edges:
            if id(edge) in seen:
                continue
            seen.update((id(edge), id(edge.twin)))
            result.append((edge.origin.point, edge.twin.origin.point))
        return result