"""Partition a simple polygon into y-monotone pieces with a plane sweep."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from compgeom.dcel import Polygon, Vertex
from compgeom.geometry import Point, left


class VertexCategory(Enum):
    START = "start"
    END = "end"
    REGULAR = "regular"
    SPLIT = "split"
    MERGE = "merge"
    INVALID = "invalid"


def categorize_vertex(vertex: Vertex) -> VertexCategory:
    """Classify a polygon vertex by its neighbours along the boundary."""
    edge = vertex.incident_edge
    if edge is None or edge.prev is None or edge.next is None:
        return VertexCategory.INVALID
    p_prev, p, p_next = edge.prev.origin.point, vertex.point, edge.next.origin.point
    convex = left(p_prev, p, p_next)
    if p.y > p_prev.y and p.y > p_next.y:
        return VertexCategory.START if convex else VertexCategory.SPLIT
    if p.y < p_prev.y and p.y < p_next.y:
        return VertexCategory.END if convex else VertexCategory.MERGE
    return VertexCategory.REGULAR


@dataclass(eq=False)
class _StatusEdge:
    origin: Point
    dest: Point
    helper: Vertex
    helper_category: VertexCategory

    def x_at(self, point: Point) -> float:
        dy = self.dest.y - self.origin.y
        if dy == 0:
            return point.x
        return (point.y - self.origin.y) * (self.dest.x - self.origin.x) / dy + self.origin.x


def monotone_partition(polygon: Polygon) -> list[Polygon]:
    """Split ``polygon`` in place by diagonals and return its monotone pieces."""
    neighbours = {
        v: (v.incident_edge.prev.origin, v.incident_edge.next.origin)
        for v in polygon.vertices
    }
    categories = {v: categorize_vertex(v) for v in polygon.vertices}
    order = sorted(polygon.vertices, key=lambda v: (-v.point.y, v.point.x))

    status: dict[Vertex, _StatusEdge] = {}

    def insert(v: Vertex, category: VertexCategory) -> None:
        status[v] = _StatusEdge(v.point, neighbours[v][1].point, v, category)

    def left_of(v: Vertex) -> _StatusEdge | None:
        candidates = [e for e in status.values() if e.x_at(v.point) < v.point.x]
        return max(candidates, key=lambda e: e.x_at(v.point), default=None)

    def close_previous(v: Vertex) -> None:
        entry = status.pop(neighbours[v][0], None)
        if entry is not None and entry.helper_category is VertexCategory.MERGE:
            polygon.split(v, entry.helper)

    def update_left(v: Vertex, category: VertexCategory, always_split: bool) -> None:
        entry = left_of(v)
        if entry is None:
            return
        if always_split or entry.helper_category is VertexCategory.MERGE:
            polygon.split(v, entry.helper)
        entry.helper, entry.helper_category = v, category

    for v in order:
        category = categories[v]
        if category is VertexCategory.START:
            insert(v, category)
        elif category is VertexCategory.END:
            close_previous(v)
        elif category is VertexCategory.SPLIT:
            update_left(v, category, always_split=True)
            insert(v, category)
        elif category is VertexCategory.MERGE:
            close_previous(v)
            update_left(v, category, always_split=False)
        elif category is VertexCategory.REGULAR:
            prev_y, next_y = neighbours[v][0].point.y, neighbours[v][1].point.y
            if prev_y >= v.point.y >= next_y:
                close_previous(v)
                insert(v, category)
            else:
                update_left(v, category, always_split=False)

    return [Polygon(face.points()) for face in polygon.faces if face.outer is not None]