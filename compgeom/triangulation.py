"""Triangulation of monotone polygons and ear clipping of simple polygons."""

from __future__ import annotations

from typing import Sequence

from compgeom.dcel import Polygon, Vertex
from compgeom.geometry import Point, collinear, cross2d, left, right


def triangulate_monotone(polygon: Polygon) -> list[tuple[Point, Point]]:
    """Triangulate a y-monotone polygon in place; return the diagonals added.

    The result is undefined if the polygon is not y-monotone.
    """
    vertices = list(polygon.vertices)
    if len(vertices) <= 3:
        return []
    order = sorted(vertices, key=lambda v: (-v.point.y, v.point.x))
    top, bottom = order[0], order[-1]

    left_chain: set[Vertex] = set()
    v = top.incident_edge.next.origin
    while v is not bottom:
        left_chain.add(v)
        v = v.incident_edge.next.origin

    def on_left(u: Vertex) -> bool:
        return u in left_chain

    diagonals: list[tuple[Point, Point]] = []

    def add(a: Vertex, b: Vertex) -> None:
        polygon.split(a, b)
        diagonals.append((a.point, b.point))

    stack = [order[0], order[1]]
    for j in range(2, len(order) - 1):
        u = order[j]
        if on_left(u) != on_left(stack[-1]):
            while stack:
                w = stack.pop()
                if stack:
                    add(u, w)
            stack = [order[j - 1], u]
        else:
            last = stack.pop()
            while stack:
                q = stack[-1]
                turn = cross2d(q.point, last.point, u.point)
                if not (turn > 0 if on_left(u) else turn < 0):
                    break
                add(u, q)
                last = stack.pop()
            stack += [last, u]

    for w in stack[1:-1]:
        add(bottom, w)
    return diagonals


def _between(a: Point, b: Point, c: Point) -> bool:
    if not collinear(a, b, c):
        return False
    if a.x != b.x:
        return min(a.x, b.x) <= c.x <= max(a.x, b.x)
    return min(a.y, b.y) <= c.y <= max(a.y, b.y)


def _intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    if not any(collinear(*t) for t in ((a, b, c), (a, b, d), (c, d, a), (c, d, b))):
        return (left(a, b, c) != left(a, b, d)) and (left(c, d, a) != left(c, d, b))
    return _between(a, b, c) or _between(a, b, d) or _between(c, d, a) or _between(c, d, b)


def triangulate_ear_clipping(points: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Triangulate a simple polygon by clipping ears; return the diagonals."""
    pts = list(points)
    if len(pts) < 3:
        raise ValueError("a polygon needs at least three points")
    if sum(p.x * q.y - q.x * p.y for p, q in zip(pts, pts[1:] + pts[:1])) < 0:
        pts.reverse()
    n = len(pts)
    nxt = {i: (i + 1) % n for i in range(n)}
    prv = {i: (i - 1) % n for i in range(n)}
    active = list(range(n))

    def in_cone(a: int, b: int) -> bool:
        a0, a1 = pts[prv[a]], pts[nxt[a]]
        pa, pb = pts[a], pts[b]
        if not right(pa, a1, a0):
            return left(pa, pb, a0) and left(pb, pa, a1)
        return not (not right(pa, pb, a1) and not right(pb, pa, a0))

    def diagonalie(a: int, b: int) -> bool:
        for c in active:
            c1 = nxt[c]
            if c in (a, b) or c1 in (a, b):
                continue
            if _intersect(pts[a], pts[b], pts[c], pts[c1]):
                return False
        return True

    def is_diagonal(a: int, b: int) -> bool:
        return in_cone(a, b) and in_cone(b, a) and diagonalie(a, b)

    ear = {i: is_diagonal(prv[i], nxt[i]) for i in range(n)}
    diagonals: list[tuple[Point, Point]] = []
    while len(active) > 3:
        i = next((k for k in active if ear[k]), None)
        if i is None:
            raise ValueError("no ear found; the polygon is not simple")
        v1, v3 = prv[i], nxt[i]
        v0, v4 = prv[v1], nxt[v3]
        diagonals.append((pts[v1], pts[v3]))
        nxt[v1], prv[v3] = v3, v1
        active.remove(i)
        ear[v1] = is_diagonal(v0, v3)
        ear[v3] = is_diagonal(v1, v4)
    return diagonals