"""Convex hulls of planar point sets.

All functions assume the points lie in the XY plane and treat ``z`` as
irrelevant.
"""

from __future__ import annotations

from typing import Sequence

from compgeom.geometry import (
    Point,
    angle_between,
    cross2d,
    distance_to_line,
    left,
    polar_angle,
    right,
)


def _lexicographic(point: Point) -> tuple[float, float]:
    return (point.x, point.y)


def gift_wrapping(points: Sequence[Point]) -> list[Point]:
    """Hull by gift wrapping, counter-clockwise from the bottom-most point.

    Inputs of three points or fewer give an empty hull. Duplicate points
    are not supported.
    """
    pts = list(points)
    if len(pts) <= 3:
        return []

    bottom = min(pts, key=lambda p: (p.y, p.x))

    second = pts[0]
    best = 360.0
    for p in pts:
        if p == bottom:
            continue
        angle = polar_angle(p, bottom)
        if angle < best:
            best, second = angle, p

    hull = [bottom, second]
    while True:
        ref = hull[-1]
        incoming = ref - hull[-2]
        best = 360.0
        candidate = ref
        for p in pts:
            if p == ref:
                continue
            angle = angle_between(incoming, p - ref)
            if angle < best:
                best, candidate = angle, p
        if candidate == bottom:
            return hull
        if len(hull) >= len(pts):
            raise ValueError("gift wrapping did not close; the input is degenerate")
        hull.append(candidate)


def _half_hull(ordered: list[Point]) -> list[Point]:
    chain = ordered[:2]
    for p in ordered[2:]:
        while len(chain) > 1 and left(chain[-2], chain[-1], p):
            chain.pop()
        chain.append(p)
    return chain


def modified_grahams(points: Sequence[Point]) -> list[Point]:
    """Hull by Andrew's monotone chain, clockwise from the left-most point.

    Inputs of three points or fewer give an empty hull.
    """
    pts = sorted(points, key=_lexicographic)
    if len(pts) <= 3:
        return []
    upper = _half_hull(pts)
    lower = _half_hull(pts[::-1])
    return upper[:-1] + lower[:-1]


def incremental(points: Sequence[Point]) -> list[Point]:
    """Hull built by adding points left to right; counter-clockwise order."""
    pts = sorted(points, key=_lexicographic)
    if len(pts) < 3:
        raise ValueError("the incremental hull needs at least three points")

    hull = pts[:3]
    if cross2d(*hull) < 0:
        hull.reverse()

    for p in pts[3:]:
        n = len(hull)
        visible = [right(hull[i], hull[(i + 1) % n], p) for i in range(n)]
        if not any(visible) or all(visible):
            continue
        start = next(i for i in range(n) if visible[i] and not visible[i - 1])
        end = next(i for i in range(n) if visible[i] and not visible[(i + 1) % n])
        count = (start - end - 1) % n + 1
        hull = [hull[(end + 1 + k) % n] for k in range(count)] + [p]
    return hull


def _find_hull(candidates: list[Point], hull: list[Point], a: Point, b: Point) -> None:
    if not candidates:
        return
    if len(candidates) == 1:
        hull.append(candidates[0])
        return

    farthest = candidates[0]
    max_d = 0.0
    for p in candidates:
        d = distance_to_line(a, b, p)
        if d > max_d:
            max_d, farthest = d, p
    hull.append(farthest)

    outside_a = [p for p in candidates if left(a, farthest, p)]
    outside_b = [p for p in candidates if left(farthest, b, p)]
    _find_hull(outside_a, hull, a, farthest)
    _find_hull(outside_b, hull, farthest, b)


def quickhull(points: Sequence[Point]) -> list[Point]:
    """Hull by quickhull; the points come in no particular order.

    The first two are the left-most and right-most points. Inputs of
    three points or fewer give an empty hull.
    """
    pts = list(points)
    if len(pts) <= 3:
        return []

    left_top = min(pts, key=lambda p: (p.x, -p.y))
    right_bot = max(pts, key=lambda p: (p.x, -p.y))

    hull = [left_top, right_bot]
    above = [p for p in pts if left(left_top, right_bot, p)]
    below = [p for p in pts if right(left_top, right_bot, p)]
    _find_hull(above, hull, left_top, right_bot)
    _find_hull(below, hull, right_bot, left_top)
    return hull