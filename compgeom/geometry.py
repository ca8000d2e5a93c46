"""Points, vectors and the basic orientation and distance predicates."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPSILON = 1e-9


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane or in space; ``z`` defaults to 0."""

    x: float
    y: float
    z: float = 0.0

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)


def cross2d(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of triangle abc in the XY plane."""
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def collinear(a: Point, b: Point, c: Point) -> bool:
    """True if c lies on the line through a and b."""
    return abs(cross2d(a, b, c)) <= EPSILON


def left(a: Point, b: Point, c: Point) -> bool:
    """True if c lies strictly to the left of the directed line a->b."""
    return cross2d(a, b, c) > EPSILON


def right(a: Point, b: Point, c: Point) -> bool:
    """True if c lies strictly to the right of the directed line a->b."""
    return cross2d(a, b, c) < -EPSILON


def left_or_between(a: Point, b: Point, c: Point) -> bool:
    """True if c is left of a->b or lies on the segment ab."""
    if left(a, b, c):
        return True
    if not collinear(a, b, c):
        return False
    return (
        min(a.x, b.x) - EPSILON <= c.x <= max(a.x, b.x) + EPSILON
        and min(a.y, b.y) - EPSILON <= c.y <= max(a.y, b.y) + EPSILON
    )


def polar_angle(point: Point, reference: Point) -> float:
    """Angle in degrees, in [0, 360), of ``point`` as seen from ``reference``."""
    return math.degrees(math.atan2(point.y - reference.y, point.x - reference.x)) % 360.0


def angle_between(v1: Point, v2: Point) -> float:
    """Unsigned angle in degrees between two vectors."""
    n1 = math.sqrt(v1.x * v1.x + v1.y * v1.y + v1.z * v1.z)
    n2 = math.sqrt(v2.x * v2.x + v2.y * v2.y + v2.z * v2.z)
    if n1 == 0 or n2 == 0:
        raise ValueError("angle with a zero-length vector is undefined")
    cos = (v1.x * v2.x + v1.y * v2.y + v1.z * v2.z) / (n1 * n2)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos))))


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.dist((a.x, a.y, a.z), (b.x, b.y, b.z))


def distance_to_line(a: Point, b: Point, point: Point) -> float:
    """Distance from ``point`` to the infinite line through a and b."""
    d = b - a
    w = point - a
    cx = d.y * w.z - d.z * w.y
    cy = d.z * w.x - d.x * w.z
    cz = d.x * w.y - d.y * w.x
    length = math.sqrt(d.x * d.x + d.y * d.y + d.z * d.z)
    if length == 0:
        return distance(a, point)
    return math.sqrt(cx * cx + cy * cy + cz * cz) / length


def signed_volume(a: Point, b: Point, c: Point, d: Point) -> float:
    """Six times the signed volume of tetrahedron abcd."""
    u, v, w = b - a, c - a, d - a
    return (
        u.x * (v.y * w.z - v.z * w.y)
        - u.y * (v.x * w.z - v.z * w.x)
        + u.z * (v.x * w.y - v.y * w.x)
    )


def coplanar(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if the four points lie in one plane."""
    return abs(signed_volume(a, b, c, d)) <= EPSILON