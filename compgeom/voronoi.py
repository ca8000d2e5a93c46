"""Voronoi diagrams of planar sites with Fortune's sweep-line algorithm."""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from compgeom.geometry import EPSILON, Point, distance


@dataclass(frozen=True)
class BoundRectangle:
    """Axis-aligned box that clips the unbounded Voronoi edges."""

    left_x: float
    top_y: float
    right_x: float
    bot_y: float

    def contains(self, point: Point) -> bool:
        return (
            self.left_x <= point.x <= self.right_x
            and self.bot_y <= point.y <= self.top_y
        )


@dataclass(frozen=True)
class VoronoiEdge:
    """A piece of a Voronoi edge and the two sites it separates.

    Edges clipped against the bounding box carry no sites.
    """

    start: Point
    end: Point
    site1: Point | None = None
    site2: Point | None = None


class _EventKind(Enum):
    SITE = "site"
    CIRCLE = "circle"


@dataclass(eq=False)
class _Ray:
    """A breakpoint edge traced by the beach line: a start and a direction."""

    start: Point
    direction: Point


@dataclass(eq=False)
class _Arc:
    site: Point
    prev_arc: _Arc | None = None
    next_arc: _Arc | None = None
    prev_edge: _Ray | None = None
    next_edge: _Ray | None = None
    events: list[_Event] = field(default_factory=list)

    def invalidate_events(self) -> None:
        for event in self.events:
            event.valid = False
        self.events.clear()


@dataclass(eq=False)
class _Event:
    kind: _EventKind
    site: Point
    arc: _Arc | None = None
    center: Point | None = None
    valid: bool = True


def _perpendicular(v: Point) -> Point:
    return Point(v.y, -v.x)


def _arc_y(focus: Point, point: Point) -> float:
    """Height at ``point.x`` of the parabola of ``focus`` with directrix ``point.y``."""
    if math.isclose(focus.y, point.y, abs_tol=EPSILON):
        return math.inf
    if math.isclose(focus.x, point.x, abs_tol=EPSILON):
        return (focus.y + point.y) / 2
    dp = 2 * (focus.y - point.y)
    return (point.x - focus.x) ** 2 / dp + (focus.y + point.y) / 2


def _ray_intersection(a: _Ray, b: _Ray) -> Point | None:
    d1, d2 = a.direction, b.direction
    denom = d1.x * d2.y - d1.y * d2.x
    if abs(denom) <= EPSILON:
        return None
    w = b.start - a.start
    t = (w.x * d2.y - w.y * d2.x) / denom
    s = (w.x * d1.y - w.y * d1.x) / denom
    if t < -EPSILON or s < -EPSILON:
        return None
    return Point(a.start.x + t * d1.x, a.start.y + t * d1.y)


def _clip_ray(ray: _Ray, bounds: BoundRectangle) -> Point | None:
    start, d = ray.start, ray.direction
    if not bounds.contains(start):
        return None
    limits = []
    if d.x > 0:
        limits.append((bounds.right_x - start.x) / d.x)
    elif d.x < 0:
        limits.append((bounds.left_x - start.x) / d.x)
    if d.y > 0:
        limits.append((bounds.top_y - start.y) / d.y)
    elif d.y < 0:
        limits.append((bounds.bot_y - start.y) / d.y)
    if not limits:
        return None
    t = min(limits)
    return Point(start.x + t * d.x, start.y + t * d.y)


class _Fortune:
    def __init__(self) -> None:
        self._queue: list[tuple[float, float, int, _Event]] = []
        self._counter = itertools.count()
        self._beach: list[_Arc | _Ray] = []
        self._sweep_y = math.inf
        self.edges: list[VoronoiEdge] = []

    def _push(self, event: _Event) -> None:
        entry = (-event.site.y, -event.site.x, next(self._counter), event)
        heapq.heappush(self._queue, entry)

    def run(self, sites: Sequence[Point], bounds: BoundRectangle) -> list[VoronoiEdge]:
        for site in dict.fromkeys(sites):
            self._push(_Event(_EventKind.SITE, site))
        while self._queue:
            event = heapq.heappop(self._queue)[3]
            if not event.valid:
                continue
            self._sweep_y = event.site.y
            if event.kind is _EventKind.SITE:
                self._site_event(event.site)
            else:
                self._circle_event(event)
        for item in self._beach:
            if isinstance(item, _Ray):
                end = _clip_ray(item, bounds)
                if end is not None:
                    self.edges.append(VoronoiEdge(item.start, end))
        return self.edges

    def _arc_above(self, point: Point) -> int:
        best_index = 0
        best_y = math.inf
        found_greater_x = False
        for index, item in enumerate(self._beach):
            if not isinstance(item, _Arc):
                continue
            y = _arc_y(item.site, point)
            if y < best_y or (
                math.isclose(y, best_y, abs_tol=EPSILON) and not found_greater_x
            ):
                best_index, best_y = index, y
                found_greater_x = False
            elif item.site.x > point.x:
                found_greater_x = True
        return best_index

    def _site_event(self, site: Point) -> None:
        if not self._beach:
            self._beach.append(_Arc(site))
            return
        index = self._arc_above(site)
        new_arc = self._split_arc(index, site)
        self._check_circle(new_arc.prev_arc)
        self._check_circle(new_arc.next_arc)

    def _split_arc(self, index: int, site: Point) -> _Arc:
        old = self._beach[index]
        y = _arc_y(old.site, site)
        if math.isinf(y):
            start = Point((old.site.x + site.x) / 2, site.y)
        else:
            start = Point(site.x, y)
        direction = _perpendicular(site - old.site)
        left_edge = _Ray(start, direction)
        right_edge = _Ray(start, Point(-direction.x, -direction.y))

        left_arc = _Arc(old.site, prev_arc=old.prev_arc, prev_edge=old.prev_edge)
        right_arc = _Arc(old.site, next_arc=old.next_arc, next_edge=old.next_edge)
        new_arc = _Arc(site, left_arc, right_arc, left_edge, right_edge)
        left_arc.next_arc, left_arc.next_edge = new_arc, left_edge
        right_arc.prev_arc, right_arc.prev_edge = new_arc, right_edge

        if old.prev_arc is not None:
            old.prev_arc.next_arc = left_arc
        if old.next_arc is not None:
            old.next_arc.prev_arc = right_arc

        old.invalidate_events()
        self._beach[index : index + 1] = [
            left_arc,
            left_edge,
            new_arc,
            right_edge,
            right_arc,
        ]
        return new_arc

    def _check_circle(self, arc: _Arc | None) -> None:
        if arc is None or arc.prev_arc is None or arc.next_arc is None:
            return
        center = _ray_intersection(arc.prev_edge, arc.next_edge)
        if center is None:
            return
        event_y = center.y - distance(center, arc.site)
        if event_y > self._sweep_y + EPSILON:
            return
        if any(e.site.y >= event_y for e in arc.events):
            return
        arc.invalidate_events()
        event = _Event(_EventKind.CIRCLE, Point(center.x, event_y), arc, center)
        arc.events.append(event)
        self._push(event)

    def _circle_event(self, event: _Event) -> None:
        arc = event.arc
        center = event.center
        left_arc, right_arc = arc.prev_arc, arc.next_arc
        index = self._beach.index(arc)

        self.edges.append(
            VoronoiEdge(arc.prev_edge.start, center, left_arc.site, arc.site)
        )
        self.edges.append(
            VoronoiEdge(arc.next_edge.start, center, arc.site, right_arc.site)
        )

        new_edge = _Ray(center, _perpendicular(right_arc.site - left_arc.site))
        left_arc.next_arc, left_arc.next_edge = right_arc, new_edge
        right_arc.prev_arc, right_arc.prev_edge = left_arc, new_edge

        for affected in (arc, left_arc, right_arc):
            affected.invalidate_events()
        self._beach[index - 1 : index + 2] = [new_edge]

        self._check_circle(left_arc)
        self._check_circle(right_arc)


def fortune_voronoi(points: Sequence[Point], bounds: BoundRectangle) -> list[VoronoiEdge]:
    """Edges of the Voronoi diagram of ``points``.

    Finished edges carry the two sites they separate; edges still open when
    the sweep ends are clipped against ``bounds`` (and dropped if they start
    outside it) and carry no sites. Duplicate points are ignored.
    """
    return _Fortune().run(points, bounds)