"""Point quadtrees over an axis-aligned box, with 2:1 balancing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from compgeom.geometry import Point

_QUADRANTS = ("nw", "ne", "sw", "se")

# For each direction: the sibling that lies that way inside the same parent.
_SIBLING = {
    "north": {"sw": "nw", "se": "ne"},
    "south": {"nw": "sw", "ne": "se"},
    "east": {"nw": "ne", "sw": "se"},
    "west": {"ne": "nw", "se": "sw"},
}

# For each direction: which child of the parent's neighbour borders the node.
_MIRROR = {
    "north": {"nw": "sw", "ne": "se"},
    "south": {"sw": "nw", "se": "ne"},
    "east": {"ne": "nw", "se": "sw"},
    "west": {"nw": "ne", "sw": "se"},
}

# Children of a neighbour that touch the node looking in each direction.
_FACING_CHILDREN = {
    "north": ("sw", "se"),
    "south": ("nw", "ne"),
    "west": ("ne", "se"),
    "east": ("nw", "sw"),
}

_DIRECTIONS = ("north", "south", "west", "east")


@dataclass(frozen=True)
class AABB:
    """Axis-aligned bounding box."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def contains(self, point: Point) -> bool:
        """True if the point lies in the box, boundary included."""
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max

    def _quarters(self) -> dict[str, AABB]:
        x_mid = (self.x_min + self.x_max) / 2
        y_mid = (self.y_min + self.y_max) / 2
        return {
            "nw": AABB(self.x_min, x_mid, y_mid, self.y_max),
            "ne": AABB(x_mid, self.x_max, y_mid, self.y_max),
            "sw": AABB(self.x_min, x_mid, self.y_min, y_mid),
            "se": AABB(x_mid, self.x_max, self.y_min, y_mid),
        }


@dataclass(eq=False)
class QuadNode:
    """A node of the tree; leaves hold at most one point."""

    box: AABB
    point: Point | None = None
    parent: QuadNode | None = None
    quadrant: str | None = None
    children: dict[str, QuadNode] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def _subdivide(node: QuadNode) -> dict[str, QuadNode]:
    node.children = {
        name: QuadNode(box, parent=node, quadrant=name)
        for name, box in node.box._quarters().items()
    }
    return node.children


def _quadrant_of(children: dict[str, QuadNode], point: Point) -> str:
    return next(
        (name for name in ("nw", "ne", "sw") if children[name].box.contains(point)),
        "se",
    )


def _partition(node: QuadNode, points: list[Point]) -> None:
    if not points:
        return
    if len(points) == 1:
        node.point = points[0]
        return
    children = _subdivide(node)
    groups: dict[str, list[Point]] = {name: [] for name in _QUADRANTS}
    for p in points:
        groups[_quadrant_of(children, p)].append(p)
    for name in _QUADRANTS:
        _partition(children[name], groups[name])


def _neighbor(node: QuadNode, direction: str) -> QuadNode | None:
    """Neighbour of equal or greater size on the given side, or None."""
    if node.parent is None:
        return None
    sibling = _SIBLING[direction].get(node.quadrant)
    if sibling is not None:
        return node.parent.children[sibling]
    u = _neighbor(node.parent, direction)
    if u is None or u.is_leaf:
        return u
    return u.children[_MIRROR[direction][node.quadrant]]


def _needs_split(node: QuadNode) -> bool:
    for direction in _DIRECTIONS:
        nb = _neighbor(node, direction)
        if nb is not None and not nb.is_leaf and any(
            not nb.children[q].is_leaf for q in _FACING_CHILDREN[direction]
        ):
            return True
    return False


class QuadTree:
    """A quadtree that splits ``bounds`` until every leaf holds at most one point."""

    def __init__(self, points: Sequence[Point], bounds: AABB):
        pts = list(points)
        if len(set(pts)) != len(pts):
            raise ValueError("duplicate points cannot be separated by a quadtree")
        outside = [p for p in pts if not bounds.contains(p)]
        if outside:
            raise ValueError(f"point {outside[0]} lies outside the bounds")
        self.bounds = bounds
        self.root: QuadNode | None = None
        if pts:
            self.root = QuadNode(bounds)
            _partition(self.root, pts)

    def _leaves(self) -> Iterator[QuadNode]:
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.extend(node.children[q] for q in reversed(_QUADRANTS))

    def balance(self) -> None:
        """Split leaves until neighbouring leaves differ by at most one level."""
        pending = list(self._leaves())
        while pending:
            leaf = pending.pop()
            if not leaf.is_leaf or not _needs_split(leaf):
                continue
            children = _subdivide(leaf)
            if leaf.point is not None:
                children[_quadrant_of(children, leaf.point)].point = leaf.point
                leaf.point = None
            pending.extend(children[q] for q in _QUADRANTS)
            for direction in _DIRECTIONS:
                nb = _neighbor(leaf, direction)
                if nb is not None and nb.is_leaf and _needs_split(nb):
                    pending.append(nb)

    def segments(self) -> list[tuple[Point, Point]]:
        """The bounding box sides followed by the split lines of every inner node."""
        if self.root is None:
            return []
        box = self.root.box
        bot_left = Point(box.x_min, box.y_min)
        bot_right = Point(box.x_max, box.y_min)
        top_left = Point(box.x_min, box.y_max)
        top_right = Point(box.x_max, box.y_max)
        result = [
            (bot_left, bot_right),
            (bot_right, top_right),
            (top_right, top_left),
            (top_left, bot_left),
        ]
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                continue
            b = node.box
            x_mid = (b.x_min + b.x_max) / 2
            y_mid = (b.y_min + b.y_max) / 2
            result.append((Point(x_mid, b.y_min), Point(x_mid, b.y_max)))
            result.append((Point(b.x_min, y_mid), Point(b.x_max, y_mid)))
            stack.extend(node.children[q] for q in reversed(_QUADRANTS))
        return result