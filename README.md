# compgeom

Classic computational geometry algorithms written in Python. The package
uses only the standard library.

## Modules

- `compgeom.geometry`: the frozen `Point` dataclass (`x`, `y`, and `z`,
  which defaults to 0; subtracting two points gives the difference vector)
  and the basic predicates. `cross2d`, `left`, `right`, `left_or_between`
  and `collinear` test orientation in the XY plane with the tolerance
  `EPSILON`. `polar_angle` and `angle_between` return degrees. The module
  also has `distance`, `distance_to_line`, `signed_volume` and `coplanar`.
- `compgeom.dcel`: a doubly connected edge list with `Vertex`, `HalfEdge`,
  `Face` and `Polygon`. `Polygon(points)` orders the vertices
  counter-clockwise and raises `ValueError` when given fewer than three
  points. `Polygon.split(v1, v2)` adds a diagonal and returns the new face.
  It raises `ValueError` when the vertices are adjacent or have no face in
  common. `Polygon.edge_list()` returns each undirected edge once.
  `Face.edges()` and `Face.points()` walk the boundary of a face.
- `compgeom.monotone`: `categorize_vertex` sorts each vertex into a
  `VertexCategory` (start, end, regular, split, merge). `monotone_partition`
  adds diagonals to a `Polygon` in place and returns the y-monotone pieces
  as new `Polygon` objects.
- `compgeom.triangulation`: `triangulate_monotone(polygon)` triangulates a
  y-monotone `Polygon` in place. `triangulate_ear_clipping(points)`
  triangulates a simple polygon given as points. Both return the diagonals
  they add as pairs of points.
- `compgeom.convexhull2d`: four planar hull algorithms.
  - `gift_wrapping` returns the hull counter-clockwise, starting from the
    bottom-most point.
  - `modified_grahams` returns the hull clockwise, starting from the
    left-most point.
  - `incremental` returns the hull counter-clockwise. It raises
    `ValueError` when given fewer than three points.
  - `quickhull` returns the hull points in no particular order.

  `gift_wrapping`, `modified_grahams` and `quickhull` return an empty list
  when given three points or fewer.
- `compgeom.convexhull3d`: `convex_hull_3d(points)` builds the hull in
  space incrementally. It returns triangular `HullFace` objects, each with
  its vertices counter-clockwise as seen from outside and its `HullEdge`
  objects. It raises `CoplanarPointsError`, a subclass of `ValueError`,
  when all the points lie in one plane. It raises `ValueError` when given
  fewer than four points.
- `compgeom.voronoi`: `fortune_voronoi(points, bounds)` runs Fortune's
  sweep and returns `VoronoiEdge` objects (`start`, `end`, `site1`,
  `site2`).
  - Finished edges carry the two sites they separate.
  - Edges still open when the sweep ends are clipped to the
    `BoundRectangle(left_x, top_y, right_x, bot_y)` and carry no sites.
    Such an edge is dropped if it starts outside the rectangle.
- `compgeom.quadtree`: `QuadTree(points, bounds)` splits an
  `AABB(x_min, x_max, y_min, y_max)` until every leaf `QuadNode` holds at
  most one point. It raises `ValueError` on duplicate points or points
  outside the bounds. `balance()` splits leaves until neighbouring leaves
  differ by at most one level. `segments()` returns the sides of the box
  followed by the split lines of every inner node.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Convex hull of a point set:

```python
from compgeom.geometry import Point
from compgeom.convexhull2d import modified_grahams

points = [Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)]
hull = modified_grahams(points)
```

Partition a polygon into monotone pieces and triangulate each piece:

```python
from compgeom.geometry import Point
from compgeom.dcel import Polygon
from compgeom.monotone import monotone_partition
from compgeom.triangulation import triangulate_monotone

polygon = Polygon([Point(0.2, 0.4), Point(0.6, 0.2), Point(0.8, 0.5),
                   Point(0.9, 0.7), Point(0.5, 0.9), Point(0.4, 0.6)])
for piece in monotone_partition(polygon):
    diagonals = triangulate_monotone(piece)
```

Ear clipping returns the diagonals it adds:

```python
from compgeom.triangulation import triangulate_ear_clipping

diagonals = triangulate_ear_clipping(points)
```

A 3D hull:

```python
from compgeom.convexhull3d import convex_hull_3d

faces = convex_hull_3d([Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0),
                        Point(0, 0, 1), Point(1, 1, 1)])
```

A balanced quad tree and the segments that draw it:

```python
from compgeom.quadtree import AABB, QuadTree

tree = QuadTree(points, AABB(-1.0, 3.0, -1.0, 3.0))
tree.balance()
segments = tree.segments()
```

A Voronoi diagram inside a bounding rectangle:

```python
from compgeom.voronoi import BoundRectangle, fortune_voronoi

edges = fortune_voronoi(points, BoundRectangle(-1.0, 1.0, 1.0, -1.0))
```

## Limits

- The package computes geometry only. It does not draw or display
  anything and has no command-line program. Its results are plain points,
  segments and faces, which you can pass to a plotting library of your
  choice.
- Several of the algorithms assume general position: no duplicate points
  and no three collinear points. Results on degenerate input are not
  guaranteed.