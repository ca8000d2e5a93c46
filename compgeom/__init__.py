"""Computational geometry: polygon triangulation, convex hulls, Voronoi diagrams and quad trees."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "dcel",
    "monotone",
    "triangulation",
    "convexhull2d",
    "convexhull3d",
    "voronoi",
    "quadtree",
]