"""Core covering algorithms for revealcover.

This module contains the covering generators and their building blocks:

- Jittered grid sampling of points over a canvas
- Delaunay triangulation of point sets
- Rectangular and triangular coverings
- Strategy selection

All generators are:
- Stateless (safe to call from several threads, each with its own rng)
- Pure (no I/O, no shared mutable state)

Key functions:
- cover_rectangles: Square grid of quadrilaterals
- cover_triangles: Triangles from a jittered Delaunay mesh
- sample_points: Jittered grid point cloud
- triangulate: Delaunay triangulation returning index triples
- generate_covering: Dispatch on covering kind
- load_covering: Generate and shuffle into reveal order

Key classes:
- CoveringService: Settings-driven covering generation
"""

from revealcover.core.geometry import (
    are_collinear,
    triangle_signed_area,
)
from revealcover.core.rectangles import cover_rectangles
from revealcover.core.sampling import make_rng, sample_points
from revealcover.core.service import CoveringService, generate_covering, load_covering
from revealcover.core.triangles import cover_triangles
from revealcover.core.triangulate import Triangle, triangulate

__all__ = [
    # Service
    "CoveringService",
    "Triangle",
    # Geometry functions
    "are_collinear",
    # Coverers
    "cover_rectangles",
    "cover_triangles",
    "generate_covering",
    "load_covering",
    # Sampling
    "make_rng",
    "sample_points",
    "triangle_signed_area",
    "triangulate",
]
