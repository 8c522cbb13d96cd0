"""Revealcover - Planar coverings for image-reveal games.

Revealcover generates sets of non-overlapping polygons that exactly tile a
rectangular canvas. The polygons act as opaque shapes hiding an image and are
removed one at a time to reveal it.

Two strategies are available:
- Rectangles: a uniform square grid of quadrilaterals
- Triangles: a randomized triangular mesh built from a Delaunay triangulation

Example:
    $ revealcover 800 600 --kind triangles --count 20 --output covering.json
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
