"""Delaunay triangulation of arbitrary 2D point sets.

The triangulation itself is delegated to Qhull through scipy.spatial.Delaunay.
This module adds the handling Qhull leaves to the caller:

- Degenerate input (fewer than three distinct points, collinear sets) yields
  an empty triangle list instead of an exception
- Coincident points are excluded by Qhull and never appear in a triangle
- Zero-area slivers left by near-coincident points are filtered out
- Every returned triple is oriented to a positive signed area
- Tolerances are relative to the bounding box, so very large, very small or
  elongated point sets behave like a unit square
"""

from collections.abc import Sequence

import numpy as np
import structlog
from scipy.spatial import Delaunay, QhullError

from revealcover.core.geometry import are_collinear
from revealcover.domain import Point

logger = structlog.get_logger(__name__)

Triangle = tuple[int, int, int]

DEFAULT_DEDUP_TOLERANCE = 1e-9
DEFAULT_AREA_TOLERANCE = 1e-12


def triangulate(
    points: Sequence[Point],
    dedup_tolerance: float = DEFAULT_DEDUP_TOLERANCE,
    area_tolerance: float = DEFAULT_AREA_TOLERANCE,
) -> list[Triangle]:
    """Compute the Delaunay triangulation of a point set.

    Tolerances are relative to the bounding box of the point set:
    dedup_tolerance to each of its sides, area_tolerance to its area.

    Args:
        points: Input points, referenced by index in the result
        dedup_tolerance: Relative distance below which a set counts as collinear
        area_tolerance: Relative area below which a triangle is dropped

    Returns:
        Index triples (i, j, k) into points, each with positive signed area.
        Empty for degenerate input.

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]
        >>> len(triangulate(square))
        2
        >>> triangulate([Point(0, 0), Point(1, 1), Point(2, 2)])
        []
    """
    if len(points) < 3:
        logger.debug("Too few points to triangulate", count=len(points))
        return []

    coords = np.array([p.to_tuple() for p in points], dtype=float)

    if len(np.unique(coords, axis=0)) < 3:
        logger.debug("Too few distinct points to triangulate", count=len(points))
        return []

    extent = np.ptp(coords, axis=0)
    # Collinearity is affine invariant, so test it in the unit box
    if extent.min() == 0.0 or are_collinear(
        (coords - coords.min(axis=0)) / extent, dedup_tolerance
    ):
        logger.debug("Collinear points, no triangulation", count=len(points))
        return []

    # Power-of-two scaling is exact and keeps Qhull away from overflow
    exponent = int(np.frexp(extent.max())[1])
    scaled = np.ldexp(coords, -exponent)

    try:
        delaunay = Delaunay(scaled)
    except QhullError as e:
        logger.warning("Qhull failed to triangulate", count=len(points), error=str(e))
        return []

    scaled_extent = np.ldexp(extent, -exponent)
    min_area = area_tolerance * float(scaled_extent[0] * scaled_extent[1])
    triangles: list[Triangle] = []
    dropped = 0

    for simplex in delaunay.simplices:
        i, j, k = (int(v) for v in simplex)
        (ax, ay), (bx, by), (cx, cy) = scaled[i], scaled[j], scaled[k]
        area = ((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2.0
        if abs(area) <= min_area:
            dropped += 1
            continue
        triangles.append((i, j, k) if area > 0 else (i, k, j))

    if dropped:
        logger.debug("Dropped degenerate triangles", dropped=dropped, kept=len(triangles))

    return triangles
