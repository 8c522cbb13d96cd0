"""Triangular mesh coverings."""

import numpy as np
import structlog

from revealcover.core._validation import validate_count
from revealcover.core.sampling import sample_points
from revealcover.core.triangulate import (
    DEFAULT_AREA_TOLERANCE,
    DEFAULT_DEDUP_TOLERANCE,
    triangulate,
)
from revealcover.domain import Canvas, Polygon

logger = structlog.get_logger(__name__)


def cover_triangles(
    n: int,
    w: float,
    h: float,
    rng: np.random.Generator,
    dedup_tolerance: float = DEFAULT_DEDUP_TOLERANCE,
    area_tolerance: float = DEFAULT_AREA_TOLERANCE,
) -> list[Polygon]:
    """Cover the canvas with triangles from a jittered Delaunay mesh.

    n points are sampled over the canvas and the four corners are added so the
    convex hull is the canvas itself. With no sampled point on the canvas
    border the result holds 2n + 2 triangles.

    Args:
        n: Number of interior points to sample
        w: Canvas width
        h: Canvas height
        rng: Random source, see make_rng
        dedup_tolerance: Passed to triangulate
        area_tolerance: Passed to triangulate

    Returns:
        Triangles in triangulation order, empty when n == 0
    """
    canvas = Canvas(w, h)
    n = validate_count(n)
    if n == 0:
        return []

    points = sample_points(n, canvas.width, canvas.height, rng)
    points.extend(canvas.corners())

    triangles = triangulate(
        points,
        dedup_tolerance=dedup_tolerance,
        area_tolerance=area_tolerance,
    )
    polygons = [Polygon([points[i], points[j], points[k]]) for i, j, k in triangles]

    logger.debug(
        "Triangles generated",
        points=len(points),
        polygons=len(polygons),
        expected=2 * n + 2,
    )
    return polygons
