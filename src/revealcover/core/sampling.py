"""Jittered grid point sampling.

Purely uniform sampling tends to cluster points and produces thin, elongated
triangles once triangulated. Placing one random point in each cell of a
coarse grid keeps the points evenly spread while still looking random.
"""

import math

import numpy as np
import structlog

from revealcover.core._validation import validate_count
from revealcover.domain import Canvas, Point

logger = structlog.get_logger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a random source for the samplers.

    Args:
        seed: Seed for reproducible output, None for fresh entropy

    Returns:
        Independent numpy Generator
    """
    return np.random.default_rng(seed)


def sample_points(n: int, w: float, h: float, rng: np.random.Generator) -> list[Point]:
    """Sample n points over the canvas using a jittered grid.

    The grid has ceil(sqrt(n)) columns and ceil(n / columns) rows. Cells are
    visited row by row and each contributes one uniformly placed point until
    n points exist. Should rounding leave the grid short, the remainder is
    drawn uniformly over the whole canvas.

    Args:
        n: Number of points
        w: Canvas width
        h: Canvas height
        rng: Random source, see make_rng

    Returns:
        n points, each within [0, w) x [0, h)
    """
    canvas = Canvas(w, h)
    n = validate_count(n)
    if n == 0:
        return []

    grid_cols = math.ceil(math.sqrt(n))
    grid_rows = math.ceil(n / grid_cols)
    cell_w = canvas.width / grid_cols
    cell_h = canvas.height / grid_rows

    # Largest coordinates still inside the half-open canvas
    max_x = np.nextafter(canvas.width, 0.0)
    max_y = np.nextafter(canvas.height, 0.0)

    points: list[Point] = []
    for row in range(grid_rows):
        for col in range(grid_cols):
            if len(points) >= n:
                break
            x = col * cell_w + rng.uniform(0.0, cell_w)
            y = row * cell_h + rng.uniform(0.0, cell_h)
            points.append(Point(float(min(x, max_x)), float(min(y, max_y))))

    if len(points) < n:
        logger.debug("Grid short of points, filling uniformly", missing=n - len(points))
    while len(points) < n:
        x = rng.uniform(0.0, canvas.width)
        y = rng.uniform(0.0, canvas.height)
        points.append(Point(float(min(x, max_x)), float(min(y, max_y))))

    return points
