"""Rectangular grid coverings."""

import math

import structlog

from revealcover.core._validation import validate_count
from revealcover.domain import Canvas, Point, Polygon

logger = structlog.get_logger(__name__)


def cover_rectangles(n: int, w: float, h: float) -> list[Polygon]:
    """Partition the canvas into a k x k grid of rectangles, k = isqrt(n).

    Cells are emitted in row-major order. Each quad runs top-left, top-right,
    bottom-right, bottom-left. Steps use exact division so the grid fills the
    canvas with no leftover strip.

    Args:
        n: Approximate number of rectangles
        w: Canvas width
        h: Canvas height

    Returns:
        k*k polygons, empty when n < 1

    Raises:
        InvalidCanvasError: If w or h is not positive
        InvalidShapeCountError: If n is negative
    """
    canvas = Canvas(w, h)
    k = math.isqrt(validate_count(n))
    if k == 0:
        return []

    row_step = canvas.height / k
    col_step = canvas.width / k
    # Shared edge coordinates, the far edges pinned to the canvas bounds
    ys = [row * row_step for row in range(k)] + [canvas.height]
    xs = [col * col_step for col in range(k)] + [canvas.width]

    polygons = []
    for row in range(k):
        top, bottom = ys[row], ys[row + 1]
        for col in range(k):
            left, right = xs[col], xs[col + 1]
            polygons.append(
                Polygon(
                    [
                        Point(left, top),
                        Point(right, top),
                        Point(right, bottom),
                        Point(left, bottom),
                    ]
                )
            )

    logger.debug("Rectangles generated", grid=k, polygons=len(polygons))
    return polygons
