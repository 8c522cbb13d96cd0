"""Geometric predicates used by the covering generators.

This module provides small pure helpers for:
- Triangle orientation
- Collinearity of a point set

All functions are pure and stateless.
"""

import numpy as np

from revealcover.domain import Point


def triangle_signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of triangle abc, same sign convention as Polygon.signed_area."""
    return ((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0


def are_collinear(coords: np.ndarray, tolerance: float) -> bool:
    """Check whether all points lie on a single line.

    Args:
        coords: Array of shape (n, 2)
        tolerance: Maximum distance from the best-fit line

    Returns:
        True for fewer than three points or a (near) collinear set
    """
    if len(coords) < 3:
        return True

    centered = coords - coords.mean(axis=0)
    # Smallest singular value measures spread perpendicular to the main axis
    singular_values = np.linalg.svd(centered, compute_uv=False)
    spread = singular_values[-1] / np.sqrt(len(coords))
    return bool(spread <= tolerance)
