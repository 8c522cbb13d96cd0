"""Unit tests for Delaunay triangulation.

Tests cover:
- Valid triangulations of simple and random point sets
- The empty-circumcircle property
- Degenerate input (too few points, collinear, coincident)
- Orientation of returned triangles
- Very large, very small and elongated point sets
"""

import numpy as np
import pytest

from revealcover.core.geometry import triangle_signed_area
from revealcover.core.triangulate import triangulate
from revealcover.domain import Point


def in_circumcircle(a, b, c, p):
    """Incircle determinant of p against triangle abc, positive when p is inside."""
    ax, ay = a.x - p.x, a.y - p.y
    bx, by = b.x - p.x, b.y - p.y
    cx, cy = c.x - p.x, c.y - p.y

    det = (
        (ax * ax + ay * ay) * (bx * cy - cx * by)
        - (bx * bx + by * by) * (ax * cy - cx * ay)
        + (cx * cx + cy * cy) * (ax * by - bx * ay)
    )
    return det if triangle_signed_area(a, b, c) > 0 else -det


def random_points(n, seed, scale=100.0):
    rng = np.random.default_rng(seed)
    return [Point(float(x), float(y)) for x, y in rng.uniform(0.0, scale, size=(n, 2))]


class TestBasicTriangulation:
    """Tests for well-formed input."""

    def test_single_triangle(self):
        points = [Point(0, 0), Point(10, 0), Point(0, 10)]
        triangles = triangulate(points)

        assert len(triangles) == 1
        assert sorted(triangles[0]) == [0, 1, 2]

    def test_square_gives_two_triangles(self):
        points = [Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)]
        triangles = triangulate(points)

        assert len(triangles) == 2
        total = sum(
            triangle_signed_area(points[i], points[j], points[k]) for i, j, k in triangles
        )
        assert total == pytest.approx(1.0)

    def test_square_with_center(self):
        """A centre point splits the square into four triangles."""
        points = [Point(0, 0), Point(2, 0), Point(0, 2), Point(2, 2), Point(1, 1)]
        triangles = triangulate(points)

        assert len(triangles) == 4
        assert all(4 in t for t in triangles)

    def test_indices_distinct_and_in_range(self):
        points = random_points(40, seed=3)
        for triangle in triangulate(points):
            assert len(set(triangle)) == 3
            assert all(0 <= i < len(points) for i in triangle)

    def test_positive_orientation(self):
        """Every triple is ordered to a positive signed area."""
        points = random_points(60, seed=11)
        for i, j, k in triangulate(points):
            assert triangle_signed_area(points[i], points[j], points[k]) > 0

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_empty_circumcircle(self, seed):
        """No input point lies strictly inside any triangle's circumcircle."""
        points = random_points(50, seed=seed)
        tolerance = 1e-9 * 100.0**4

        for i, j, k in triangulate(points):
            a, b, c = points[i], points[j], points[k]
            for m, p in enumerate(points):
                if m in (i, j, k):
                    continue
                assert in_circumcircle(a, b, c, p) <= tolerance

    def test_euler_count_for_convex_hull_of_four(self):
        """Interior points inside a square hull give 2P - 2 - 4 triangles."""
        rng = np.random.default_rng(5)
        interior = [Point(float(x), float(y)) for x, y in rng.uniform(1, 99, size=(15, 2))]
        corners = [Point(0, 0), Point(100, 0), Point(0, 100), Point(100, 100)]
        points = interior + corners

        assert len(triangulate(points)) == 2 * len(points) - 6


class TestDegenerateInput:
    """Tests for input that has no triangulation."""

    def test_empty(self):
        assert triangulate([]) == []

    def test_two_points(self):
        assert triangulate([Point(0, 0), Point(1, 1)]) == []

    def test_collinear(self):
        points = [Point(float(i), 2.0 * i) for i in range(10)]
        assert triangulate(points) == []

    def test_axis_aligned_collinear(self):
        assert triangulate([Point(0, 5), Point(3, 5), Point(9, 5), Point(4, 5)]) == []

    def test_all_coincident(self):
        assert triangulate([Point(1, 1)] * 5) == []

    def test_only_two_distinct(self):
        assert triangulate([Point(0, 0), Point(0, 0), Point(4, 4)]) == []

    def test_duplicate_corner_is_ignored(self):
        """A point coinciding with a corner never forms a zero-area triangle."""
        points = [
            Point(0, 0),
            Point(10, 0),
            Point(0, 10),
            Point(10, 10),
            Point(0, 0),
            Point(4, 6),
        ]
        triangles = triangulate(points)

        assert triangles
        total = 0.0
        for i, j, k in triangles:
            coords = {points[i], points[j], points[k]}
            assert len(coords) == 3
            area = triangle_signed_area(points[i], points[j], points[k])
            assert area > 0
            total += area
        assert total == pytest.approx(100.0)


class TestScaleAndAspect:
    """Tests for point sets far from unit scale or aspect ratio."""

    def test_thin_strip_is_not_collinear(self):
        """A 1 x 1e9 rectangle with interior points still triangulates."""
        rng = np.random.default_rng(8)
        interior = [
            Point(float(x), float(y))
            for x, y in rng.uniform((0.1, 1e7), (0.9, 9.9e8), size=(6, 2))
        ]
        corners = [Point(0, 0), Point(1, 0), Point(0, 1e9), Point(1, 1e9)]
        points = interior + corners

        triangles = triangulate(points)

        assert len(triangles) == 2 * len(points) - 6
        total = sum(
            triangle_signed_area(points[i], points[j], points[k]) for i, j, k in triangles
        )
        assert total == pytest.approx(1e9, rel=1e-9)

    @pytest.mark.parametrize("scale", [1e150, 1e-150])
    def test_extreme_coordinates(self, scale):
        base = random_points(30, seed=4, scale=1.0)
        points = [Point(p.x * scale, p.y * scale) for p in base]

        triangles = triangulate(points)

        assert len(triangles) == len(triangulate(base))
        for i, j, k in triangles:
            assert triangle_signed_area(points[i], points[j], points[k]) > 0

    def test_power_of_two_scaling_keeps_triangles(self):
        base = random_points(40, seed=6)
        scaled = [Point(p.x * 2.0**-300, p.y * 2.0**-300) for p in base]
        assert triangulate(scaled) == triangulate(base)

    def test_empty_circumcircle_on_wide_set(self):
        """Points are scaled uniformly, so the mesh stays Delaunay in input coordinates."""
        rng = np.random.default_rng(12)
        coords = rng.uniform((0, 0), (1000, 10), size=(40, 2))
        points = [Point(float(x), float(y)) for x, y in coords]

        for i, j, k in triangulate(points):
            a, b, c = points[i], points[j], points[k]
            for m, p in enumerate(points):
                if m in (i, j, k):
                    continue
                assert in_circumcircle(a, b, c, p) <= 1e-9 * 1000.0**4

    def test_rounded_line_is_collinear(self):
        """Rounding noise on a sloped line does not make it two-dimensional."""
        points = [Point(0.1 * i, 0.3 * i) for i in range(10)]
        assert triangulate(points) == []


class TestGeometryHelpers:
    """Tests for the predicates used to validate triangulations."""

    def test_in_circumcircle_sign(self):
        a, b, c = Point(0, 0), Point(2, 0), Point(0, 2)
        assert in_circumcircle(a, b, c, Point(0.5, 0.5)) > 0
        assert in_circumcircle(a, b, c, Point(5, 5)) < 0

    def test_in_circumcircle_orientation_independent(self):
        a, b, c = Point(0, 0), Point(2, 0), Point(0, 2)
        p = Point(1.0, 1.2)
        assert in_circumcircle(a, b, c, p) == pytest.approx(in_circumcircle(a, c, b, p))

    def test_triangle_signed_area(self):
        assert triangle_signed_area(Point(0, 0), Point(4, 0), Point(0, 3)) == 6.0
        assert triangle_signed_area(Point(0, 0), Point(0, 3), Point(4, 0)) == -6.0
