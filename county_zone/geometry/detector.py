"""
Containment Detector Module
===========================

Stateless point-in-polygon logic - applies geometry to points.

Design:
- Pure functions (no state)
- Crossing-number test, vectorised over ring edges with numpy
- Thread-safe (no mutations)

Boundary policy (half-open rule):
    An edge (A, B) is crossed by the ray from P toward increasing axis1 when
    exactly one endpoint is strictly above P on axis0, and the edge meets the
    horizontal line through P strictly beyond P on axis1. Points exactly on
    an edge or vertex get whatever this rule yields. For an axis-aligned
    rectangle that means the minimum-axis0 and minimum-axis1 edges are
    inside, the maximum edges are outside.

    Each edge is evaluated with its lower (axis0) endpoint first, so the
    result does not depend on winding direction.
"""

import numpy as np
from typing import Sequence

from county_zone.geometry.shapes import Point, PointLike, Polygon, Ring, as_point


class ContainmentDetector:
    """
    Stateless detector for point-in-polygon queries.

    All methods are static (no instance state).
    """

    @staticmethod
    def ring_contains(ring: Ring, point: Point) -> bool:
        """
        Check if a point is inside a single ring.

        Args:
            ring: Closed boundary
            point: Point to test

        Returns:
            True if the crossing count is odd
        """
        p0, p1 = point.axis0, point.axis1

        start = ring.vertices
        end = np.roll(start, -1, axis=0)  # implicit closing edge

        straddles = (start[:, 0] > p0) != (end[:, 0] > p0)
        if not straddles.any():
            return False

        a = start[straddles]
        b = end[straddles]

        # Lower endpoint first
        swap = a[:, 0] > b[:, 0]
        lo = np.where(swap[:, None], b, a)
        hi = np.where(swap[:, None], a, b)

        # Denominator is non-zero: straddling edges differ on axis0
        crossing = lo[:, 1] + (p0 - lo[:, 0]) * (hi[:, 1] - lo[:, 1]) / (hi[:, 0] - lo[:, 0])

        return bool(np.count_nonzero(crossing > p1) % 2)

    @staticmethod
    def contains(polygon: Polygon, point: PointLike) -> bool:
        """
        Check if a point is inside the exterior ring and outside every hole.

        Args:
            polygon: Polygon geometry
            point: Point or (axis0, axis1) pair

        Returns:
            True if point is inside polygon, False otherwise
        """
        point = as_point(point)

        if not ContainmentDetector.ring_contains(polygon.exterior, point):
            return False

        for hole in polygon.holes:
            if ContainmentDetector.ring_contains(hole, point):
                return False

        return True

    @staticmethod
    def contains_many(polygon: Polygon, points: Sequence[PointLike]) -> np.ndarray:
        """
        Test several points against one polygon.

        Returns:
            Boolean mask of shape (N,) where True = inside polygon
        """
        if len(points) == 0:
            return np.array([], dtype=bool)

        return np.array([
            ContainmentDetector.contains(polygon, p)
            for p in points
        ], dtype=bool)
