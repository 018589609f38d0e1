"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Ring vertices stored as read-only Nx2 float64 arrays
- Axis convention fixed here: axis0 = latitude, axis1 = longitude
- Thread-safe by design (immutability)
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D coordinate.

    Attributes:
        axis0: Latitude-like coordinate
        axis1: Longitude-like coordinate
    """

    axis0: float
    axis1: float

    def __post_init__(self):
        """Coerce to float and reject non-finite values."""
        axis0 = float(self.axis0)
        axis1 = float(self.axis1)
        if not (math.isfinite(axis0) and math.isfinite(axis1)):
            raise ValueError(
                f"Point coordinates must be finite, got ({self.axis0}, {self.axis1})"
            )
        object.__setattr__(self, 'axis0', axis0)
        object.__setattr__(self, 'axis1', axis1)

    def as_tuple(self) -> Tuple[float, float]:
        """Return (axis0, axis1)."""
        return (self.axis0, self.axis1)


PointLike = Union[Point, Tuple[float, float], Sequence[float]]


def as_point(value: PointLike) -> Point:
    """
    Normalize a Point or an (axis0, axis1) pair to a Point.

    Raises:
        TypeError: If value is not a Point or a 2-element sequence
        ValueError: If coordinates are not finite numbers
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)) or not hasattr(value, '__len__'):
        raise TypeError(f"Expected Point or (axis0, axis1) pair, got {type(value).__name__}")
    if len(value) != 2:
        raise ValueError(f"Expected 2 coordinates, got {len(value)}")
    return Point(value[0], value[1])


def lonlat_to_point(longitude: float, latitude: float) -> Point:
    """
    Project a (longitude, latitude) source pair onto the internal axis order.

    Every ingestion path goes through this function, so the swap happens
    in exactly one place.

    Returns:
        Point(axis0=latitude, axis1=longitude)
    """
    return Point(axis0=latitude, axis1=longitude)


@dataclass(frozen=True, eq=False)
class Ring:
    """
    Immutable closed boundary.

    Closure is implicit: the last vertex connects back to the first. A
    repeated closing vertex (as GeoJSON writes it) is accepted and only
    adds a zero-length edge.

    Attributes:
        vertices: Nx2 array of (axis0, axis1) vertices, N >= 3
    """

    vertices: np.ndarray

    def __post_init__(self):
        """Validate and freeze vertices."""
        try:
            vertices = np.array(self.vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Ring vertices must be numeric pairs: {e}") from e

        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise ValueError(f"Ring vertices must be Nx2 array, got shape {vertices.shape}")
        if len(vertices) < 3:
            raise ValueError(f"Ring must have at least 3 vertices, got {len(vertices)}")
        if not np.isfinite(vertices).all():
            raise ValueError("Ring vertices must be finite")

        # Private copy, read-only
        vertices.flags.writeable = False
        object.__setattr__(self, 'vertices', vertices)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "Ring":
        """Build a ring from Point objects."""
        return cls(vertices=np.array([p.as_tuple() for p in points], dtype=np.float64))

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_axis0, min_axis1, max_axis0, max_axis1)"""
        mins = self.vertices.min(axis=0)
        maxs = self.vertices.max(axis=0)
        return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Immutable polygon: one exterior ring plus optional holes.

    Points inside a hole are outside the polygon.

    Attributes:
        exterior: Outer boundary
        holes: Interior rings excluded from the polygon
    """

    exterior: Ring
    holes: Tuple[Ring, ...] = ()

    def __post_init__(self):
        """Validate ring types."""
        if not isinstance(self.exterior, Ring):
            raise TypeError(f"exterior must be Ring, got {type(self.exterior).__name__}")
        holes = tuple(self.holes)
        for hole in holes:
            if not isinstance(hole, Ring):
                raise TypeError(f"holes must contain Ring, got {type(hole).__name__}")
        object.__setattr__(self, 'holes', holes)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box of the exterior ring."""
        return self.exterior.bounds
