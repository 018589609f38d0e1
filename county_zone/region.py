"""
Region Module
=============

Bounded Context: Named polygons (counties).

Design:
- SRP: a Region knows its name and its polygon, nothing else
- Delegates containment to ContainmentDetector
- "No match" is a normal outcome (None), never an exception
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from county_zone.geometry.shapes import PointLike, Polygon, Ring, lonlat_to_point
from county_zone.geometry.detector import ContainmentDetector
from county_zone.records import Record, RecordMatch


def _ring_from_lonlat(coordinates: Sequence[Sequence[float]], label: str) -> Ring:
    """Build a Ring from [[lon, lat], ...] source pairs."""
    if len(coordinates) == 0:
        raise ValueError(f"{label} has no coordinates")

    points = []
    for position, pair in enumerate(coordinates):
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(
                f"{label} coordinate {position} must be [longitude, latitude], got {pair!r}"
            )
        try:
            points.append(lonlat_to_point(pair[0], pair[1]))
        except (TypeError, ValueError) as e:
            raise ValueError(f"{label} coordinate {position} is invalid: {e}") from e

    return Ring.from_points(points)


@dataclass(frozen=True, eq=False)
class Region:
    """
    Immutable named polygon.

    Attributes:
        name: Region name (non-empty)
        polygon: Region geometry
    """

    name: str
    polygon: Polygon

    def __post_init__(self):
        """Validate name and geometry."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Region name cannot be empty, got {self.name!r}")
        if not isinstance(self.polygon, Polygon):
            raise TypeError(f"polygon must be Polygon, got {type(self.polygon).__name__}")

    @classmethod
    def from_coordinates(
        cls,
        name: str,
        rings: Sequence[Sequence[Sequence[float]]],
        include_holes: bool = False
    ) -> "Region":
        """
        Create a Region from GeoJSON-ordered polygon coordinates.

        Args:
            name: Region name
            rings: [[[lon, lat], ...], ...]; the first ring is the border
            include_holes: Treat the remaining rings as holes (default: ignore them)

        Returns:
            Region with coordinates swapped to (lat, lon)

        Raises:
            ValueError: On empty name, empty ring array or malformed rings
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Region name cannot be empty, got {name!r}")
        if len(rings) == 0:
            raise ValueError(f"Region '{name}' has an empty coordinate array")

        exterior = _ring_from_lonlat(rings[0], f"Region '{name}' exterior ring")

        holes = ()
        if include_holes:
            holes = tuple(
                _ring_from_lonlat(ring, f"Region '{name}' hole {i}")
                for i, ring in enumerate(rings[1:], start=1)
            )

        return cls(name=name, polygon=Polygon(exterior=exterior, holes=holes))

    def resolve(self, point: PointLike) -> Optional[str]:
        """
        Checks whether a point is in this region.

        Returns:
            Region name, or None if the point is outside
        """
        if ContainmentDetector.contains(self.polygon, point):
            return self.name
        return None

    def resolve_record(self, record: Record) -> Optional[RecordMatch]:
        """
        Lookup a record against this region.

        Returns:
            (testid, name) or None if the record lies outside
        """
        if not isinstance(record, Record):
            raise TypeError(f"Expected Record, got {type(record).__name__}")
        if ContainmentDetector.contains(self.polygon, record.position()):
            return RecordMatch(testid=record.testid, name=self.name)
        return None

    def __repr__(self) -> str:
        return f"Region(name={self.name!r}, vertices={len(self.polygon.exterior)}, holes={len(self.polygon.holes)})"
