"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and spatial queries.

Responsibilities:
- Shape representation (immutable)
- Point-in-polygon tests
- (longitude, latitude) -> (axis0, axis1) projection
- NO state, NO naming, NO batching

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from county_zone.geometry.shapes import Point, Ring, Polygon, as_point, lonlat_to_point
from county_zone.geometry.detector import ContainmentDetector

__all__ = [
    "Point",
    "Ring",
    "Polygon",
    "as_point",
    "lonlat_to_point",
    "ContainmentDetector",
]
