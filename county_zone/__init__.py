"""
County Zone
===========

Bounded Context: Resolving geographic points to the county that contains them.

Design Philosophy:
- Separation of Concerns: Geometry, Regions, Index, Batching separated
- Immutable everything: safe to share across worker threads without locks
- First match wins: region order is priority

Architecture:

    county_zone/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # Point, Ring, Polygon
    │   └── detector.py    # ContainmentDetector (crossing-number test)
    │
    ├── records.py         # Record, RecordMatch
    ├── region.py          # Region (named polygon)
    ├── index.py           # RegionIndex (ordered first-match lookup)
    └── batch.py           # BatchResolver (parallel, order-preserving map)

Usage:

    # 1. Create regions (coordinates in GeoJSON [lon, lat] order)
    from county_zone import Region, RegionIndex

    osteroy = Region.from_coordinates(
        "Osterøy",
        [[[5.3, 60.4], [5.8, 60.4], [5.8, 60.65], [5.3, 60.65]]],
    )
    index = RegionIndex([osteroy])

    # 2. Single lookup, (lat, lon) order
    index.resolve((60.524035, 5.552604))   # "Osterøy"

    # 3. Batch lookup (parallel, result[i] belongs to input[i])
    index.resolve_all([(60.5, 5.5), (0.0, 0.0)])   # ["Osterøy", None]
"""

# Geometry Layer (immutable, stateless)
from county_zone.geometry.shapes import Point, Ring, Polygon, as_point, lonlat_to_point
from county_zone.geometry.detector import ContainmentDetector

# Domain
from county_zone.records import Record, RecordMatch
from county_zone.region import Region
from county_zone.index import RegionIndex
from county_zone.batch import BatchResolver

__all__ = [
    # Geometry
    "Point",
    "Ring",
    "Polygon",
    "as_point",
    "lonlat_to_point",
    "ContainmentDetector",
    # Domain
    "Record",
    "RecordMatch",
    "Region",
    "RegionIndex",
    "BatchResolver",
]

__version__ = "1.0.0"
