"""
Region Index Module
===================

Ordered, immutable collection of Regions.

Design:
- First match wins: regions are scanned in construction order and the
  scan stops at the first region that contains the point
- Overlaps are settled by list order, not by area or best fit
- Immutable after construction, so batch workers share it without locks
- Linear scan; suited to tens or low hundreds of regions
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from county_zone.batch import BatchResolver
from county_zone.geometry.shapes import PointLike
from county_zone.records import Record, RecordMatch
from county_zone.region import Region

logger = logging.getLogger(__name__)


class RegionIndex:
    """
    Read-only lookup over an ordered list of regions.

    Usage:
        index = RegionIndex([osteroy, vaksdal], max_workers=4)

        index.resolve((60.524035, 5.552604))      # "Osterøy"
        index.resolve_record(record)              # RecordMatch(testid, "Osterøy")
        index.resolve_all(points)                 # [Optional[str], ...]
        index.resolve_all_records(records)        # [Optional[RecordMatch], ...]

    Thread Safety:
        All methods only read. Regions are frozen and the region tuple is
        never replaced.
    """

    def __init__(self, regions: Sequence[Region], max_workers: Optional[int] = None):
        """
        Args:
            regions: Regions in priority order (first listed wins)
            max_workers: Pool size for batch lookups (default: os.cpu_count())

        Raises:
            ValueError: If regions is empty
            TypeError: If an element is not a Region
        """
        regions = tuple(regions)
        if not regions:
            raise ValueError("RegionIndex requires at least one region")
        for region in regions:
            if not isinstance(region, Region):
                raise TypeError(f"Expected Region, got {type(region).__name__}")

        self._regions: Tuple[Region, ...] = regions
        self._point_batch = BatchResolver(self.resolve, max_workers=max_workers)
        self._record_batch = BatchResolver(self.resolve_record, max_workers=max_workers)

        logger.debug(f"RegionIndex built with {len(regions)} regions")

    @property
    def regions(self) -> Tuple[Region, ...]:
        return self._regions

    @property
    def names(self) -> List[str]:
        """Region names in priority order."""
        return [region.name for region in self._regions]

    @property
    def max_workers(self) -> int:
        return self._point_batch.max_workers

    def resolve(self, point: PointLike) -> Optional[str]:
        """
        Lookup the region (if any) for a point.

        Args:
            point: Point or (lat, lon) pair

        Returns:
            Name of the first region containing the point, or None
        """
        for region in self._regions:
            name = region.resolve(point)
            if name is not None:
                return name
        return None

    def resolve_record(self, record: Record) -> Optional[RecordMatch]:
        """
        Lookup the region (if any) for a record.

        Returns:
            (testid, name) of the first region containing the record, or None

        Raises:
            TypeError: If record is not a Record
        """
        if not isinstance(record, Record):
            raise TypeError(f"Expected Record, got {type(record).__name__}")
        for region in self._regions:
            match = region.resolve_record(record)
            if match is not None:
                return match
        return None

    def resolve_all(self, points: Sequence[PointLike]) -> List[Optional[str]]:
        """Lookup multiple points in parallel; result[i] belongs to points[i]."""
        return self._point_batch.map(points)

    def resolve_all_records(self, records: Sequence[Record]) -> List[Optional[RecordMatch]]:
        """Lookup multiple records in parallel; result[i] belongs to records[i]."""
        return self._record_batch.map(records)

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __contains__(self, name: object) -> bool:
        return any(region.name == name for region in self._regions)

    def __repr__(self) -> str:
        return f"RegionIndex(regions={len(self._regions)}, max_workers={self.max_workers})"
