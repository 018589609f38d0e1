"""
Lookup Service - County lookup orchestrator.

This module provides the LookupService class which builds the region
index once from configuration and then answers single and batch lookups.

Lifecycle:
1. setup(): read GeoJSON, build the immutable RegionIndex
2. lookup_*(): any number of queries, from any number of threads

Threading Model:
- Caller thread builds the index
- Batch lookups fan out over BatchResolver's ThreadPoolExecutor
- The index is never mutated after setup(), so no locks are held
"""

import logging
import time
from pathlib import Path
from typing import List, Optional, Sequence

from county_zone import Record, RecordMatch, RegionIndex
from county_zone.geometry.shapes import PointLike
from county_processor.config import LookupConfig
from county_processor.logging import LogEvent, StructuredLogger
from county_processor.sources import RecordBatch, build_index, load_features, load_records


class LookupService:
    """
    County lookup service.

    Usage:
        config = LookupConfig.from_yaml("config/lookup.yaml")
        service = LookupService(config)
        service.setup()

        service.lookup_point(60.524035, 5.552604)   # "Osterøy"
        batch, matches = service.lookup_record_file("records.csv")
    """

    def __init__(self, config: LookupConfig, logger: Optional[StructuredLogger] = None):
        """
        Args:
            config: Lookup configuration
            logger: Structured logger (default: component "service")
        """
        self.config = config
        self.logger = logger or StructuredLogger(
            component="service",
            level=getattr(logging, config.log_level),
        )
        self._index: Optional[RegionIndex] = None

    @property
    def index(self) -> RegionIndex:
        """The built index; setup() must run first."""
        if self._index is None:
            raise RuntimeError("LookupService.setup() has not been called")
        return self._index

    def setup(self) -> RegionIndex:
        """
        Build the region index from config.counties_path.

        Raises:
            FileNotFoundError, ValueError: Geometry could not be loaded.
                No index is published in that case.
        """
        if self._index is not None:
            return self._index

        self.logger.info(
            event=LogEvent.INDEX_LOADING,
            message="Loading region geometry",
            metadata={'path': str(self.config.counties_path)}
        )

        started = time.perf_counter()
        try:
            features = load_features(self.config.counties_path)
            index = build_index(
                features,
                name_property=self.config.name_property,
                include_holes=self.config.include_holes,
                max_workers=self.config.max_workers,
            )
        except ValueError as e:
            self.logger.error(
                event=LogEvent.GEOMETRY_ERROR,
                message="Failed to build region index",
                metadata={'path': str(self.config.counties_path)},
                exc_info=e,
            )
            raise

        self._index = index
        self.logger.info(
            event=LogEvent.INDEX_BUILT,
            message=f"Region index ready with {len(index)} regions",
            metadata={
                'regions': len(index),
                'max_workers': index.max_workers,
                'elapsed_ms': round((time.perf_counter() - started) * 1000, 2),
            }
        )
        return index

    def lookup_point(self, latitude: float, longitude: float) -> Optional[str]:
        """Resolve one (latitude, longitude) point."""
        name = self.index.resolve((latitude, longitude))

        if name is None:
            self.logger.debug(
                event=LogEvent.LOOKUP_NO_MATCH,
                message="Point outside every region",
                metadata={'latitude': latitude, 'longitude': longitude}
            )
        else:
            self.logger.debug(
                event=LogEvent.LOOKUP_RESOLVED,
                message=f"Point resolved to {name}",
                metadata={'latitude': latitude, 'longitude': longitude, 'region': name}
            )
        return name

    def lookup_points(self, points: Sequence[PointLike]) -> List[Optional[str]]:
        """Resolve (latitude, longitude) points in parallel, preserving order."""
        self._log_batch_started(len(points), kind="points")
        started = time.perf_counter()
        results = self.index.resolve_all(points)
        self._log_batch_completed(results, started, kind="points")
        return results

    def lookup_records(self, records: Sequence[Record]) -> List[Optional[RecordMatch]]:
        """Resolve records in parallel, preserving order."""
        self._log_batch_started(len(records), kind="records")
        started = time.perf_counter()
        results = self.index.resolve_all_records(records)
        self._log_batch_completed(results, started, kind="records")
        return results

    def lookup_record_file(self, csv_path: Path) -> tuple[RecordBatch, List[Optional[RecordMatch]]]:
        """
        Load a record CSV and resolve every decodable row.

        Returns:
            (batch, matches) where matches[i] belongs to batch.records[i]
        """
        batch = load_records(csv_path)

        for error in batch.errors:
            self.logger.warning(
                event=LogEvent.RECORD_DECODE_ERROR,
                message=f"Skipped malformed record: {error.reason}",
                metadata={'path': str(csv_path), 'line': error.line}
            )

        self.logger.info(
            event=LogEvent.RECORDS_LOADED,
            message=f"Loaded {len(batch.records)} records",
            metadata={
                'path': str(csv_path),
                'records': len(batch.records),
                'errors': len(batch.errors),
            }
        )

        return batch, self.lookup_records(batch.records)

    def _log_batch_started(self, size: int, kind: str) -> None:
        self.logger.info(
            event=LogEvent.BATCH_STARTED,
            message=f"Resolving {size} {kind}",
            metadata={'size': size, 'kind': kind, 'max_workers': self.index.max_workers}
        )

    def _log_batch_completed(self, results: list, started: float, kind: str) -> None:
        unmatched = sum(1 for result in results if result is None)
        self.logger.info(
            event=LogEvent.BATCH_COMPLETED,
            message=f"Resolved {len(results)} {kind}",
            metadata={
                'size': len(results),
                'kind': kind,
                'unmatched': unmatched,
                'elapsed_ms': round((time.perf_counter() - started) * 1000, 2),
            }
        )
