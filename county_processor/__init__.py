"""
county_processor - Lookup service around county_zone

This package loads region geometry and records from disk, builds the
region index once, and runs single and batch lookups with structured
logging.

Architecture:
- LookupService: Main orchestrator
- LookupConfig: Configuration management (YAML)
- sources: GeoJSON / CSV adapters into Regions and Records
- logging: Structured JSON logging
"""

from county_processor.config import LookupConfig
from county_processor.sources import (
    RecordBatch,
    RecordDecodeError,
    build_index,
    decode_record,
    load_features,
    load_records,
    region_from_feature,
)
from county_processor.service import LookupService

__all__ = [
    "LookupConfig",
    "LookupService",
    "RecordBatch",
    "RecordDecodeError",
    "build_index",
    "decode_record",
    "load_features",
    "load_records",
    "region_from_feature",
]
