"""
Geometry and Record Sources
===========================

Adapters between files on disk and the typed county_zone objects.

Byte-level parsing goes to the standard json and csv modules; this module
only checks structure and converts decoded values into Regions and Records.

Error policy:
- Geometry: any bad feature aborts the whole index build (ValueError)
- Records: a bad row becomes a RecordDecodeError in RecordBatch.errors,
  the remaining rows still load
"""

import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from county_zone import Record, Region, RegionIndex

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("index", "testid", "longitude", "latitude")


class RecordDecodeError(ValueError):
    """Raised when a single record row cannot be decoded."""

    def __init__(self, line: int, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"line {line}: {reason}")


@dataclass
class RecordBatch:
    """Decoded records plus the rows that failed to decode."""

    records: List[Record] = field(default_factory=list)
    errors: List[RecordDecodeError] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


def load_features(path: Path) -> List[Dict[str, Any]]:
    """
    Read a GeoJSON FeatureCollection.

    Args:
        path: Path to the GeoJSON file

    Returns:
        List of feature dictionaries

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the JSON is invalid or not a FeatureCollection
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {path}")

    try:
        with open(path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError(f"{path} is not a GeoJSON FeatureCollection")

    features = data.get("features")
    if not isinstance(features, list):
        raise ValueError(f"{path} has no 'features' list")

    return features


def region_from_feature(
    feature: Mapping[str, Any],
    name_property: str = "navn",
    include_holes: bool = False,
    position: Optional[int] = None
) -> Region:
    """
    Create a Region from one GeoJSON feature.

    Args:
        feature: Feature dict with properties and Polygon geometry
        name_property: Property holding the region name
        include_holes: Treat rings after the first as holes
        position: Feature position, used in error messages

    Raises:
        ValueError: If the feature is structurally invalid
    """
    label = f"Feature {position}" if position is not None else "Feature"

    if not isinstance(feature, Mapping):
        raise ValueError(f"{label} must be an object, got {type(feature).__name__}")

    properties = feature.get("properties") or {}
    if name_property not in properties:
        raise ValueError(f"{label} is missing property '{name_property}'")

    geometry = feature.get("geometry")
    if not isinstance(geometry, Mapping):
        raise ValueError(f"{label} has no geometry")

    geometry_type = geometry.get("type", "Polygon")
    if geometry_type != "Polygon":
        raise ValueError(f"{label} has unsupported geometry type '{geometry_type}'")

    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list):
        raise ValueError(f"{label} has no coordinate array")

    try:
        return Region.from_coordinates(
            name=properties[name_property],
            rings=coordinates,
            include_holes=include_holes,
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"{label}: {e}") from e


def build_index(
    features: Sequence[Mapping[str, Any]],
    name_property: str = "navn",
    include_holes: bool = False,
    max_workers: Optional[int] = None
) -> RegionIndex:
    """
    Create a RegionIndex from GeoJSON features, keeping feature order.

    Nothing is returned unless every feature converts.
    """
    regions = [
        region_from_feature(feature, name_property, include_holes, position)
        for position, feature in enumerate(features)
    ]
    return RegionIndex(regions, max_workers=max_workers)


def decode_record(row: Mapping[str, Any], line: int) -> Record:
    """
    Decode one CSV row into a Record.

    Args:
        row: Mapping with index, testid, longitude, latitude
        line: Source line number, used in errors

    Raises:
        RecordDecodeError: Missing field, non-numeric or non-finite value
    """
    missing = [name for name in RECORD_FIELDS if row.get(name) in (None, "")]
    if missing:
        raise RecordDecodeError(line, f"missing field(s): {', '.join(missing)}")

    try:
        index = int(row["index"])
        testid = int(row["testid"])
        longitude = float(row["longitude"])
        latitude = float(row["latitude"])
    except (TypeError, ValueError) as e:
        raise RecordDecodeError(line, f"invalid value: {e}") from e

    try:
        return Record(index=index, testid=testid, longitude=longitude, latitude=latitude)
    except ValueError as e:
        raise RecordDecodeError(line, str(e)) from e


def load_records(path: Path) -> RecordBatch:
    """
    Read test records containing index, testid, longitude and latitude.

    Args:
        path: Path to the CSV file

    Returns:
        RecordBatch with decoded records and per-row decode errors

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the header lacks a required column
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")

    batch = RecordBatch()

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        header = [name.strip() for name in (reader.fieldnames or [])]
        absent = [name for name in RECORD_FIELDS if name not in header]
        if absent:
            raise ValueError(f"{path} is missing column(s): {', '.join(absent)}")
        reader.fieldnames = header

        for row in reader:
            try:
                batch.records.append(decode_record(row, reader.line_num))
            except RecordDecodeError as e:
                logger.warning(f"Skipping record in {path.name}: {e}")
                batch.errors.append(e)

    return batch
