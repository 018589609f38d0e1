"""
Record Module
=============

External input rows and their lookup results.

Design:
- Immutable value objects
- position() is the only coordinate projection for records
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

from county_zone.geometry.shapes import Point, lonlat_to_point


class RecordMatch(NamedTuple):
    """Lookup result for a record: echoed testid plus region name."""

    testid: int
    name: str


@dataclass(frozen=True)
class Record:
    """
    One input row from the record source.

    Attributes:
        index: Row index in the source
        testid: 64-bit identifier echoed back in results
        longitude: Longitude-like coordinate
        latitude: Latitude-like coordinate
    """

    index: int
    testid: int
    longitude: float
    latitude: float

    def __post_init__(self):
        """Validate coordinates."""
        if not (math.isfinite(self.longitude) and math.isfinite(self.latitude)):
            raise ValueError(
                f"Record {self.index} has non-finite coordinates "
                f"(longitude={self.longitude}, latitude={self.latitude})"
            )

    def position(self) -> Point:
        """Returns a point with latitude and longitude (in that order)."""
        return lonlat_to_point(self.longitude, self.latitude)
