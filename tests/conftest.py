"""Shared fixtures.

Ensures the packages import when running tests without installing them.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())

from county_zone import Polygon, Region, RegionIndex, Ring  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def sample_geojson() -> Path:
    return DATA_DIR / "sample.geojson"


@pytest.fixture
def sample_csv() -> Path:
    return DATA_DIR / "sample.csv"


@pytest.fixture
def square() -> Polygon:
    """Square with vertices (0,0),(0,10),(10,10),(10,0) in (axis0, axis1)."""
    return Polygon(exterior=Ring([(0, 0), (0, 10), (10, 10), (10, 0)]))


@pytest.fixture
def overlapping_index() -> RegionIndex:
    """A listed before B; both contain (5, 5)."""
    a = Region("A", Polygon(exterior=Ring([(0, 0), (0, 10), (10, 10), (10, 0)])))
    b = Region("B", Polygon(exterior=Ring([(2, 2), (2, 20), (20, 20), (20, 2)])))
    return RegionIndex([a, b], max_workers=4)
