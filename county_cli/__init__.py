"""
County Lookup CLI - Command-line interface for LookupService.

Usage:
    county-lookup --counties kommuner.geojson point 60.524035 5.552604
    county-lookup --config config/lookup.yaml records records.csv
    county-lookup --config config/lookup.yaml regions
"""

__version__ = "1.0.0"
