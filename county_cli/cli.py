"""
County Lookup CLI - Main entry point.

Provides command-line access to LookupService: resolve a single point,
resolve a CSV of records, or list the loaded regions.
"""

import argparse
import csv
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from county_processor import LookupConfig, LookupService
from county_processor.logging import LogEvent, create_logger


def build_config(args: argparse.Namespace) -> LookupConfig:
    """
    Build LookupConfig from an optional YAML file plus CLI overrides.

    Raises:
        ValueError: If neither --config nor --counties is given
    """
    overrides = {}
    if args.counties:
        overrides["counties_path"] = Path(args.counties)
    if args.name_property:
        overrides["name_property"] = args.name_property
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.include_holes:
        overrides["include_holes"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level

    if args.config:
        config = LookupConfig.from_yaml(Path(args.config))
        return dataclasses.replace(config, **overrides) if overrides else config

    if "counties_path" not in overrides:
        raise ValueError("Either --config or --counties is required")

    overrides.setdefault("log_level", "WARNING")
    return LookupConfig(**overrides)


def write_matches(service: LookupService, csv_path: Path, output) -> None:
    """Resolve a record CSV and write testid,county rows."""
    batch, matches = service.lookup_record_file(csv_path)

    writer = csv.writer(output)
    writer.writerow(["testid", "county"])
    for record, match in zip(batch.records, matches):
        writer.writerow([record.testid, match.name if match else ""])

    service.logger.info(
        event=LogEvent.RECORDS_WRITTEN,
        message=f"Wrote {len(matches)} results",
        metadata={
            'rows': len(matches),
            'matched': sum(1 for m in matches if m is not None),
            'skipped': len(batch.errors),
        }
    )

    if batch.errors:
        print(f"⚠️  Skipped {len(batch.errors)} malformed record(s)", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="county-lookup",
        description="County Lookup - Resolve coordinates to the county that contains them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single point (latitude, longitude)
  county-lookup --counties data/kommuner.geojson point 60.524035 5.552604

  # CSV with index,testid,longitude,latitude columns
  county-lookup --config config/lookup.yaml records data/records.csv -o out.csv

  # List regions in priority order
  county-lookup --config config/lookup.yaml regions
"""
    )

    # Global arguments
    parser.add_argument("--config", help="Path to lookup config YAML")
    parser.add_argument("--counties", help="GeoJSON FeatureCollection (overrides config)")
    parser.add_argument("--name-property", help="Property holding the county name (default: navn)")
    parser.add_argument("--workers", type=int, help="Batch worker count (default: CPU count)")
    parser.add_argument("--include-holes", action="store_true", help="Treat inner rings as holes")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for structured logs on stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    point = subparsers.add_parser("point", help="Resolve a single point")
    point.add_argument("latitude", type=float)
    point.add_argument("longitude", type=float)

    records = subparsers.add_parser("records", help="Resolve a CSV of records")
    records.add_argument("csv", help="CSV with index,testid,longitude,latitude")
    records.add_argument("-o", "--output", help="Output CSV (default: stdout)")

    subparsers.add_parser("regions", help="List loaded regions")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=getattr(logging, args.log_level or "WARNING"))
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Invalid configuration",
            exc_info=e,
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    try:
        service = LookupService(config)
        service.setup()

        if args.command == "point":
            name = service.lookup_point(args.latitude, args.longitude)
            if name is None:
                print("-")
                return 2
            print(name)

        elif args.command == "records":
            if args.output:
                with open(args.output, "w", newline="", encoding="utf-8") as f:
                    write_matches(service, Path(args.csv), f)
            else:
                write_matches(service, Path(args.csv), sys.stdout)

        elif args.command == "regions":
            for region in service.index:
                min0, min1, max0, max1 = region.polygon.bounds
                print(
                    f"{region.name}\t"
                    f"lat=[{min0:.6f}, {max0:.6f}] lon=[{min1:.6f}, {max1:.6f}]\t"
                    f"holes={len(region.polygon.holes)}"
                )

    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
