#!/usr/bin/env python3
"""CLI entry point for the UK Travel History parser.

Usage:
    python build_history.py --input travel_history.txt [--output-dir output/]
    python build_history.py --table trips.xlsx [--format xlsx]

Options:
    --input PATH      Home Office travel history export (text)
    --table PATH      Trips table to import (CSV, TSV or XLSX)
    --output-dir DIR  Directory for output files (default: output/)
    --format FMT      Output format: summary, csv, json, xlsx, all (default: all)
    --dry-run         Show stats without writing files
    --quiet           Don't print progress to stderr
"""

import argparse
import sys
from pathlib import Path

from uk_travel_history.config import OUTPUT_DIR
from uk_travel_history.pipeline import run_pipeline
from uk_travel_history.output import (
    format_summary,
    to_json,
    trips_to_csv,
    trips_to_xlsx,
)


def main():
    parser = argparse.ArgumentParser(
        description="Pair UK border crossings into trips and count full days outside the UK.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        help="Path to a travel history text export",
    )
    source.add_argument(
        "--table",
        help="Path to a CSV/TSV/XLSX trips table",
    )
    parser.add_argument(
        "--output-dir",
        default=str(OUTPUT_DIR),
        help="Output directory",
    )
    parser.add_argument(
        "--format",
        choices=["summary", "csv", "json", "xlsx", "all"],
        default="all",
        help="Output format (summary, csv, json, xlsx, all)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show stats only, don't write files",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print progress to stderr",
    )
    args = parser.parse_args()

    output_dir = Path(args.output_dir)

    # Run the pipeline
    result, parsed = run_pipeline(
        export_path=args.input,
        table_path=args.table,
        verbose=not args.quiet,
    )

    if parsed is not None and not parsed.success:
        for error in parsed.errors:
            print(error, file=sys.stderr)
        sys.exit(1)

    if args.dry_run:
        s = result.summary
        print(f"\nDry run complete. {s.total_trips} trips, {s.total_full_days} full days outside UK.")
        return

    # Output
    output_dir.mkdir(parents=True, exist_ok=True)

    if args.format in ("summary", "all"):
        summary_text = format_summary(result)
        summary_path = output_dir / "trips.txt"
        summary_path.write_text(summary_text, encoding="utf-8")
        print(f"\nSummary written to: {summary_path}")
        print(summary_text)

    if args.format in ("csv", "all"):
        csv_path = output_dir / "trips.csv"
        trips_to_csv(result.trips, csv_path)
        print(f"CSV written to: {csv_path}")

    if args.format in ("json", "all"):
        json_path = output_dir / "travel_history.json"
        to_json(result, json_path)
        print(f"JSON written to: {json_path}")

    if args.format in ("xlsx", "all"):
        xlsx_path = output_dir / "UK_Travel_History.xlsx"
        xlsx_path.write_bytes(trips_to_xlsx(result.trips))
        print(f"Excel written to: {xlsx_path}")


if __name__ == "__main__":
    main()
