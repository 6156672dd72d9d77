"""Orchestrates the pipeline: extract → pair → summarize."""

import sys
from pathlib import Path
from typing import List, Optional, Union

from uk_travel_history.assemble.trip_pairer import pair_trips, trips_from_parsed
from uk_travel_history.extract.record_parser import parse_travel_records
from uk_travel_history.extract.tabular_parser import parse_csv_text, parse_xlsx_file
from uk_travel_history.models import AnalysisResult, AnalysisSummary, ParseResult, Trip


def summarize(trips: List[Trip]) -> AnalysisSummary:
    complete = [t for t in trips if t.full_days is not None]
    return AnalysisSummary(
        total_trips=len(trips),
        complete_trips=len(complete),
        incomplete_trips=len(trips) - len(complete),
        total_full_days=sum(t.full_days for t in complete),
    )


def analyze_travel_history(text: str) -> AnalysisResult:
    """Parse a travel history export into records, trips and a summary."""
    records = parse_travel_records(text)
    trips = pair_trips(records)
    return AnalysisResult(records=records, trips=trips, summary=summarize(trips))


def analyze_parsed_trips(parsed: ParseResult) -> AnalysisResult:
    """Summarize trips imported from a spreadsheet. There are no raw records."""
    trips = trips_from_parsed(parsed.trips)
    return AnalysisResult(records=[], trips=trips, summary=summarize(trips))


def _not_utf8_error(path: Path, e: UnicodeDecodeError) -> str:
    return f"File is not valid UTF-8 text: {path.name} ({e.reason} at byte {e.start})"


def load_history_file(path: Union[str, Path]) -> ParseResult:
    """Import a trips table from disk: .xlsx workbooks, anything else as CSV/TSV.

    Text files must be UTF-8 (a BOM is fine); anything else is reported in
    ParseResult.errors.
    """
    path = Path(path)
    if path.suffix.lower() == ".xlsx":
        return parse_xlsx_file(path.read_bytes())
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        return ParseResult(errors=[_not_utf8_error(path, e)])
    return parse_csv_text(text)


def run_pipeline(
    export_path: Optional[str] = None,
    table_path: Optional[str] = None,
    verbose: bool = True,
) -> tuple[AnalysisResult, Optional[ParseResult]]:
    """Run the pipeline on a travel history export or an imported trips table.

    Args:
        export_path: Path to a Home Office travel history text export.
        table_path: Path to a CSV/TSV/XLSX trips table. Used if export_path is not given.
        verbose: Print progress to stderr.

    Returns:
        (analysis, parse_result) — parse_result is None for a text export that
        could be read, and carries the error when it could not.
    """
    if not export_path and not table_path:
        raise ValueError("Either export_path or table_path is required")

    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)

    if export_path:
        log(f"Loading travel history export: {export_path}")
        try:
            text = Path(export_path).read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            error = _not_utf8_error(Path(export_path), e)
            log(f"  ERROR: {error}")
            return AnalysisResult(), ParseResult(errors=[error])
        result = analyze_travel_history(text)
        log(f"  Crossings found: {len(result.records)}")
        log(f"  Paired into {len(result.trips)} trips "
            f"({result.summary.complete_trips} complete, {result.summary.incomplete_trips} incomplete)")
        return result, None

    log(f"Loading trips table: {table_path}")
    parsed = load_history_file(table_path)
    log(f"  Imported {len(parsed.trips)} trips")
    for warning in parsed.warnings:
        log(f"  WARNING: {warning}")
    for error in parsed.errors:
        log(f"  ERROR: {error}")

    result = analyze_parsed_trips(parsed)
    log(f"  Total full days outside UK: {result.summary.total_full_days}")
    return result, parsed
