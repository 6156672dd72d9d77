"""Output formatters: human-readable summary, CSV, JSON and Excel."""

import csv
import io
import json
from pathlib import Path
from typing import List, Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from uk_travel_history.config import EXPORT_COLUMNS, TOTAL_ROW_LABEL, TRAVEL_HISTORY_SHEET
from uk_travel_history.models import AnalysisResult, Trip
from uk_travel_history.normalize.date_parser import format_display_date
from uk_travel_history.normalize.sanitize import sanitize_field


def _date_str(iso: Optional[str]) -> str:
    return format_display_date(iso) or "?"


def _count_str(n: Optional[int]) -> str:
    return "" if n is None else str(n)


def _export_row(trip: Trip) -> list:
    """One trip as export cells. Route text is sanitized for spreadsheets."""
    return [
        trip.id,
        format_display_date(trip.out_date),
        format_display_date(trip.in_date),
        sanitize_field(trip.out_route),
        sanitize_field(trip.in_route),
        "" if trip.calendar_days is None else trip.calendar_days,
        "" if trip.full_days is None else trip.full_days,
    ]


# ---------------------------------------------------------------------------
# Human-readable summary
# ---------------------------------------------------------------------------

def format_summary(result: AnalysisResult) -> str:
    """Produce a line-by-line trip table with totals."""
    lines = []
    lines.append("=" * 72)
    lines.append("  UK TRAVEL HISTORY — Trips Outside the UK")
    lines.append("=" * 72)

    current_year = None
    for trip in result.trips:
        year = (trip.out_date or trip.in_date or "")[:4]
        if year != current_year:
            current_year = year
            lines.append(f"\n--- {current_year} {'─' * 58}")

        days = f"{trip.full_days} full days" if trip.is_complete else "incomplete"
        lines.append(
            f"  #{trip.id:<3} {_date_str(trip.out_date)}  →  {_date_str(trip.in_date)}  |  {days}"
        )
        lines.append(f"       Out: {trip.out_route}   In: {trip.in_route}")

    s = result.summary
    lines.append(f"\n{'=' * 72}")
    lines.append(
        f"  Total: {s.total_trips} trips ({s.complete_trips} complete, "
        f"{s.incomplete_trips} incomplete), {s.total_full_days} full days outside UK"
    )
    lines.append("=" * 72)

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# CSV output
# ---------------------------------------------------------------------------

def trips_to_csv(trips: List[Trip], path: Path):
    """Write trips to CSV in the same layout the importer reads back."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(EXPORT_COLUMNS)
        for trip in trips:
            writer.writerow(_export_row(trip))


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def to_json(result: AnalysisResult, path: Path):
    """Write records, trips and summary as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


# ---------------------------------------------------------------------------
# Excel output
# ---------------------------------------------------------------------------

_HEADER_FILL = PatternFill(fill_type="solid", fgColor="FF4472C4")
_INCOMPLETE_FILL = PatternFill(fill_type="solid", fgColor="FFFFC7CE")
_TOTAL_FILL = PatternFill(fill_type="solid", fgColor="FFFFF2CC")
_COLUMN_WIDTHS = [6, 14, 14, 28, 28, 14, 20]


def trips_to_xlsx(trips: List[Trip]) -> bytes:
    """Build a "Travel History" workbook; returns the .xlsx file contents."""
    wb = Workbook()
    sheet = wb.active
    sheet.title = TRAVEL_HISTORY_SHEET
    sheet.freeze_panes = "A2"

    sheet.append(EXPORT_COLUMNS)
    for cell in sheet[1]:
        cell.font = Font(bold=True, color="FFFFFFFF")
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
    for i, width in enumerate(_COLUMN_WIDTHS, start=1):
        sheet.column_dimensions[sheet.cell(row=1, column=i).column_letter].width = width

    total_full_days = 0
    for trip in trips:
        sheet.append(_export_row(trip))
        if not trip.is_complete:
            for cell in sheet[sheet.max_row]:
                cell.fill = _INCOMPLETE_FILL
        else:
            total_full_days += trip.full_days

    # Blank spacer, then the total under "Full Days Outside UK"
    sheet.append([])
    sheet.append(["", "", "", "", TOTAL_ROW_LABEL, "", total_full_days])
    total_row = sheet.max_row
    sheet.cell(row=total_row, column=5).font = Font(bold=True)
    sheet.cell(row=total_row, column=5).alignment = Alignment(horizontal="right")
    total_cell = sheet.cell(row=total_row, column=7)
    total_cell.font = Font(bold=True, size=14)
    total_cell.fill = _TOTAL_FILL

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
