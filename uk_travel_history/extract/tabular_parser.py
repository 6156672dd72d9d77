"""Import trips from CSV/TSV text and Excel workbooks.

Both paths share header normalization and row validation; they differ only
in how rows are read. Problems with the data never raise: they are collected
into ParseResult.errors (row rejected) or ParseResult.warnings (row skipped).
"""

import csv
import io
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from uk_travel_history.config import TRAVEL_HISTORY_SHEET
from uk_travel_history.models import ParsedTrip, ParseResult
from uk_travel_history.normalize.date_parser import parse_date
from uk_travel_history.normalize.sanitize import sanitize_field

_BOM = "\ufeff"

# Normalized header text → internal column key
_HEADER_ALIASES = {
    "#": "num",
    "num": "num",
    "number": "num",
    "date out": "outDate",
    "dateout": "outDate",
    "departure date": "outDate",
    "out date": "outDate",
    "date in": "inDate",
    "datein": "inDate",
    "return date": "inDate",
    "in date": "inDate",
    "departure": "outRoute",
    "departure route": "outRoute",
    "out route": "outRoute",
    "return": "inRoute",
    "return route": "inRoute",
    "in route": "inRoute",
}

# Derived columns in our own exports; recomputed, never imported
_CALCULATED_HEADERS = {"calendar days", "full days outside uk", "full days"}


def normalize_header(header: str) -> str:
    """Map a column header onto the internal schema.

    Unknown headers come back unchanged and are ignored by row processing.
    """
    normalized = " ".join(str(header).split()).lower()
    if normalized in _HEADER_ALIASES:
        return _HEADER_ALIASES[normalized]
    if normalized in _CALCULATED_HEADERS:
        return f"_ignore_{header}"
    return header


def _validate_row(
    row_num: int,
    out_raw: str,
    in_raw: str,
    out_route: str,
    in_route: str,
    result: ParseResult,
) -> Optional[ParsedTrip]:
    """Validate one data row; append to result.errors/warnings on failure."""
    out_raw = out_raw.strip()
    in_raw = in_raw.strip()

    if not out_raw and not in_raw:
        result.warnings.append(f"Row {row_num}: Both dates are empty, skipping")
        return None

    out_date = None
    if out_raw:
        out_date = parse_date(out_raw)
        if not out_date:
            result.errors.append(
                f'Row {row_num}: Invalid departure date format "{out_raw}". Use DD/MM/YYYY or YYYY-MM-DD'
            )
            return None

    in_date = None
    if in_raw:
        in_date = parse_date(in_raw)
        if not in_date:
            result.errors.append(
                f'Row {row_num}: Invalid return date format "{in_raw}". Use DD/MM/YYYY or YYYY-MM-DD'
            )
            return None

    # ISO strings compare chronologically
    if out_date and in_date and out_date > in_date:
        result.errors.append(f"Row {row_num}: Departure date is after return date")
        return None

    return ParsedTrip(
        out_date=out_date or "",
        in_date=in_date or "",
        out_route=sanitize_field(out_route),
        in_route=sanitize_field(in_route),
    )


# ---------------------------------------------------------------------------
# CSV / TSV
# ---------------------------------------------------------------------------

def _detect_delimiter(text: str) -> str:
    """Tab if the header line has more tabs than commas, else comma."""
    header_line = text.lstrip("\r\n").split("\n", 1)[0]
    return "\t" if header_line.count("\t") > header_line.count(",") else ","


def parse_csv_text(text: str) -> ParseResult:
    """Parse comma- or tab-separated trip data with a header row.

    Rows whose field count differs from the header, and unreadable CSV, are
    reported as errors; rows read before a CSV error are still validated.
    """
    result = ParseResult()

    if text and text.startswith(_BOM):
        text = text[len(_BOM):]

    if not text or not text.strip():
        result.errors.append("CSV content is empty")
        return result

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=_detect_delimiter(text))
    rows: List[List[str]] = []
    try:
        for row in reader:
            if row:
                rows.append(row)
    except csv.Error as e:
        result.errors.append(f"Parse error at row {reader.line_num}: {e}")

    data_rows = rows[1:]
    if not data_rows:
        result.errors.append("No data rows found in CSV")
        return result

    keys = [normalize_header(h) for h in rows[0]]
    if "outDate" not in keys or "inDate" not in keys:
        result.errors.append('CSV must contain "Date Out" and "Date In" columns')
        return result

    for index, row in enumerate(data_rows):
        row_num = index + 2
        if len(row) < len(keys):
            result.errors.append(
                f"Parse error at row {row_num}: Too few fields: expected {len(keys)} fields but parsed {len(row)}"
            )
        elif len(row) > len(keys):
            result.errors.append(
                f"Parse error at row {row_num}: Too many fields: expected {len(keys)} fields but parsed {len(row)}"
            )

        fields: Dict[str, str] = dict(zip(keys, row))
        trip = _validate_row(
            row_num,
            fields.get("outDate", ""),
            fields.get("inDate", ""),
            fields.get("outRoute", ""),
            fields.get("inRoute", ""),
            result,
        )
        if trip:
            result.trips.append(trip)

    return result


def parse_clipboard_text(text: str) -> ParseResult:
    """Parse text pasted from Excel/Google Sheets (usually tab-separated)."""
    return parse_csv_text(text)


# ---------------------------------------------------------------------------
# Excel
# ---------------------------------------------------------------------------

def _cell_text(value: Any) -> str:
    """Render a cell value as text. Real date cells become YYYY-MM-DD."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def _excel_headers(header_row) -> Dict[str, int]:
    """Internal column key → 0-based column index (last match wins, as for CSV)."""
    headers: Dict[str, int] = {}
    for col, value in enumerate(header_row):
        key = _HEADER_ALIASES.get(" ".join(_cell_text(value).split()).lower())
        if key:
            headers[key] = col
    return headers


def _read_sheet_rows(data: bytes) -> Optional[List[tuple]]:
    """All rows of the trips worksheet as value tuples, None if there is no sheet."""
    wb = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        if TRAVEL_HISTORY_SHEET in wb.sheetnames:
            sheet = wb[TRAVEL_HISTORY_SHEET]
        elif wb.worksheets:
            sheet = wb.worksheets[0]
        else:
            return None
        return list(sheet.iter_rows(values_only=True))
    finally:
        wb.close()


def parse_xlsx_file(data: bytes) -> ParseResult:
    """Parse an .xlsx workbook laid out like our exports."""
    result = ParseResult()

    try:
        rows = _read_sheet_rows(data)
    except (InvalidFileException, BadZipFile, KeyError, ValueError, OSError) as e:
        result.errors.append(f"Failed to parse Excel file: {e}")
        return result

    if rows is None:
        result.errors.append("No worksheet found in Excel file")
        return result

    headers = _excel_headers(rows[0]) if rows else {}
    if "outDate" not in headers or "inDate" not in headers:
        result.errors.append('Excel file must contain "Date Out" and "Date In" columns')
        return result

    def cell(row: tuple, key: str) -> str:
        col = headers.get(key)
        if col is None or col >= len(row):
            return ""
        return _cell_text(row[col])

    for row_num, row in enumerate(rows[1:], start=2):
        if all(v is None or v == "" for v in row):
            continue
        trip = _validate_row(
            row_num,
            cell(row, "outDate"),
            cell(row, "inDate"),
            cell(row, "outRoute"),
            cell(row, "inRoute"),
            result,
        )
        if trip:
            result.trips.append(trip)

    return result
