"""Extract border crossings from a Home Office travel history export.

Each useful line looks like:

    15/01/2024  BA0123  Outbound  LHR  0  CDG

i.e. date, voyage code, direction, embark port, an ignored field and the
disembark port. Anything else (headers, page footers, blank lines) is skipped.
"""

import re
from typing import List, Optional

from uk_travel_history.assemble.dedup import deduplicate_records, order_records
from uk_travel_history.models import Direction, TravelRecord
from uk_travel_history.normalize.date_parser import parse_date
from uk_travel_history.normalize.ports import resolve_route

_RECORD_LINE = re.compile(
    r'([0-9]{2}/[0-9]{2}/[0-9]{4})\s+(\S+)\s+(Inbound|Outbound)\s+(\S*)\s+(\S*)\s+(\S*)',
    re.I,
)


def parse_record_line(line: str) -> Optional[TravelRecord]:
    """Parse one export line, or None if it is not a crossing."""
    m = _RECORD_LINE.search(line)
    if not m:
        return None

    date_str, voyage_code, direction_str, embark, _, disembark = m.groups()
    iso_date = parse_date(date_str)
    if not iso_date:
        return None

    direction = Direction.INBOUND if direction_str.lower() == "inbound" else Direction.OUTBOUND

    return TravelRecord(
        date=iso_date,
        direction=direction,
        route=resolve_route(voyage_code, embark, disembark, direction),
        port=disembark or embark,
    )


def parse_travel_records(text: str) -> List[TravelRecord]:
    """All crossings in the export, deduplicated and in date order."""
    records = []
    for line in (text or "").split("\n"):
        record = parse_record_line(line)
        if record:
            records.append(record)

    return order_records(deduplicate_records(records))
