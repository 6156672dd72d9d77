"""Deduplicate border crossings — exports often repeat the same crossing."""

from typing import List, Set, Tuple

from uk_travel_history.models import Direction, TravelRecord


def deduplicate_records(records: List[TravelRecord]) -> List[TravelRecord]:
    """Drop later records sharing (date, direction) with an earlier one."""
    seen: Set[Tuple[str, Direction]] = set()
    unique: List[TravelRecord] = []

    for record in records:
        key = (record.date, record.direction)
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)

    return unique


def order_records(records: List[TravelRecord]) -> List[TravelRecord]:
    # ISO strings sort chronologically; sorted() keeps input order for ties
    return sorted(records, key=lambda r: r.date)
