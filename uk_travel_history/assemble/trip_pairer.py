"""Pair outbound/inbound crossings into trips and count days outside the UK."""

from typing import List, Optional

from uk_travel_history.config import NO_DEPARTURE_ROUTE, NO_RETURN_ROUTE
from uk_travel_history.models import Direction, ParsedTrip, TravelRecord, Trip
from uk_travel_history.normalize.date_parser import days_between


def count_days(out_date: str, in_date: str) -> tuple[int, int]:
    """(calendar_days, full_days) for a trip.

    Full days exclude the departure and return days, as Home Office
    guidance counts them, so a same-day return is (0, 0).
    """
    calendar_days = days_between(out_date, in_date)
    return calendar_days, max(0, calendar_days - 1)


def _next_inbound(records: List[TravelRecord], start: int) -> Optional[int]:
    for j in range(start, len(records)):
        if records[j].direction == Direction.INBOUND:
            return j
    return None


def pair_trips(records: List[TravelRecord]) -> List[Trip]:
    """Walk chronological records and produce trips.

    An outbound crossing is paired with the nearest later inbound crossing,
    even if other outbound crossings sit in between. The scan resumes after
    that inbound, so those in-between outbounds produce no trip of their own.
    Unmatched crossings become incomplete trips.
    """
    trips: List[Trip] = []
    trip_id = 1
    i = 0

    while i < len(records):
        record = records[i]

        if record.direction == Direction.OUTBOUND:
            j = _next_inbound(records, i + 1)
            if j is not None:
                inbound = records[j]
                calendar_days, full_days = count_days(record.date, inbound.date)
                trips.append(Trip(
                    id=trip_id,
                    out_date=record.date,
                    in_date=inbound.date,
                    out_route=record.route,
                    in_route=inbound.route,
                    calendar_days=calendar_days,
                    full_days=full_days,
                ))
                i = j + 1
            else:
                trips.append(Trip(
                    id=trip_id,
                    out_date=record.date,
                    in_date=None,
                    out_route=record.route,
                    in_route=NO_RETURN_ROUTE,
                ))
                i += 1
        else:
            trips.append(Trip(
                id=trip_id,
                out_date=None,
                in_date=record.date,
                out_route=NO_DEPARTURE_ROUTE,
                in_route=record.route,
            ))
            i += 1

        trip_id += 1

    return trips


def trips_from_parsed(parsed: List[ParsedTrip]) -> List[Trip]:
    """Number imported spreadsheet rows and work out their day counts."""
    trips = []
    for trip_id, row in enumerate(parsed, start=1):
        calendar_days = full_days = None
        if row.out_date and row.in_date:
            calendar_days, full_days = count_days(row.out_date, row.in_date)
        trips.append(Trip(
            id=trip_id,
            out_date=row.out_date or None,
            in_date=row.in_date or None,
            out_route=row.out_route,
            in_route=row.in_route,
            calendar_days=calendar_days,
            full_days=full_days,
        ))
    return trips
