"""Data models for the travel history pipeline."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    OUTBOUND = "Outbound"
    INBOUND = "Inbound"


@dataclass
class TravelRecord:
    """A single border crossing from a travel history export."""
    date: str  # ISO YYYY-MM-DD
    direction: Direction
    route: str
    port: str = ""  # raw port code, disembark preferred

    def to_dict(self) -> dict:
        data = {
            "date": self.date,
            "direction": self.direction.value,
            "route": self.route,
        }
        if self.port:
            data["port"] = self.port
        return data


@dataclass
class Trip:
    id: int
    out_date: Optional[str] = None
    in_date: Optional[str] = None
    out_route: str = ""
    in_route: str = ""
    calendar_days: Optional[int] = None
    full_days: Optional[int] = None  # days wholly outside the UK, never negative

    @property
    def is_complete(self) -> bool:
        return self.full_days is not None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "outDate": self.out_date,
            "inDate": self.in_date,
            "outRoute": self.out_route,
            "inRoute": self.in_route,
            "calendarDays": self.calendar_days,
            "fullDays": self.full_days,
        }


@dataclass
class ParsedTrip:
    """A trip row imported from CSV/XLSX. Empty string means "not provided"."""
    out_date: str = ""
    in_date: str = ""
    out_route: str = ""
    in_route: str = ""

    def to_dict(self) -> dict:
        return {
            "outDate": self.out_date,
            "inDate": self.in_date,
            "outRoute": self.out_route,
            "inRoute": self.in_route,
        }


@dataclass
class ParseResult:
    trips: list[ParsedTrip] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "trips": [t.to_dict() for t in self.trips],
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass
class AnalysisSummary:
    total_trips: int = 0
    complete_trips: int = 0
    incomplete_trips: int = 0
    total_full_days: int = 0

    def to_dict(self) -> dict:
        return {
            "totalTrips": self.total_trips,
            "completeTrips": self.complete_trips,
            "incompleteTrips": self.incomplete_trips,
            "totalFullDays": self.total_full_days,
        }


@dataclass
class AnalysisResult:
    records: list[TravelRecord] = field(default_factory=list)
    trips: list[Trip] = field(default_factory=list)
    summary: AnalysisSummary = field(default_factory=AnalysisSummary)

    def to_dict(self) -> dict:
        return {
            "records": [r.to_dict() for r in self.records],
            "trips": [t.to_dict() for t in self.trips],
            "summary": self.summary.to_dict(),
        }
