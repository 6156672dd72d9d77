"""Port codes → human-readable names, and carrier-specific route overrides."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from uk_travel_history.models import Direction

# "0" in an export means no port was recorded
PLACEHOLDER_PORTS = {"", "0"}

PORT_NAMES = {
    # UK airports
    "LHR": "London Heathrow",
    "LGW": "London Gatwick",
    "STN": "London Stansted",
    "LTN": "London Luton",
    "LCY": "London City",
    "MAN": "Manchester",
    "BHX": "Birmingham",
    "EDI": "Edinburgh",
    "GLA": "Glasgow",
    # Europe
    "AMS": "Amsterdam",
    "CDG": "Paris CDG",
    "FRA": "Frankfurt",
    "MAD": "Madrid",
    "BCN": "Barcelona",
    "FCO": "Rome Fiumicino",
    "CIA": "Rome Ciampino",
    "MXP": "Milan Malpensa",
    "VCE": "Venice",
    "PSA": "Pisa",
    "VNO": "Vilnius",
    "WAW": "Warsaw",
    "WMI": "Warsaw Modlin",
    "PRG": "Prague",
    "VIE": "Vienna",
    "MSQ": "Minsk",
    "FNC": "Madeira",
    "PVK": "Preveza",
    "BGO": "Bergen",
    "NCE": "Nice",
    "EIN": "Eindhoven",
    "HEL": "Helsinki",
    # Rest of world
    "HKG": "Hong Kong",
    # Seaports and rail terminals (UN/LOCODE)
    "GBHRW": "Harwich",
    "NLHVH": "Hook of Holland",
    "GBSPX": "St Pancras/Eurostar",
}


def port_name(code: str) -> str:
    """Readable name for a port code, or the code itself if unknown."""
    return PORT_NAMES.get(code, code)


def format_route(embark: str, disembark: str, direction: Direction) -> str:
    """Build a route description from embark/disembark port codes."""
    has_from = embark not in PLACEHOLDER_PORTS
    has_to = disembark not in PLACEHOLDER_PORTS

    if has_from and has_to:
        return f"{port_name(embark)} → {port_name(disembark)}"
    if has_from:
        return port_name(embark)
    if has_to:
        return port_name(disembark)
    return "UK departure" if direction == Direction.OUTBOUND else "UK arrival"


@dataclass(frozen=True)
class RouteOverride:
    """Fixed route text for a carrier whose port codes are unhelpful."""
    name: str
    matches: Callable[[str, str], bool]  # (voyage_code, embark_port) -> bool
    outbound_route: str
    inbound_route: str

    def route_for(self, direction: Direction) -> str:
        return self.outbound_route if direction == Direction.OUTBOUND else self.inbound_route


# First match wins
ROUTE_OVERRIDES: List[RouteOverride] = [
    RouteOverride(
        name="stena_line",
        matches=lambda voyage, embark: "stenaline" in voyage.lower(),
        outbound_route="Harwich → Hook of Holland (Ferry)",
        inbound_route="Hook of Holland → Harwich (Ferry)",
    ),
    RouteOverride(
        name="eurostar",
        matches=lambda voyage, embark: "9F1111" in voyage or embark == "GBSPX",
        outbound_route="St Pancras (Eurostar/Ferry)",
        inbound_route="St Pancras arrival",
    ),
]


def find_override(voyage_code: str, embark: str) -> Optional[RouteOverride]:
    for override in ROUTE_OVERRIDES:
        if override.matches(voyage_code, embark):
            return override
    return None


def resolve_route(voyage_code: str, embark: str, disembark: str, direction: Direction) -> str:
    """Route for a crossing: carrier override if one applies, else from port codes."""
    override = find_override(voyage_code, embark)
    if override:
        return override.route_for(direction)
    return format_route(embark, disembark, direction)
