"""Configuration: .env loading, paths, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of uk_travel_history/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Paths ---
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))

# --- Spreadsheets ---
TRAVEL_HISTORY_SHEET = os.getenv("TRAVEL_HISTORY_SHEET", "Travel History")
EXPORT_COLUMNS = [
    "#",
    "Date Out",
    "Date In",
    "Departure Route",
    "Return Route",
    "Calendar Days",
    "Full Days Outside UK",
]
TOTAL_ROW_LABEL = "TOTAL FULL DAYS OUTSIDE UK:"

# --- Trip pairing ---
NO_RETURN_ROUTE = "No return recorded"
NO_DEPARTURE_ROUTE = "No departure recorded"
