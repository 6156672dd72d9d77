"""Strip spreadsheet formula triggers from free-text fields."""

from typing import Optional

_FORMULA_TRIGGERS = ("=", "+", "-", "@")


def sanitize_field(value: Optional[str]) -> str:
    """Trim, then drop one leading =, +, - or @ so spreadsheets treat it as text.

    '=1+1' -> '1+1', '@IMPORTXML("x")' -> 'IMPORTXML("x")'.
    """
    if not value:
        return ""

    trimmed = value.strip()
    if trimmed.startswith(_FORMULA_TRIGGERS):
        return trimmed[1:]
    return trimmed
