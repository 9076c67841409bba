import re
from datetime import date

from govuk_binders.constants import INT32_MAX, INT32_MIN, MONTH_NAMES

# Surrounding ASCII whitespace and one optional sign; digits must be ASCII.
_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")


def _parse_int32(value: str | None) -> int | None:
    if value is None:
        return None
    match = _INT_PATTERN.fullmatch(value)
    if match is None:
        return None
    parsed = int(match.group(1))
    if parsed < INT32_MIN or parsed > INT32_MAX:
        return None
    return parsed


def format_long_date(value: date) -> str:
    """GOV.UK style long date, e.g. ``5 June 2023``."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"
