"""
Date Input Constants
====================
Part names, parse bounds and GOV.UK Design System error message templates
for the three-field date input (day / month / year).

Message wording follows the "Date input" component guidance:
https://design-system.service.gov.uk/components/date-input/
"""

from enum import Enum

# =============================================================================
# 1. ENUMS
# =============================================================================

class DatePart(str, Enum):
    """Sub-fields of a date input, in submission order."""
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class DatePartError(str, Enum):
    """Why a single part could not be read."""
    MISSING = "MISSING"
    NOT_INTEGER = "NOT_INTEGER"


# Fixed order: missing parts are reported day, month, year.
DATE_PARTS: tuple[str, ...] = tuple(part.value for part in DatePart)


# =============================================================================
# 2. PARSE BOUNDS
# =============================================================================

# Parts are read as signed 32-bit integers; anything wider is not a number
# a user could have meant.
INT32_MIN: int = -(2 ** 31)
INT32_MAX: int = 2 ** 31 - 1


# =============================================================================
# 3. DISPLAY
# =============================================================================

# Fixed English names so the long date does not depend on process locale.
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


# =============================================================================
# 4. ERROR MESSAGES
# =============================================================================

MSG_ENTER_REAL = "Enter a real {name_within_sentence}"
MSG_DOES_NOT_INCLUDE = "{name_at_start_of_sentence} does not include a {missing_parts}"
MISSING_PART_SEPARATOR = " or a "


def part_key(field_name: str, part: str) -> str:
    """Form key of one sub-field, e.g. ``dateOfBirth-day``."""
    return f"{field_name}-{part}"
