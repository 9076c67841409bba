"""
Form Binder Constants Package
"""
from .date_parts import (
    DatePart,
    DatePartError,
    DATE_PARTS,
    INT32_MIN,
    INT32_MAX,
    MONTH_NAMES,
    MSG_ENTER_REAL,
    MSG_DOES_NOT_INCLUDE,
    MISSING_PART_SEPARATOR,
    part_key,
)

__all__ = [
    "DatePart",
    "DatePartError",
    "DATE_PARTS",
    "INT32_MIN",
    "INT32_MAX",
    "MONTH_NAMES",
    "MSG_ENTER_REAL",
    "MSG_DOES_NOT_INCLUDE",
    "MISSING_PART_SEPARATOR",
    "part_key",
]
