from .parsers import _parse_int32, format_long_date

__all__ = [
    "_parse_int32",
    "format_long_date",
]
