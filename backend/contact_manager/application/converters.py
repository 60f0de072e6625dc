"""Text → typed value conversions shared by field updates and CSV parsing.

Every function raises ``ValueError`` on input it cannot convert; callers
translate that into their own error type.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

_TRUE_VALUES = frozenset({"true", "1", "yes", "y", "t"})
_FALSE_VALUES = frozenset({"false", "0", "no", "n", "f"})


def parse_date(value: str) -> date:
    """Parse an ISO-8601 date, or the date part of an ISO-8601 datetime."""
    cleaned = value.strip()
    if not cleaned:
        raise ValueError("empty date")
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        raise ValueError(f"'{value}' is not an ISO-8601 date") from None


def parse_bool(value: str) -> bool:
    """Parse a boolean flag. Accepts true/false, yes/no, y/n, t/f and 1/0."""
    cleaned = value.strip().lower()
    if cleaned in _TRUE_VALUES:
        return True
    if cleaned in _FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def parse_decimal(value: str) -> Decimal:
    """Parse a finite decimal amount such as ``5555.55``."""
    cleaned = value.strip()
    try:
        result = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"'{value}' is not a decimal number") from None
    if not result.is_finite():
        raise ValueError(f"'{value}' is not a finite decimal number")
    return result
