"""Input Validation — pure guards shared by the calculation engine and the stores.

Invariants:
    - Every guard either returns the normalized value or raises ValidationError
    - bool is never accepted as a number (True == 1 in Python)
    - NaN and ±inf are rejected wherever a number is required
    - Ids written to storage fit a signed 64-bit integer
"""

import math

from fincalc.core.errors import ValidationError


def require_finite_number(value: object, field: str) -> float:
    """Return value as float, rejecting non-numbers, bools and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a number", field)
    if not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number", field)
    return float(value)


def require_non_negative(value: object, field: str) -> float:
    number = require_finite_number(value, field)
    if number < 0:
        raise ValidationError(f"{field} must be 0 or more", field)
    return number


def require_month_count(value: object, field: str) -> int:
    """Whole number of months, at least 1. Integral floats (12.0) are accepted."""
    number = require_finite_number(value, field)
    if not number.is_integer():
        raise ValidationError(f"{field} must be a whole number of months", field)
    if number < 1:
        raise ValidationError(f"{field} must be at least 1 month", field)
    return int(number)


def require_non_empty_str(value: object, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string", field)
    if not value:
        raise ValidationError(f"{field} cannot be empty", field)
    return value


def require_identifier(value: object, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer id", field)
    return value


# Stored ids are signed 64-bit integers (SQL BIGINT / SQLite INTEGER)
MIN_STORED_ID = -(2 ** 63)
MAX_STORED_ID = 2 ** 63 - 1


def is_storable_identifier(value: int) -> bool:
    """True if value fits the id column; larger ints cannot match any row."""
    return MIN_STORED_ID <= value <= MAX_STORED_ID


def require_storable_identifier(value: object, field: str) -> int:
    value = require_identifier(value, field)
    if not is_storable_identifier(value):
        raise ValidationError(f"{field} is outside the 64-bit id range", field)
    return value
