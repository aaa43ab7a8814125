"""Input checks shared by the event and participant services."""

from ..core.exceptions import ValidationError


# SQLite INTEGER columns hold signed 64-bit values; larger Python ints
# make sqlite3 raise OverflowError before the statement runs.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def fits_sqlite_integer(value: int) -> bool:
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER


def require_text(value, field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return value


def require_positive_int(value, field: str) -> int:
    """Reject missing, zero, negative and out-of-range integers."""
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if value < 1:
        raise ValidationError(f"{field} must be a positive integer")
    if value > SQLITE_MAX_INTEGER:
        raise ValidationError(f"{field} must not exceed {SQLITE_MAX_INTEGER}")
    return value
