"""
Encoding of participant attendance records.

Attendance is persisted in the ``participants.attendance`` TEXT column
as a compact JSON array and decoded back to a list on read.  The pair
round-trips exactly: ``decode_attendance(encode_attendance(s)) == s``
for any list of JSON values, and the empty list is stored as ``'[]'``,
the column default.  NaN and infinities have no JSON encoding and are
rejected.
"""

import json
from typing import Any, List, Optional, Sequence

from ..core.exceptions import CorruptDataError, ValidationError


EMPTY_ATTENDANCE = "[]"


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def is_attendance_sequence(value: Any) -> bool:
    """Return True for list/tuple payloads; strings and mappings are rejected."""
    return isinstance(value, (list, tuple))


def encode_attendance(markers: Optional[Sequence[Any]]) -> str:
    """Serialise ``markers`` for storage.  ``None`` encodes as the empty list."""
    if markers is None:
        return EMPTY_ATTENDANCE
    if not is_attendance_sequence(markers):
        raise ValidationError("attendance must be an array")
    try:
        return json.dumps(
            list(markers), separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"attendance contains a value that cannot be stored: {exc}") from exc


def decode_attendance(raw: Optional[str]) -> List[Any]:
    """Parse a stored attendance value.

    NULL and empty strings decode to an empty list.  Anything that is not
    a JSON array raises ``CorruptDataError``.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise CorruptDataError(f"stored attendance is not valid JSON: {exc}") from exc
    if not isinstance(value, list):
        raise CorruptDataError("stored attendance is not an array")
    return value
