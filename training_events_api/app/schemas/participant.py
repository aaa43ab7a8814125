"""
Pydantic models for participant data.

Attendance is an ordered list of JSON values, one marker per day or
session (usually booleans).  ``AttendanceUpdate`` accepts any JSON value
so ``ParticipantService.update_attendance`` can reject non-list payloads
with a descriptive ``ValidationError``.
"""

from typing import Any, List, Optional

from pydantic import Field

from . import CamelModel


class ParticipantCreate(CamelModel):
    """Schema for enrolling a participant in an event."""

    event_id: Optional[int] = Field(None, examples=[1])
    name: Optional[str] = Field(None, examples=["Ana Souza"])
    national_id: Optional[str] = Field(None, examples=["123.456.789-00"])
    email: Optional[str] = Field(None, examples=["ana@example.com"])
    attendance: Optional[Any] = Field(None, examples=[[True, False, True]])


class ParticipantRead(CamelModel):
    """A participant row joined with the name of its event.

    ``event_name`` is ``None`` when the event has been deleted.
    """

    id: int
    event_id: int
    event_name: Optional[str] = None
    name: str
    national_id: str
    email: Optional[str] = None
    attendance: List[Any] = Field(default_factory=list)
    created_at: Optional[str] = None


class AttendanceUpdate(CamelModel):
    attendance: Optional[Any] = Field(None, examples=[[True, False]])


class ParticipantCreated(CamelModel):
    id: int
    message: str = "Participant created successfully"


class AttendanceUpdated(CamelModel):
    updated_id: int
    message: str = "Attendance updated successfully"


class ParticipantDeleted(CamelModel):
    deleted_id: int
    message: str = "Participant deleted successfully"
