"""
Pydantic models for event data.

``EventCreate`` leaves every field optional so that a missing value
reaches ``EventService`` and is reported as a ``ValidationError`` with a
message naming the field, rather than a generic schema error.
``EventRead`` mirrors a row of the ``events`` table.
"""

from typing import Optional

from pydantic import Field

from . import CamelModel


class EventCreate(CamelModel):
    """Schema for creating an event."""

    name: Optional[str] = Field(None, examples=["Workshop de Inclusão"])
    date_range: Optional[str] = Field(None, examples=["01, 02 e 03 de Janeiro de 2024"])
    hours_load: Optional[int] = Field(None, examples=[20])
    day_count: Optional[int] = Field(None, examples=[3])
    content: Optional[str] = Field(None, examples=["- PLANO DE FORMAÇÃO DE PROFESSORES"])


class EventRead(CamelModel):
    """Schema for reading an event from the API."""

    id: int
    name: str
    date_range: str
    hours_load: int
    day_count: int
    content: Optional[str] = ""
    created_at: Optional[str] = None


class EventCreated(CamelModel):
    id: int
    message: str = "Event created successfully"


class EventDeleted(CamelModel):
    deleted_id: int
    message: str = "Event deleted successfully"
