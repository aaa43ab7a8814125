"""
Event endpoints.

Create, list and delete training events.  Events have no update
operation; to change one, delete it and create it again.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from training_events_api.app.api.deps import get_event_service
from training_events_api.app.schemas.event import EventCreate, EventCreated, EventDeleted, EventRead
from training_events_api.app.services.event_service import EventService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(service: EventService = Depends(get_event_service)) -> List[EventRead]:
    """List all events, most recently created first."""
    return await service.list_events()


@router.post("", response_model=EventCreated)
async def create_event(
    event: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventCreated:
    """Create an event.

    ``name``, ``dateRange``, ``hoursLoad`` and ``dayCount`` are required;
    a missing field yields 400.  ``content`` is optional.
    """
    event_id = await service.create_event(event)
    return EventCreated(id=event_id)


@router.delete("/{event_id}", response_model=EventDeleted)
async def delete_event(
    event_id: int = Path(..., description="ID of the event"),
    service: EventService = Depends(get_event_service),
) -> EventDeleted:
    """Delete an event.

    Succeeds even if the event does not exist.  Participants enrolled in
    the event are kept.
    """
    deleted_id = await service.delete_event(event_id)
    return EventDeleted(deleted_id=deleted_id)
