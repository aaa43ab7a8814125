"""
Participant endpoints.

Enrol participants in events, list the roster with each participant's
event name and decoded attendance, overwrite attendance, and remove
participants.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from training_events_api.app.api.deps import get_participant_service
from training_events_api.app.schemas.participant import (
    AttendanceUpdate,
    AttendanceUpdated,
    ParticipantCreate,
    ParticipantCreated,
    ParticipantDeleted,
    ParticipantRead,
)
from training_events_api.app.services.participant_service import ParticipantService


router = APIRouter()


@router.get("", response_model=List[ParticipantRead])
async def list_participants(
    service: ParticipantService = Depends(get_participant_service),
) -> List[ParticipantRead]:
    """List all participants, newest first.

    Participants whose event was deleted are included with a null
    ``eventName``.
    """
    return await service.list_participants()


@router.post("", response_model=ParticipantCreated)
async def create_participant(
    participant: ParticipantCreate,
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantCreated:
    """Enrol a participant.  ``eventId``, ``name`` and ``nationalId`` are required."""
    participant_id = await service.create_participant(participant)
    return ParticipantCreated(id=participant_id)


@router.put("/{participant_id}/attendance", response_model=AttendanceUpdated)
async def update_attendance(
    payload: AttendanceUpdate,
    participant_id: int = Path(..., description="ID of the participant"),
    service: ParticipantService = Depends(get_participant_service),
) -> AttendanceUpdated:
    """Replace the attendance list of a participant.

    The body must carry ``attendance`` as a JSON array; any other value
    yields 400 and leaves the stored attendance unchanged.
    """
    updated_id = await service.update_attendance(participant_id, payload.attendance)
    return AttendanceUpdated(updated_id=updated_id)


@router.delete("/{participant_id}", response_model=ParticipantDeleted)
async def delete_participant(
    participant_id: int = Path(..., description="ID of the participant"),
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantDeleted:
    deleted_id = await service.delete_participant(participant_id)
    return ParticipantDeleted(deleted_id=deleted_id)
