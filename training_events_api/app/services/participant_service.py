"""
Business logic for the participant roster.

``ParticipantService`` manages the ``participants`` table: enrolment,
listing (joined with the owning event's name), attendance updates and
removal.  Attendance is stored as JSON text via the ``attendance``
codec and decoded for every listed row.

A row whose stored attendance cannot be decoded fails the whole listing
with ``CorruptDataError``; the offending participant id is logged so the
row can be repaired.
"""

import logging
import sqlite3
from typing import List

from ..core.db import Database
from ..core.exceptions import CorruptDataError, StorageError, ValidationError
from ..schemas.participant import ParticipantCreate, ParticipantRead
from .attendance import decode_attendance, encode_attendance, is_attendance_sequence
from .validation import fits_sqlite_integer, require_positive_int, require_text


logger = logging.getLogger(__name__)


class ParticipantService:
    """Service for managing participants and their attendance."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_participants(self) -> List[ParticipantRead]:
        """Return all participants, newest first, with ``event_name`` attached."""
        try:
            with self.db.cursor() as cursor:
                rows = cursor.execute(
                    """
                    SELECT p.id, p.event_id, p.name, p.national_id, p.email,
                           p.attendance, p.created_at, e.name AS event_name
                    FROM participants p
                    LEFT JOIN events e ON p.event_id = e.id
                    ORDER BY p.created_at DESC, p.id DESC
                    """
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to list participants")
            raise StorageError("Failed to list participants") from exc

        participants: List[ParticipantRead] = []
        for row in rows:
            data = dict(row)
            try:
                data["attendance"] = decode_attendance(row["attendance"])
            except CorruptDataError as exc:
                logger.error("Participant %s has corrupt attendance: %s", row["id"], exc.message)
                raise CorruptDataError(
                    f"Participant {row['id']} has corrupt attendance data"
                ) from exc
            participants.append(ParticipantRead.model_validate(data))
        return participants

    async def create_participant(self, data: ParticipantCreate) -> int:
        """Enrol a participant; returns the new id.

        ``event_id`` (a positive id), ``name`` and ``national_id`` are
        required.  The event reference is not checked against the
        ``events`` table.  Attendance defaults to an empty list.
        """
        require_positive_int(data.event_id, "eventId")
        require_text(data.name, "name")
        require_text(data.national_id, "nationalId")
        attendance = encode_attendance(data.attendance)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO participants (event_id, name, national_id, email, attendance)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (data.event_id, data.name, data.national_id, data.email, attendance),
                )
                participant_id = cursor.lastrowid
        except sqlite3.Error as exc:
            logger.exception("Failed to create participant for event %s", data.event_id)
            raise StorageError("Failed to create participant") from exc
        logger.info("Created participant %s for event %s", participant_id, data.event_id)
        return participant_id

    async def update_attendance(self, participant_id: int, attendance) -> int:
        """Overwrite the attendance of a participant; returns its id.

        ``attendance`` must be a list.  The length is not compared with
        the event's ``day_count``, and unknown ids are silently ignored.
        """
        if attendance is None or not is_attendance_sequence(attendance):
            raise ValidationError("attendance must be an array")
        encoded = encode_attendance(attendance)
        if not fits_sqlite_integer(participant_id):
            logger.info("Participant %s is out of range; attendance not updated", participant_id)
            return participant_id
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "UPDATE participants SET attendance = ? WHERE id = ?",
                    (encoded, participant_id),
                )
        except sqlite3.Error as exc:
            logger.exception("Failed to update attendance of participant %s", participant_id)
            raise StorageError("Failed to update attendance") from exc
        logger.info("Updated attendance of participant %s", participant_id)
        return participant_id

    async def delete_participant(self, participant_id: int) -> int:
        if not fits_sqlite_integer(participant_id):
            logger.info("Deleted participant %s (out of range, 0 row(s))", participant_id)
            return participant_id
        try:
            with self.db.cursor() as cursor:
                cursor.execute("DELETE FROM participants WHERE id = ?", (participant_id,))
                removed = cursor.rowcount
        except sqlite3.Error as exc:
            logger.exception("Failed to delete participant %s", participant_id)
            raise StorageError("Failed to delete participant") from exc
        logger.info("Deleted participant %s (%d row(s))", participant_id, removed)
        return participant_id
