"""
Business logic for events.

``EventService`` creates, lists and deletes rows of the ``events``
table.  Events are never updated after creation.  Deleting an event
leaves its participants untouched; they are reported with a null event
name by ``ParticipantService.list_participants``.
"""

import logging
import sqlite3
from typing import List

from ..core.db import Database
from ..core.exceptions import StorageError
from ..schemas.event import EventCreate, EventRead
from .validation import fits_sqlite_integer, require_positive_int, require_text


logger = logging.getLogger(__name__)


class EventService:
    """Service for managing training events."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def list_events(self) -> List[EventRead]:
        """Return all events, most recently created first."""
        try:
            with self.db.cursor() as cursor:
                rows = cursor.execute(
                    """
                    SELECT id, name, date_range, hours_load, day_count, content, created_at
                    FROM events
                    ORDER BY created_at DESC, id DESC
                    """
                ).fetchall()
        except sqlite3.Error as exc:
            logger.exception("Failed to list events")
            raise StorageError("Failed to list events") from exc
        return [EventRead.model_validate(dict(row)) for row in rows]

    async def create_event(self, data: EventCreate) -> int:
        """Validate ``data`` and insert a new event; returns its id.

        ``name``, ``date_range``, ``hours_load`` and ``day_count`` are
        required; the two counts must be positive.  Nothing is written
        when validation fails.  ``content`` defaults to an empty string.
        """
        name = require_text(data.name, "name")
        date_range = require_text(data.date_range, "dateRange")
        hours_load = require_positive_int(data.hours_load, "hoursLoad")
        day_count = require_positive_int(data.day_count, "dayCount")
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO events (name, date_range, hours_load, day_count, content)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (name, date_range, hours_load, day_count, data.content or ""),
                )
                event_id = cursor.lastrowid
        except sqlite3.Error as exc:
            logger.exception("Failed to create event '%s'", name)
            raise StorageError("Failed to create event") from exc
        logger.info("Created event %s '%s'", event_id, name)
        return event_id

    async def delete_event(self, event_id: int) -> int:
        """Delete an event by id.

        Unknown ids are not an error: the statement simply removes no
        rows and ``event_id`` is returned all the same.  Ids outside the
        SQLite integer range cannot exist, so they skip the statement.
        """
        if not fits_sqlite_integer(event_id):
            logger.info("Deleted event %s (out of range, 0 row(s))", event_id)
            return event_id
        try:
            with self.db.cursor() as cursor:
                cursor.execute("DELETE FROM events WHERE id = ?", (event_id,))
                removed = cursor.rowcount
        except sqlite3.Error as exc:
            logger.exception("Failed to delete event %s", event_id)
            raise StorageError("Failed to delete event") from exc
        logger.info("Deleted event %s (%d row(s))", event_id, removed)
        return event_id
