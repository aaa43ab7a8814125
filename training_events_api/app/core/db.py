"""
SQLite storage for events and participants.

This module provides the ``Database`` handle shared by the services.
A handle wraps exactly one ``sqlite3`` connection and has an explicit
lifecycle: ``open`` connects and creates the schema, ``close`` releases
the connection.  The FastAPI application owns one handle for the
lifetime of the process (see ``main.create_app``) and services receive
it as a constructor argument, so there is no module-level connection.

Two storage modes exist.  ``durable`` stores data in a file located by
``Settings.database_url``; ``volatile`` uses an in-memory database that
is lost on restart and is seeded with a sample event.

Participants reference events by ``event_id`` without a foreign-key
constraint: deleting an event leaves its participants in place and
list queries report them with a null event name.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import STORAGE_DURABLE, STORAGE_MODES, STORAGE_VOLATILE, Settings


logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

SCHEMA = """
CREATE TABLE IF NOT EXISTS events (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    date_range TEXT NOT NULL,
    hours_load INTEGER NOT NULL,
    day_count INTEGER NOT NULL,
    content TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS participants (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    event_id INTEGER NOT NULL,
    name TEXT NOT NULL,
    national_id TEXT NOT NULL,
    email TEXT,
    attendance TEXT NOT NULL DEFAULT '[]',
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_participants_event_id ON participants(event_id);
"""

SAMPLE_EVENT = (
    "Evento de Exemplo",
    "01, 02 e 03 de Janeiro de 2024",
    20,
    3,
    "- PLANO DE FORMAÇÃO DE PROFESSORES\n- INCLUSÃO: DESAFIOS E PERCEPÇÕES",
)


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged.  Relative
    paths are resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Process-wide store handle wrapping a single SQLite connection."""

    def __init__(self, storage_mode: str = STORAGE_DURABLE, path: str = MEMORY_DATABASE,
                 seed_sample_data: bool = False) -> None:
        if storage_mode not in STORAGE_MODES:
            raise ValueError(
                f"Unknown storage mode {storage_mode!r}; expected one of {', '.join(STORAGE_MODES)}"
            )
        self.storage_mode = storage_mode
        self.path = MEMORY_DATABASE if storage_mode == STORAGE_VOLATILE else path
        self.seed_sample_data = seed_sample_data and storage_mode == STORAGE_VOLATILE
        self._conn: Optional[sqlite3.Connection] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            storage_mode=settings.storage_mode,
            path=resolve_database_path(settings.database_url),
            seed_sample_data=settings.seed_sample_data,
        )

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open")
        return self._conn

    def open(self) -> "Database":
        """Connect, create the schema and seed a volatile store."""
        if self._conn is not None:
            return self
        # Handlers run on the event loop thread, which is not necessarily
        # the thread that opened the handle.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.executescript(SCHEMA)
        self._conn = conn
        if self.seed_sample_data:
            self._seed()
        if self.storage_mode == STORAGE_VOLATILE:
            logger.warning("Using volatile in-memory storage; data is lost on restart")
        else:
            logger.info("Opened SQLite database at %s", self.path)
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Closed %s database", self.storage_mode)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error."""
        conn = self.connection
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def ping(self) -> None:
        """Run a trivial query; raises ``sqlite3.Error`` if the store is unusable."""
        with self.cursor() as cursor:
            cursor.execute("SELECT 1").fetchone()

    def _seed(self) -> None:
        with self.cursor() as cursor:
            exists = cursor.execute("SELECT id FROM events LIMIT 1").fetchone()
            if exists:
                return
            cursor.execute(
                """
                INSERT INTO events (name, date_range, hours_load, day_count, content)
                VALUES (?, ?, ?, ?, ?)
                """,
                SAMPLE_EVENT,
            )
        logger.info("Seeded volatile store with sample event")

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
