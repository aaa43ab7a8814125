"""
Shared pytest fixtures.

Apps are built with volatile (in-memory) storage and without the sample
event so every test starts from empty tables.
"""

import pytest
from fastapi.testclient import TestClient

from training_events_api.app.core.config import Settings
from training_events_api.app.core.db import Database
from training_events_api.app.main import create_app
from training_events_api.app.services.event_service import EventService
from training_events_api.app.services.participant_service import ParticipantService


@pytest.fixture
def settings():
    return Settings(
        storage_mode="volatile",
        seed_sample_data=False,
        auth_username="coronelvivida",
        auth_password="educacao@2024",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # The context manager runs the startup and shutdown hooks, which open
    # and close the database.
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db():
    database = Database(storage_mode="volatile").open()
    yield database
    database.close()


@pytest.fixture
def event_service(db):
    return EventService(db)


@pytest.fixture
def participant_service(db):
    return ParticipantService(db)
