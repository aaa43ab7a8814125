"""
FastAPI dependencies that hand services to the route handlers.

The ``Database`` handle and the ``Settings`` instance are stored on
``app.state`` by ``create_app``; each request builds lightweight
service objects around them.
"""

from fastapi import Depends, Request

from ..core.config import Settings
from ..core.db import Database
from ..services.auth_service import AuthService
from ..services.event_service import EventService
from ..services.participant_service import ParticipantService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_event_service(db: Database = Depends(get_db)) -> EventService:
    return EventService(db)


def get_participant_service(db: Database = Depends(get_db)) -> ParticipantService:
    return ParticipantService(db)


def get_auth_service(settings: Settings = Depends(get_settings)) -> AuthService:
    return AuthService(settings.credentials, settings.auth_display_name)
