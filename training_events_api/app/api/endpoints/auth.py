"""
Login endpoint.

Checks the submitted username and password against the single
configured credential pair.
"""

from fastapi import APIRouter, Depends

from training_events_api.app.api.deps import get_auth_service
from training_events_api.app.schemas.auth import LoginRequest, LoginResponse
from training_events_api.app.services.auth_service import AuthService


router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Return the session user and a token, or 401 for a wrong pair."""
    return await service.authenticate(credentials.username, credentials.password)
