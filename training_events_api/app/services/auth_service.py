"""
Static credential check.

The application accepts exactly one username/password pair, taken from
``Settings.credentials``.  A successful login returns an opaque token
of the form ``token-<epoch milliseconds>``.  Nothing downstream verifies
that token, so this is a convenience gate for the front end and not an
access-control boundary.
"""

import hmac
import logging
import time
from typing import Optional, Tuple

from ..core.exceptions import AuthenticationError, ValidationError
from ..schemas.auth import LoginResponse, SessionUser


logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def issue_token() -> str:
    return f"token-{int(time.time() * 1000)}"


class AuthService:
    """Compare submitted credentials against the configured pair."""

    def __init__(self, credentials: Tuple[str, str], display_name: str) -> None:
        self.username, self.password = credentials
        self.display_name = display_name

    async def authenticate(self, username: Optional[str], password: Optional[str]) -> LoginResponse:
        if not username or not password:
            raise ValidationError("Username and password are required")
        # Compare both values so the timing does not reveal which one failed.
        user_ok = hmac.compare_digest(username.encode("utf-8"), self.username.encode("utf-8"))
        pass_ok = hmac.compare_digest(password.encode("utf-8"), self.password.encode("utf-8"))
        if not (user_ok and pass_ok):
            logger.warning("Rejected login attempt for user '%s'", username)
            raise AuthenticationError("Invalid credentials")
        logger.info("User '%s' logged in", username)
        return LoginResponse(
            success=True,
            message="Login successful",
            user=SessionUser(username=username, name=self.display_name, role=ADMIN_ROLE),
            token=issue_token(),
        )
