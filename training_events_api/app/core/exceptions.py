"""
Error kinds raised by the service layer and their HTTP mapping.

Services raise subclasses of ``ApplicationError``; the handlers
registered by ``register_exception_handlers`` turn them into JSON
bodies of the form ``{"error": <kind>, "message": <text>}`` with the
status code carried by the exception class.  Request bodies rejected by
pydantic are reported as ``ValidationError`` (400) as well, and any
unmatched method and path pair produces a 404 listing the available
routes.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "message": self.message}


class ValidationError(ApplicationError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ApplicationError):
    """The supplied credentials do not match."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["success"] = False
        return body


class NotFoundError(ApplicationError):
    """No route matches the request."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(ApplicationError):
    """The store failed to read or write."""


class CorruptDataError(ApplicationError):
    """A persisted attendance value cannot be decoded."""


def list_routes(app: FastAPI) -> List[str]:
    """Return ``"METHOD /path"`` strings for every public route of ``app``."""
    routes: List[str] = []
    for route in app.routes:
        methods = getattr(route, "methods", None)
        path = getattr(route, "path", None)
        if not methods or not path or not getattr(route, "include_in_schema", True):
            continue
        for method in sorted(methods - {"HEAD", "OPTIONS"}):
            routes.append(f"{method} {path}")
    return routes


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Report the first offending field; pydantic locations look like
    # ("body", "hoursLoad").
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return await application_error_handler(request, ValidationError(message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # An existing path with an unsupported method is reported like an
    # unknown path.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        error = NotFoundError("Route not found")
        body = error.to_dict()
        body.update(
            {
                "path": request.url.path,
                "method": request.method,
                "availableRoutes": list_routes(request.app),
            }
        )
        return JSONResponse(status_code=error.status_code, content=body)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTPException", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "InternalServerError", "message": "Something went wrong"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
