"""
Health and service information endpoints.

``GET {prefix}/health`` checks that the store answers a trivial query.
``GET /`` describes the service and its routes.
"""

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from training_events_api.app.api.deps import get_db, get_settings
from training_events_api.app.core.config import Settings
from training_events_api.app.core.db import Database


logger = logging.getLogger(__name__)

router = APIRouter()
root_router = APIRouter()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health")
async def health(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Any:
    """Report whether the API and its database are usable.

    Returns 503 with ``status: "ERROR"`` if the database does not
    answer.
    """
    try:
        db.ping()
    except (sqlite3.Error, RuntimeError) as exc:
        logger.error("Health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "ERROR",
                "message": "Database connection failed",
                "timestamp": _now(),
            },
        )
    return {
        "status": "OK",
        "message": "API and database are working",
        "database": "Connected",
        "storageMode": db.storage_mode,
        "timestamp": _now(),
        "environment": settings.environment,
    }


@root_router.get("/")
async def service_info(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    prefix = settings.api_prefix
    return {
        "message": settings.project_name,
        "status": "Online",
        "version": settings.api_version,
        "timestamp": _now(),
        "endpoints": {
            "health": f"GET {prefix}/health",
            "login": f"POST {prefix}/login",
            "events": {
                "list": f"GET {prefix}/events",
                "create": f"POST {prefix}/events",
                "delete": f"DELETE {prefix}/events/{{id}}",
            },
            "participants": {
                "list": f"GET {prefix}/participants",
                "create": f"POST {prefix}/participants",
                "attendance": f"PUT {prefix}/participants/{{id}}/attendance",
                "delete": f"DELETE {prefix}/participants/{{id}}",
            },
        },
    }


@root_router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
