"""
Logging setup and HTTP request logging.

``setup_logging`` installs this application's console handler (and an
optional file handler) on the root logger.  The handlers are tagged by
name, so building a second application in the same process replaces
them instead of stacking duplicates, while handlers installed by
others (pytest, uvicorn) are left alone.  ``install_request_logging``
adds a middleware that logs one line per request with its status and
duration.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Request


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "training_events_api"

request_logger = logging.getLogger("training_events_api.requests")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    handlers[0].set_name(f"{HANDLER_PREFIX}.console")
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        handlers.append(file_handler)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the application.

    ``level`` is a level name such as ``"DEBUG"``; unknown names fall
    back to ``INFO``.  ``logfile`` adds a UTF-8 file handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)


def install_request_logging(app: FastAPI) -> None:
    """Log ``METHOD path -> status (ms)`` for every request served by ``app``."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        request_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response
