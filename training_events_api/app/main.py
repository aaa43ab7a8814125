"""
Main entrypoint for the Training Events API.

This module assembles the FastAPI application: it configures logging,
installs CORS and request logging middleware, registers the JSON error
handlers and includes the routers.  The ``create_app`` function builds
and configures an app; the module-level ``app`` is created at import
time so it can be served directly, e.g.::

    uvicorn training_events_api.app.main:app --reload

The database handle is created by ``create_app`` and stored on
``app.state.db``.  It is opened by the startup hook and closed by the
shutdown hook, so the store lives exactly as long as the application.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import root_router, router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.exceptions import register_exception_handlers
from .core.logging_config import install_request_logging, setup_logging


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured application whose store is opened on startup.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.db = Database.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    install_request_logging(app)

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.db.open()
        logger.info(
            "%s %s started (%s storage, environment %s)",
            settings.project_name,
            settings.api_version,
            settings.storage_mode,
            settings.environment,
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        app.state.db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
