"""Entry point that serves the Training Events API with Uvicorn.

Host and port are read from ``HOST`` and ``PORT`` (defaults ``0.0.0.0``
and ``5000``).  Set ``STORAGE_MODE=volatile`` to run against an
in-memory database that is discarded on exit.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from training_events_api.app.core.config import settings
from training_events_api.app.main import app


logger = logging.getLogger(__name__)


async def main() -> None:
    """Start the API server and wait until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
