"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the application can
start without any configuration at all; a deployment overrides them via
environment variables.  Tests construct ``Settings`` directly with
explicit values and pass the instance to ``create_app``.
"""

import os
from dataclasses import dataclass
from typing import List, Tuple


STORAGE_DURABLE = "durable"
STORAGE_VOLATILE = "volatile"
STORAGE_MODES = (STORAGE_DURABLE, STORAGE_VOLATILE)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Training Events API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the domain routes (events, participants, login,
    # health) are mounted.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # ``durable`` keeps data in a SQLite file located by ``database_url``.
    # ``volatile`` keeps everything in memory: all data is lost when the
    # process exits.  Volatile stores are seeded with a sample event unless
    # ``seed_sample_data`` is turned off.
    storage_mode: str = os.getenv("STORAGE_MODE", STORAGE_DURABLE)

    # Path to the SQLite database file used in durable mode.  Relative
    # paths are resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "training_events.db")
    seed_sample_data: bool = _env_bool("SEED_SAMPLE_DATA", "true")

    # The single static credential pair accepted by POST /login.  This is
    # not an access-control boundary: the issued token is never verified.
    auth_username: str = os.getenv("AUTH_USERNAME", "coronelvivida")
    auth_password: str = os.getenv("AUTH_PASSWORD", "educacao@2024")
    auth_display_name: str = os.getenv("AUTH_DISPLAY_NAME", "Prefeitura de Coronel Vivida")

    # Comma-separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    @property
    def credentials(self) -> Tuple[str, str]:
        return self.auth_username, self.auth_password

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()
