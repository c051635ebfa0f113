"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on
``0.0.0.0:3001`` and stores its database under ``data/phonebook.db``.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Phonebook API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Name reported by the ``GET /`` probe.
    service_name: str = os.getenv("SERVICE_NAME", "phonebook-api")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind to all interfaces so that clients on the local network can
    # reach the API.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    # Directory holding the SQLite file.  A relative path is resolved
    # against the project root by the ``db`` module.
    data_dir: str = os.getenv("DATA_DIR", "data")
    db_filename: str = os.getenv("DB_FILENAME", "phonebook.db")

    # Comma-separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def __post_init__(self) -> None:
        # uvicorn refuses unknown level names; fall back to INFO like
        # ``setup_logging`` does.
        level = self.log_level.strip().upper()
        self.log_level = level if level in LOG_LEVELS else "INFO"

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
