"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration at all, which is what
the lab exercises and the test suite rely on.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Concert Lab API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which all routers are mounted.  Empty by default so
    # the concert resource lives at ``/concerts``; set e.g. ``/api/v1``
    # to nest it.  ``Location`` headers include the prefix.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Name of the cookie that carries the opaque client identifier.
    client_cookie: str = os.getenv("CLIENT_COOKIE", "clientId")

    # Path to the SQLite database holding performers and parolees.  A
    # relative path is resolved relative to the package root by the
    # ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "concert_lab.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
