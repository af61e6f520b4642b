"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field so the
service can start against a local MongoDB without any setup.  In a
deployment you should override the connection details through the
environment (``MONGO_URI``, ``MONGO_USERNAME``, ``MONGO_PASSWORD``) and
label the environment with ``APP_ENV``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# ``planet_api/`` package directory; static assets ship inside it.
PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value or None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Solar System API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = _optional("LOG_FILE")

    # Free-form label reported by ``GET /os`` (e.g. ``development``,
    # ``production``).  Left unset, the endpoint reports ``null``.
    environment: Optional[str] = _optional("APP_ENV")

    # MongoDB connection.  Credentials are passed to the driver
    # separately from the URI so that the URI can be shared safely.
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/solar-system")
    mongo_username: Optional[str] = _optional("MONGO_USERNAME")
    mongo_password: Optional[str] = _optional("MONGO_PASSWORD")

    # Database name.  When unset the database named in ``mongo_uri`` is
    # used, falling back to ``solar-system`` if the URI names none.
    mongo_database: Optional[str] = _optional("MONGO_DATABASE")
    mongo_collection: str = "planets"

    # Server selection timeout for the driver in milliseconds.
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    static_dir: str = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "static"))
    api_docs_path: Optional[str] = _optional("API_DOCS_PATH")

    host: str = os.getenv("HOST", "0.0.0.0")
    # The listening port is fixed; it is not read from the environment.
    port: int = 3000

    def __post_init__(self) -> None:
        if self.api_docs_path is None:
            self.api_docs_path = str(Path(self.static_dir) / "oas.json")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be set
# before importing this module.
settings = Settings()
