"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so the service has no dependency on a separate
settings package.  Defaults are provided for all fields.  In a
production deployment override them via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "LTRegistrator API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db.get_database_path``.
    database_url: str = os.getenv("DATABASE_URL", "ltregistrator.db")

    # Comma-separated list of origins allowed to call the API from a
    # browser.  The default matches the Angular dev server.
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:4200")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
