"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables; defaults are provided for every field so the service starts
with no configuration at all.  Override them in production, in
particular ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Youth Ministry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    secret_key: str = os.getenv("SECRET_KEY", "dev-secret-key")
    # Tokens are valid for a working day by default.
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(8 * 60)))

    # Populate the in‑memory stores with the demo accounts, youths and
    # programs at application start.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Comma‑separated origins allowed to call the API from a browser, or
    # "*" for any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it.  Values are
# computed when this module is first imported, so environment variables
# must be set before that.
settings = Settings()
