"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field.  The listening
address is fixed and therefore kept as module constants rather than
settings.
"""

import os
from dataclasses import dataclass


HOST = "0.0.0.0"
PORT = 3000


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "DevOps Class API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # ``test`` keeps ``run.py`` from opening a listener so the app can be
    # driven in-process by a test client.
    environment: str = os.getenv("APP_ENV", "development")

    @property
    def testing(self) -> bool:
        return self.environment.lower() == "test"


# Environment variables must be set before this module is imported.
settings = Settings()
