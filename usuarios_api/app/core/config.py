"""
Simple configuration management.

Like the rest of the project this avoids a dependency on
``pydantic_settings``: the ``Settings`` dataclass reads each value from
an environment variable when an instance is created, falling back to a
default.  Tests build their own ``Settings`` with explicit values
instead of patching the environment.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Usuarios API")
    api_version: str = _env("API_VERSION", "1.0.0")

    # ``development`` turns on per-request access logging.
    environment: str = _env("APP_ENV", "development")
    log_level: str = _env("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console.
    log_file: str = _env("LOG_FILE", "")

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Directory with static assets.  Relative paths are resolved against
    # the working directory the server is started from.
    static_dir: str = _env("STATIC_DIR", "public")

    greeting: str = _env("GREETING", "Hello World from FastAPI")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Default settings used by ``create_app`` and ``run.py``.  Environment
# variables must be set before this module is imported for them to be
# picked up here.
settings = Settings()
