"""
Notebox - Application Configuration
===================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe loading of the bind address and store path, validated once.
       Missing required values fail before the server binds a socket.
How:   Values come from keyword arguments (the command line), then
       NOTEBOX_* environment variables, then an optional .env file.
Who:   Built by the CLI entry point, or by create_app() when run under an
       external ASGI server.
When:  Once per process, before the application is created.

Required settings:
    host   - bind host (NOTEBOX_HOST, -h/--host)
    port   - bind port (NOTEBOX_PORT, -p/--port)
    cache  - path of the JSON store file (NOTEBOX_CACHE, -c/--cache)
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# The form ships inside the package so an installed service can serve it
# regardless of the working directory.
DEFAULT_UPLOAD_FORM = Path(__file__).resolve().parent / "static" / "UploadForm.html"


class Settings(BaseSettings):
    """
    Application settings.

    host, port and cache have no defaults: constructing Settings without
    them raises pydantic.ValidationError, which is how the process refuses
    to start.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(description="Interface the HTTP server binds to")
    port: int = Field(ge=1, le=65535, description="TCP port the HTTP server binds to")

    # ── Store ─────────────────────────────────────────────────────────────
    # What: The JSON file holding every note
    # Created as an empty array on startup when absent
    cache: Path = Field(description="Path to the JSON file backing the note store")

    # ── Upload Form ───────────────────────────────────────────────────────
    upload_form: Path = Field(default=DEFAULT_UPLOAD_FORM)

    # ── API Documentation ─────────────────────────────────────────────────
    # /docs, /redoc and /openapi.json are generated by FastAPI
    docs_enabled: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated; empty means no CORS middleware at all
    cors_origins: str = Field(default="")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_prefix="NOTEBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
