"""
Evening Coffee Backend - Application Configuration
====================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Read by the application factory, the CLI entry point, and logging setup.
When:  Loaded once at module import time.

Embedded vs standalone:
    The app runs either standalone or embedded inside a parent server. The
    choice is a plain settings field (EMBEDDED_MODE) that the factory reads
    once, and callers may override it explicitly:

        create_app("coffee-1", Settings(embedded_mode=True))
        create_app("coffee-1", embedded=True)
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running the site locally with
    `python -m eveningcoffee` from the directory holding index.html.
    """

    # ── Application Identity ──────────────────────────────────────────────
    # What: Identifier of this app instance when several are hosted together
    # Used for: /api/{app_id} prefix in embedded mode, and the health payload
    app_id: str = Field(default="evening-coffee", min_length=1)

    # What: Mount API routes under /api/{app_id} instead of the root
    embedded_mode: bool = Field(default=False)

    # ── Static Content ────────────────────────────────────────────────────
    # What: Directory whose files are served by GET / and the static catch-all
    static_root: str = Field(default=".")
    index_file: str = Field(default="index.html")

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # EMBEDDED_MODE and embedded_mode both work
    }

    def api_base(self, app_id: str) -> str:
        """Route prefix for the given app id under the configured mode."""
        return f"/api/{app_id}" if self.embedded_mode else ""


# Module-level instance used when the factory is called without settings
settings = Settings()
