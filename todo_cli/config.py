"""
Configuration management using pydantic-settings.

LEARNING NOTES:
- pydantic-settings automatically loads values from environment variables
- It supports .env files out of the box (via python-dotenv)
- Validators run on settings too, so a typo in TODO_CLI_LOG_LEVEL
  fails early with a clear message

This module handles:
- Where the todo list is stored
- How much logging to produce, and where it goes

Environment variables are loaded in this priority order:
1. System environment variables (highest priority)
2. .env file in current directory
3. Default values defined in the Settings class

The --file option on the command line overrides data_file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Example:
        # In .env or shell:
        TODO_CLI_DATA_FILE=~/todos.json
        TODO_CLI_LOG_LEVEL=info

        # In Python:
        settings = Settings()
        settings.data_file  # PosixPath('/home/me/todos.json')
    """

    # === Storage ===
    data_file: Path = Field(
        default=Path("todos.json"),
        description="JSON file holding the todo list"
    )

    # === Logging ===
    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for log messages written to stderr"
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives every log message (DEBUG and up)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # e.g., TODO_CLI_DATA_FILE, TODO_CLI_LOG_LEVEL
        env_prefix="TODO_CLI_",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("data_file", "log_file")
    @classmethod
    def _expand_user(cls, value: Path | None) -> Path | None:
        if value is None:
            return None
        return value.expanduser()


# ============================================================================
# Cached Settings
# ============================================================================
# A module-level variable caches the Settings instance so the .env file
# is read once per process.

_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (lazy-loaded, cached).

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings() -> None:
    """Clear the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
