"""This file contains global application settings."""

from os import path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV_FILE = ".env" if path.isfile(".env") else None

# Build-time constants
APP_VERSION = "1.0.0"
DEFAULT_MESSAGE = "This is your first API endpoint! Try modifying this message."

# Server
API_HOST = "0.0.0.0"
READ_TIMEOUT_SECONDS = 15.0
WRITE_TIMEOUT_SECONDS = 15.0
IDLE_TIMEOUT_SECONDS = 60

# Routing
ANY_METHOD = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


class Settings(BaseSettings):
    """Application settings."""

    # API
    port: int = Field(default=8000, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(
        env_file=DOTENV_FILE, env_ignore_empty=True, extra="ignore"
    )


class AppInfo(BaseModel):
    """Immutable values served by the API, injected at application construction."""

    version: str = APP_VERSION
    message: str = DEFAULT_MESSAGE

    model_config = ConfigDict(frozen=True)
