"""
Configuration management for the function index service.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def load_environment() -> None:
    """Load variables from the file named by ENV_FILE, falling back to .env."""
    env_file = os.environ.get("ENV_FILE")
    if env_file and Path(env_file).exists():
        load_dotenv(env_file)
        logger.debug(f"Loaded environment from {env_file}")
    elif Path(".env").exists():
        load_dotenv(".env")
        logger.debug("Loaded environment from .env")


class Settings(BaseSettings):
    """Application settings, read from FNINDEX_* environment variables."""

    # Application settings
    app_name: str = "Function Index"
    debug: bool = False
    log_level: str = "INFO"

    # Indexing settings
    project_dir: str = Field(default=".", description="Directory indexed at startup")
    max_lines: int = Field(default=200, gt=0, description="Default number of lines returned per function")

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: Annotated[List[str], NoDecode] = Field(default=["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from various input formats."""
        if isinstance(v, str):
            # Try to parse as JSON first
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, treat as comma-separated string
                return [origin.strip() for origin in v.split(',') if origin.strip()]
        elif isinstance(v, list):
            return v
        else:
            return ["*"]

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="FNINDEX_",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    load_environment()
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the entry points."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
