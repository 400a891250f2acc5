"""
SOLID Messenger Demo — Centralized configuration.

Loads settings from .env (if present) and validates them.
Settings only affect logging on stderr; the demo's stdout is fixed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

# Load .env from project root (two levels up from src/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_ENV_PATH)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # Logging (stderr only; stdout carries the demo output)
    LOG_LEVEL: str = _DEFAULT_LOG_LEVEL

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not level:
            return _DEFAULT_LOG_LEVEL
        if level not in _LOG_LEVELS:
            logger.warning(
                "Unknown LOG_LEVEL %r, falling back to %s", v, _DEFAULT_LOG_LEVEL
            )
            return _DEFAULT_LOG_LEVEL
        return level

    @property
    def log_level(self) -> int:
        return getattr(logging, self.LOG_LEVEL)


def _load_settings() -> Settings:
    """Load settings from environment."""
    return Settings(LOG_LEVEL=os.getenv("LOG_LEVEL", _DEFAULT_LOG_LEVEL))


# Singleton — imported by other modules as:
#   from src.config import settings
settings = _load_settings()
