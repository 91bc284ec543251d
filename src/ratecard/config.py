"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables and a cached ``get_settings()`` accessor.  The valuation engine
itself takes no settings; they only drive logging and the defaults the CLI
fills in when an input file omits them.

This module imports nothing from ``ratecard`` except the domain enums, so it
can be loaded before any engine module.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import structlog
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ratecard.domain.types import CurrencyCode, Region

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    log_level: str = "INFO"

    # -- Quote defaults --------------------------------------------------------
    default_currency: CurrencyCode = CurrencyCode.USD
    default_region: Region = Region.UNITED_STATES
    quote_valid_days: int = Field(default=14, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
