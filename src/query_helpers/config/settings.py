"""
Configuration management for query-helpers.

This module provides environment-based configuration using Pydantic BaseSettings.
Settings control the logging setup and the default SQL rendering choices
(identifier dialect and parameter placeholder style) used by column sets that
do not request their own.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("QH_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

IdentifierDialect = Literal["postgresql", "mysql"]
ParamStyle = Literal["pyformat", "named", "template"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the QH_ prefix. For example,
    QH_PARAM_STYLE=named switches placeholders to ``:name`` tokens.

    Logging fields also accept their bare, unprefixed names:
    - LOG_LEVEL: Logging level (uppercase)
    - LOG_TO_FILE: Enable file logging
    - LOG_FILE_DIR: Directory for log files
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias=AliasChoices("QH_LOG_LEVEL", "LOG_LEVEL"),
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        validation_alias=AliasChoices("QH_LOG_TO_FILE", "LOG_TO_FILE"),
        description="Write logs to a daily rotating file in addition to stdout",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        validation_alias=AliasChoices("QH_LOG_FILE_DIR", "LOG_FILE_DIR"),
        description="Directory for log files",
    )

    # SQL rendering defaults
    identifier_dialect: IdentifierDialect = Field(
        default="postgresql",
        description="Quoting rules used for escaped column and table names",
    )
    param_style: ParamStyle = Field(
        default="pyformat",
        description=(
            "Placeholder token style: pyformat (%(name)s), named (:name) "
            "or template (${name})"
        ),
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{value}'"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="QH_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; call ``get_settings.cache_clear()``
    after changing the environment (tests do this between cases).

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
