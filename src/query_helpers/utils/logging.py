"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from query_helpers.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging. Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from query_helpers.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("column_set.created", columns=3, table="users")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from query_helpers.config import get_settings

# Sensitive key patterns for sanitization
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r".*dsn.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Redacts values for keys matching password, token, api_key, secret or dsn
    (case-insensitive, substring match). Nested dictionaries are sanitized
    recursively.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings.

    Falls back to the LOG_LEVEL environment variable when settings fail to
    validate, so a bad QH_* value elsewhere does not disable logging.
    """
    try:
        level_name = get_settings().LOG_LEVEL
    except ValidationError:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().LOG_TO_FILE
    except ValidationError:
        return os.getenv("LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().LOG_FILE_DIR)
    except ValidationError:
        log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: query-helpers-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"query-helpers-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Sanitization processor
    - Dual output (stdout + optional file)
    """
    level = _get_log_level()

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[],
    )

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering and sanitization

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("column_set.created", columns=2)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., table="users")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(table="users", param_style="named")
        >>> logger.info("statement_prepared", rows=10)
    """
    return structlog.get_logger().bind(**kwargs)
