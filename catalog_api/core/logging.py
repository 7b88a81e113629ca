# ==============================================================================
# LOGGER - Logging Configuration
# ==============================================================================
# Console logging plus an optional append-only log file
# ==============================================================================

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Optional

from sqlalchemy.engine import make_url

from catalog_api.core.settings import Settings

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Access lines are already formatted by the request logger
ACCESS_LOGGER_NAME = "catalog_api.access"
ACCESS_FORMAT = "%(message)s"


def _build_file_handler(settings: Settings) -> logging.FileHandler:
    """Create LOG_DIR if needed and open LOG_FILE for appending."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _reset_handlers(logger: logging.Logger) -> None:
    """Close and detach every handler left by an earlier setup."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    settings: Settings,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Setup and configure the application loggers.

    Configures the ``catalog_api`` logger (used by every module via
    ``logging.getLogger(__name__)``) and the access logger used by the
    request logging middleware.

    Args:
        settings: Resolved application settings
        format_string: Custom format for application records

    Returns:
        The configured ``catalog_api`` logger
    """
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logger = logging.getLogger("catalog_api")
    logger.setLevel(level)
    _reset_handlers(logger)

    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.setLevel(logging.INFO)
    _reset_handlers(access_logger)
    access_logger.propagate = False

    formatter = logging.Formatter(format_string or LOG_FORMAT)
    access_formatter = logging.Formatter(ACCESS_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    access_console = logging.StreamHandler(sys.stdout)
    access_console.setFormatter(access_formatter)
    access_logger.addHandler(access_console)

    if settings.LOG_TO_FILE:
        file_handler = _build_file_handler(settings)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        access_file = _build_file_handler(settings)
        access_file.setFormatter(access_formatter)
        access_logger.addHandler(access_file)

    return logger


def mask_dsn(dsn: str) -> str:
    """Hide the password in a URL or keyword-style DSN."""
    if "://" in dsn:
        return make_url(dsn).render_as_string(hide_password=True)
    if "@" in dsn:
        # user:password@tcp(host)/db
        credentials, rest = dsn.split("@", 1)
        user = credentials.split(":", 1)[0]
        return f"{user}:***@{rest}" if ":" in credentials else dsn
    return re.sub(r"(password=)\S+", r"\1***", dsn)


def log_settings(logger: logging.Logger, settings: Settings) -> None:
    """Log the loaded configuration values at startup."""
    logger.info("Loaded configuration:")
    for key in (
        "APP_PORT",
        "ENVIRONMENT",
        "DB_DRIVER",
        "DB_DSN",
        "LOG_TO_FILE",
        "FRONTEND_ORIGINS",
        "RATE_LIMIT_MAX",
        "RATE_LIMIT_WINDOW",
        "ENABLE_HELMET",
        "ENABLE_RATE_LIMITER",
    ):
        value = getattr(settings, key)
        if hasattr(value, "value"):
            value = value.value
        elif key == "DB_DSN":
            value = mask_dsn(value)
        logger.info(f"   {key}: {value}")
