"""Application configuration and constants."""
import logging
import os
from pathlib import Path

from core.logging_setup import parse_level


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_list_env(name: str, default: list[str]) -> list[str]:
    """Parse comma separated values from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    values = [item.strip() for item in raw.split(",") if item.strip()]
    return values or default


def _parse_log_level_env(name: str, default: str) -> str:
    """Parse logging level name from environment variable, INFO if unknown."""
    return logging.getLevelName(parse_level(os.environ.get(name, default)))


# Server
HOST = os.environ.get("QUIZ_HOST", "127.0.0.1")
PORT = _parse_int_env("QUIZ_PORT", 8000)
CORS_ORIGINS = _parse_list_env("QUIZ_CORS_ORIGINS", ["*"])

# Logging
LOG_LEVEL = _parse_log_level_env("QUIZ_LOG_LEVEL", "INFO")

# Catalog, built-in questions when unset
_catalog_file = os.environ.get("QUIZ_CATALOG_FILE")
CATALOG_FILE = Path(_catalog_file) if _catalog_file else None
