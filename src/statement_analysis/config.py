"""Configuration for the statement dashboard."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache
def get_strict_metrics() -> bool:
    """Get whether zero denominators should raise instead of yielding inf/nan.

    Returns:
        True when STATEMENT_STRICT_METRICS is set to a truthy value
    """
    load_dotenv()
    return os.getenv("STATEMENT_STRICT_METRICS", "false").strip().lower() in _TRUTHY


@lru_cache
def get_log_level() -> str:
    """Get logging level name from environment.

    Returns:
        Level name such as 'INFO' or 'WARNING'
    """
    load_dotenv()
    return os.getenv("STATEMENT_LOG_LEVEL", "WARNING").strip().upper()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the dashboard process.

    Args:
        level: Level name. Falls back to config.
    """
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)
