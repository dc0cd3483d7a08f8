"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_BACKUP_DIR,
    DEFAULT_CONFIG_PATH,
    DEFAULT_GITHUB_API_URL,
    USER_AGENT,
    VERSION,
)
from .log import configure_logging

__all__ = [
    "DEFAULT_BACKUP_DIR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_GITHUB_API_URL",
    "USER_AGENT",
    "VERSION",
    "configure_logging",
]
