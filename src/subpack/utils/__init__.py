"""Utility modules."""

from subpack.utils.config import Settings, get_settings
from subpack.utils.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
]
