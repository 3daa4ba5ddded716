"""Utility modules for the UHT trait challenge."""

from uht_challenge.utils.logging import console, get_logger, setup_logging

__all__ = [
    "console",
    "get_logger",
    "setup_logging",
]
