"""Utility functions for axisthin.

This module provides:

- Logging setup and configuration
- Session event logging and statistics
"""

from axisthin.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_logging",
]
