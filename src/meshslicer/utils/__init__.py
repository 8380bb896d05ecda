"""Utility functions for meshslicer.

This module provides utility functions including:

- Logging setup and configuration
- Slice statistics tracking
"""

from meshslicer.utils.logging import (
    SliceLogger,
    SliceStats,
    configure_logging,
)

__all__ = [
    "SliceLogger",
    "SliceStats",
    "configure_logging",
]
