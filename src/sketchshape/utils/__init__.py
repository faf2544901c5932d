"""Utility functions for sketchshape.

This module provides utility functions including:

- Logging setup and configuration
- Batch progress and statistics tracking
"""

from sketchshape.utils.logging import (
    BatchLogger,
    BatchStats,
    configure_logging,
)

__all__ = [
    "BatchLogger",
    "BatchStats",
    "configure_logging",
]
