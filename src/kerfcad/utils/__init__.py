"""Utility functions for kerfcad.

This module provides logging setup and drawing statistics.
"""

from kerfcad.utils.logging import (
    DrawingLogger,
    DrawingStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "DrawingLogger",
    "DrawingStats",
    "configure_logging",
    "get_logger",
]
