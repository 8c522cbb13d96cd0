"""Utility functions for revealcover.

This module provides logging setup and request statistics.
"""

from revealcover.utils.logging import (
    CoveringLogger,
    CoveringStats,
    configure_logging,
)

__all__ = [
    "CoveringLogger",
    "CoveringStats",
    "configure_logging",
]
