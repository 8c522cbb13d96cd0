"""Configuration management for revealcover.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CoveringKind: Covering strategy selector
- CoveringConfig: Covering generation settings
- GeometryConfig: Degenerate geometry tolerances
- LoggingConfig: Logging settings
- RevealSettings: Main application settings
"""

from revealcover.config.settings import (
    CoveringConfig,
    CoveringKind,
    GeometryConfig,
    LoggingConfig,
    RevealSettings,
    UncoveringStrategy,
    get_default_settings,
)

__all__ = [
    "CoveringConfig",
    "CoveringKind",
    "GeometryConfig",
    "LoggingConfig",
    "RevealSettings",
    "UncoveringStrategy",
    "get_default_settings",
]
