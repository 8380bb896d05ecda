"""Configuration management for meshslicer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SliceConfig: Cut line and vertex partitioning settings
- TriangulationConfig: Triangulation strategy selection
- LoggingConfig: Logging settings
- MeshSlicerSettings: Main application settings
"""

from meshslicer.config.settings import (
    LoggingConfig,
    MeshSlicerSettings,
    SliceConfig,
    TriangulationConfig,
    TriangulationStrategy,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MeshSlicerSettings",
    "SliceConfig",
    "TriangulationConfig",
    "TriangulationStrategy",
    "get_default_settings",
]
