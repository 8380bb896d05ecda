"""Configuration settings for Meshslicer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class TriangulationStrategy(str, Enum):
    """Generic triangulation strategy for fragments with more than 3 vertices."""

    DELAUNAY = "delaunay"
    QUAD_FAN = "quad_fan"


class SliceConfig(BaseModel):
    """Configuration for cutting fragments."""

    dedup_epsilon: float = Field(
        default=0.001,
        gt=0.0,
        le=1.0,
        description="Vertices closer than this (position and UV together) are merged",
    )
    extend_multiplier: float = Field(
        default=10.0,
        gt=0.0,
        description="Each end of a missed cut line is pushed out by this many line lengths",
    )
    bounded_cut_line: bool = Field(
        default=False,
        description="Treat the cut line as a finite segment instead of an infinite line",
    )
    retry_with_extension: bool = Field(
        default=True,
        description="Extend the cut line once and retry when it misses a fragment",
    )


class TriangulationConfig(BaseModel):
    """Configuration for fragment triangulation."""

    strategy: TriangulationStrategy = Field(
        default=TriangulationStrategy.DELAUNAY,
        description="Generic triangulation strategy",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MeshSlicerSettings(BaseModel):
    """Main application settings."""

    slicing: SliceConfig = Field(default_factory=SliceConfig)
    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MeshSlicerSettings:
    """Get default application settings."""
    return MeshSlicerSettings()
