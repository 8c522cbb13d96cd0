"""Configuration settings for Revealcover."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from revealcover.exceptions import InvalidCoveringKindError


class CoveringKind(str, Enum):
    """Covering generation strategy.

    Values match the names used by the presentation layer.
    """

    RECTANGLES = "Rectangles"
    TRIANGLES = "Triangles"

    @classmethod
    def parse(cls, value: "str | CoveringKind") -> "CoveringKind":
        """Parse a covering kind name, case-insensitively.

        Args:
            value: Kind name such as "Rectangles", "triangles" or a CoveringKind

        Returns:
            Matching CoveringKind

        Raises:
            InvalidCoveringKindError: If the name is unknown
        """
        if isinstance(value, cls):
            return value
        for kind in cls:
            if kind.value.lower() == str(value).strip().lower():
                return kind
        raise InvalidCoveringKindError(str(value))


class UncoveringStrategy(str, Enum):
    """How covering shapes are removed."""

    MANUAL = "Manual"


class CoveringConfig(BaseModel):
    """Configuration for covering generation."""

    kind: CoveringKind = Field(
        default=CoveringKind.RECTANGLES,
        description="Covering strategy",
    )
    object_count: int = Field(
        default=10,
        ge=0,
        description="Approximate number of objects to cover the image with",
    )
    shuffle: bool = Field(
        default=True,
        description="Shuffle polygons into a random reveal order",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed (None = fresh entropy)",
    )


class GeometryConfig(BaseModel):
    """Tolerances for degenerate geometry.

    Both are relative to the bounding box of the point set: the area
    tolerance to its area, the dedup tolerance to each of its sides.
    """

    area_tolerance: float = Field(
        default=1e-12,
        ge=0.0,
        le=1e-3,
        description="Triangles smaller than this relative area are dropped",
    )
    dedup_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        le=1e-3,
        description="Point sets flatter than this relative distance count as collinear",
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


class RevealSettings(BaseModel):
    """Main application settings."""

    image_source: str | None = Field(
        default=None,
        description="Last used image folder, owned by the presentation layer",
    )
    covering: CoveringConfig = Field(default_factory=CoveringConfig)
    uncovering_strategy: UncoveringStrategy = Field(default=UncoveringStrategy.MANUAL)
    show_control_buttons: bool = Field(default=True)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RevealSettings:
    """Get default application settings."""
    return RevealSettings()
