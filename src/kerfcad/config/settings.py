"""Configuration settings for kerfcad."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field


class ToothOptions(BaseModel):
    """Options for finger-joint teeth."""

    protrude: bool | None = Field(
        default=None,
        description="Teeth extend past the nominal edge (None = follow kerf sign)",
    )


class WaveOptions(BaseModel):
    """Options for sinusoidal waves."""

    resolution: int = Field(
        default=90,
        ge=2,
        description="Samples per period",
    )


class RectangleOptions(BaseModel):
    """Options for sharp and rounded rectangles."""

    radius: float = Field(
        default=0.0,
        ge=0.0,
        description="Corner radius (0 = sharp corners)",
    )
    resolution: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Samples per rounded corner (None = derived from radius, below 2 = sharp corners)",
    )

    def corner_resolution(self, width: float, height: float) -> int:
        """Get the number of samples per corner for a rectangle of this size.

        Args:
            width: Rectangle width (sign ignored)
            height: Rectangle height (sign ignored)

        Returns:
            Explicit resolution if set, otherwise at least 90 samples scaled
            up for radii larger than the rectangle
        """
        if self.resolution is not None:
            return self.resolution
        extent = max(abs(width), abs(height))
        if extent == 0:
            return 90
        return round(max(90.0, 90.0 * self.radius / extent))


class ArcOptions(BaseModel):
    """Options for circular arcs."""

    degrees: float = Field(
        default=90.0,
        description="Sweep angle in degrees (negative mirrors the arc)",
    )
    resolution: int = Field(
        default=90,
        ge=2,
        description="Samples along the arc",
    )
    proportion: float = Field(
        default=1.0,
        gt=0.0,
        le=1.0,
        description="Fraction of the sweep to draw, starting at the current point",
    )


class CircleOptions(BaseModel):
    """Options for full circles."""

    resolution: int = Field(
        default=360,
        ge=2,
        description="Samples per circle",
    )
    centers: list[tuple[float, float]] = Field(
        default_factory=lambda: [(0.0, 0.0)],
        min_length=1,
        description="Circle centres relative to the cursor",
    )


class ExportConfig(BaseModel):
    """Configuration for SVG export."""

    precision: int = Field(
        default=4,
        ge=0,
        le=12,
        description="Decimal digits for every coordinate",
    )
    unit: str = Field(
        default="mm",
        description="Unit suffix for the document width and height",
    )
    newline: str = Field(
        default="\r\n",
        description="Line terminator",
    )
    fill: str = Field(
        default="none",
        description="Fill paint for paths and the container",
    )
    stroke: str = Field(
        default="black",
        description="Stroke paint for paths and the container",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file output)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class KerfCadSettings(BaseModel):
    """Main settings: default generator options plus export and logging."""

    wave: WaveOptions = Field(default_factory=WaveOptions)
    arc: ArcOptions = Field(default_factory=ArcOptions)
    circle: CircleOptions = Field(default_factory=CircleOptions)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> KerfCadSettings:
    """Get default settings."""
    return KerfCadSettings()
