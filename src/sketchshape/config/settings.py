"""Configuration settings for Sketchshape."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BinarizeConfig(BaseModel):
    """Configuration for converting RGBA pixels to a foreground mask."""

    threshold: float = Field(
        default=5.0,
        ge=0.0,
        le=255.0,
        description="Gray level a pixel must exceed to count as foreground",
    )
    alpha_boost: float = Field(
        default=1.5,
        ge=1.0,
        le=10.0,
        description="Luminance multiplier for nearly opaque pixels",
    )
    alpha_cutoff: int = Field(
        default=200,
        ge=0,
        le=255,
        description="Alpha value a pixel must exceed to receive the boost",
    )
    invert: bool = Field(
        default=False,
        description="Treat dark ink on a light background as foreground",
    )


class TracerConfig(BaseModel):
    """Configuration for the gap-tolerant contour walk."""

    min_points: int = Field(
        default=3,
        ge=1,
        description="Traces with fewer points are discarded",
    )
    gap_radii: tuple[int, ...] = Field(
        default=(2, 3),
        description="Ring radii searched, in order, to bridge a broken stroke",
    )
    boundary_only: bool = Field(
        default=True,
        description="Walk only outer boundary pixels; False walks the whole stroke",
    )

    @field_validator("gap_radii")
    @classmethod
    def _check_radii(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(r < 1 for r in value):
            raise ValueError("gap radii must be positive")
        return value


class ContourConfig(BaseModel):
    """Configuration for choosing the main contour."""

    min_area: float = Field(
        default=20.0,
        ge=0.0,
        description="Contours must enclose more than this area (square pixels)",
    )


class ClassifierConfig(BaseModel):
    """Thresholds for the circle/triangle decision policy."""

    circularity_threshold: float = Field(
        default=0.6,
        ge=0.0,
        lt=1.0,
        description="Circularity a contour must exceed to be a circle",
    )
    triangle_corners: int = Field(
        default=3,
        ge=2,
        description="Simplified corner count required for a triangle",
    )
    triangle_min_solidity: float = Field(
        default=0.85,
        ge=0.0,
        le=1.0,
        description="Solidity a contour must exceed to be a triangle",
    )
    triangle_tolerance: float = Field(
        default=0.25,
        ge=0.0,
        le=1.0,
        description="Douglas-Peucker epsilon as a fraction of the perimeter",
    )
    fallback_max_corners: int = Field(
        default=4,
        ge=2,
        description="Fallback guess is triangle up to this many corners, circle above",
    )
    fallback_confidence: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Confidence reported for the fallback guess",
    )


class DebugConfig(BaseModel):
    """Debug visualization settings."""

    enabled: bool = Field(
        default=False,
        description="Render an overlay of the pipeline artifacts",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch classification."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level


class DetectorSettings(BaseModel):
    """Main application settings."""

    binarize: BinarizeConfig = Field(default_factory=BinarizeConfig)
    tracer: TracerConfig = Field(default_factory=TracerConfig)
    contour: ContourConfig = Field(default_factory=ContourConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    debug: DebugConfig = Field(default_factory=DebugConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DetectorSettings:
    """Get default application settings."""
    return DetectorSettings()
