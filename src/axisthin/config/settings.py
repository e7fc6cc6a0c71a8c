"""Configuration settings for axisthin."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ThinningConfig(BaseModel):
    """Configuration for scale-axis thinning and the erosion comparison.

    Percent values mirror the 0-100 range of the demo sliders and are
    mapped to fractions in [0, 1] by the thinning session.
    """

    thin_percent: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Thinning amount (0 = original outline, 100 = axis)",
    )
    erode_percent: float = Field(
        default=0.0,
        ge=0.0,
        le=100.0,
        description="Erosion amount as percentage of the largest circle radius",
    )
    scale_factor: float = Field(
        default=2.5,
        ge=1.0,
        description="Scale-axis factor s applied to every circle radius",
    )
    resolution: float = Field(
        default=10.0,
        gt=0.0,
        description="Sampling resolution forwarded to transform builders",
    )

    @property
    def thin_fraction(self) -> float:
        """Thinning amount as a fraction."""
        return self.thin_percent / 100.0

    @property
    def erode_fraction(self) -> float:
        """Erosion amount as a fraction."""
        return self.erode_percent / 100.0


class SerializerConfig(BaseModel):
    """Configuration for path serialization."""

    continuity_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        description="Largest gap between consecutive curves accepted without warning",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level", mode="before")
    @classmethod
    def uppercase_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AxisThinSettings(BaseModel):
    """Main application settings."""

    thinning: ThinningConfig = Field(default_factory=ThinningConfig)
    serializer: SerializerConfig = Field(default_factory=SerializerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AxisThinSettings:
    """Get default application settings."""
    return AxisThinSettings()
