"""Configuration management for axisthin.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ThinningConfig: Thinning, erosion and scale-axis settings
- SerializerConfig: Path serialization settings
- LoggingConfig: Logging settings
- AxisThinSettings: Main application settings
"""

from axisthin.config.settings import (
    AxisThinSettings,
    LoggingConfig,
    SerializerConfig,
    ThinningConfig,
    get_default_settings,
)

__all__ = [
    "AxisThinSettings",
    "LoggingConfig",
    "SerializerConfig",
    "ThinningConfig",
    "get_default_settings",
]
