"""Configuration management for sketchshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BinarizeConfig: Foreground threshold settings
- TracerConfig: Contour walk settings
- ContourConfig: Main contour selection settings
- ClassifierConfig: Decision policy thresholds
- DebugConfig: Debug overlay toggle
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- DetectorSettings: Main application settings
"""

from sketchshape.config.settings import (
    BinarizeConfig,
    ClassifierConfig,
    ContourConfig,
    DebugConfig,
    DetectorSettings,
    LoggingConfig,
    ProcessingConfig,
    TracerConfig,
    get_default_settings,
)

__all__ = [
    "BinarizeConfig",
    "ClassifierConfig",
    "ContourConfig",
    "DebugConfig",
    "DetectorSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "TracerConfig",
    "get_default_settings",
]
