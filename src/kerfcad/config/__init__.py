"""Configuration management for kerfcad.

This module provides configuration management using Pydantic models.
Generator options can be passed per call or taken from the defaults held
in KerfCadSettings.

Key classes:
- ToothOptions, WaveOptions, RectangleOptions, ArcOptions, CircleOptions:
  per-generator options
- ExportConfig: SVG export settings
- LoggingConfig: Logging settings
- KerfCadSettings: Main settings
"""

from kerfcad.config.settings import (
    ArcOptions,
    CircleOptions,
    ExportConfig,
    KerfCadSettings,
    LoggingConfig,
    RectangleOptions,
    ToothOptions,
    WaveOptions,
    get_default_settings,
)

__all__ = [
    "ArcOptions",
    "CircleOptions",
    "ExportConfig",
    "KerfCadSettings",
    "LoggingConfig",
    "RectangleOptions",
    "ToothOptions",
    "WaveOptions",
    "get_default_settings",
]
