"""Configuration models and loaders."""

from sparkfx.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from sparkfx.core.config.models import AppConfig, LoaderConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "LoaderConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
