"""Configuration management for shadekit."""

from shadekit.core.config.loader import (
    clear_app_config_cache,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_review_config,
)
from shadekit.core.config.models import AppConfig, LoggingConfig, ServerConfig

__all__ = [
    # Loaders
    "clear_app_config_cache",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_review_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
]
