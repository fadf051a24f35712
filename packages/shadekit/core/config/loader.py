"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from shadekit.core.config.models import AppConfig, LoggingConfig
from shadekit.core.review.config import ReviewConfig
from shadekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SHADEKIT_LOG_LEVEL"

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = AppConfig.default_path()
_app_config_cache: AppConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file at the default path yields all defaults; an explicit
    path must exist. ``SHADEKIT_LOG_LEVEL`` overrides the configured level.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to shadekit.yaml in the working directory.

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    global _app_config_cache

    use_default = path is None
    if use_default:
        if _app_config_cache is not None:
            return _app_config_cache
        path = _DEFAULT_APP_CONFIG_PATH

    if use_default and not Path(path).exists():
        config = AppConfig()
    else:
        config = AppConfig.model_validate(load_config(path))

    config = _apply_env_overrides(config)

    if use_default:
        _app_config_cache = config

    return config


def clear_app_config_cache() -> None:
    """Forget the cached default app config."""
    global _app_config_cache
    _app_config_cache = None


def load_review_config(path: str | Path | None = None) -> ReviewConfig:
    """Load review thresholds.

    Accepts either a file holding the review fields at the top level or a
    full app config with a ``review`` section.

    Example:
        >>> load_review_config().min_contrast_ratio
        4.5
    """
    if path is None:
        return ReviewConfig()
    raw = load_config(path)
    if isinstance(raw.get("review"), dict):
        raw = raw["review"]
    return ReviewConfig.model_validate(raw)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    level = os.getenv(LOG_LEVEL_ENV)
    if not level:
        return config
    logger.debug("Loaded %s from environment", LOG_LEVEL_ENV)
    logging_config = LoggingConfig.model_validate(
        {**config.logging.model_dump(), "level": level.upper()}
    )
    return config.model_copy(update={"logging": logging_config})


__all__ = [
    "LOG_LEVEL_ENV",
    "clear_app_config_cache",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_review_config",
]
