"""Configuration models for shadekit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shadekit.core.review.config import ReviewConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class ServerConfig(BaseModel):
    """HTTP server bind settings."""

    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    review: ReviewConfig = ReviewConfig()
    server: ServerConfig = ServerConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("shadekit.yaml")


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
]
