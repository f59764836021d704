"""
servicelog Configuration Module.

Implements the Nested Settings Pattern: each concern is a sub-settings model
with its own environment variable prefix.

Usage:
    from servicelog.config import settings

    settings.logging.dir
    settings.logging.console_format
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging import ConsoleFormat, ConsoleStream, DiagnosticsLevel, LoggingSettings


class Settings(BaseSettings):
    """Composite settings aggregating all configuration domains."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


settings = Settings()

__all__ = [
    "ConsoleFormat",
    "ConsoleStream",
    "DiagnosticsLevel",
    "LoggingSettings",
    "Settings",
    "settings",
]
