"""
Logging Configuration.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ConsoleStream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class ConsoleFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Output and diagnostics configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SL_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    dir: Optional[Path] = Field(default=None, description="Logs directory (defaults to the package's logs/ folder)")
    console_stream: ConsoleStream = Field(default=ConsoleStream.STDOUT, description="Console sink stream")
    console_format: ConsoleFormat = Field(default=ConsoleFormat.CONSOLE, description="Console sink format")
    console_color: Optional[bool] = Field(default=None, description="Force ANSI colors on/off (auto-detect if unset)")
    diagnostics_level: DiagnosticsLevel = Field(
        default=DiagnosticsLevel.WARNING,
        description="Level of servicelog's own diagnostic messages",
    )
