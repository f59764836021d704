"""
Core value types: levels, output modes and the log entry record.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable

from .exceptions import InvalidLevelError


class LogLevel(str, Enum):
    """Severity of a log entry, in increasing order."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def tag(self) -> str:
        """Upper-cased level name used in console and text output."""
        return self.value.upper()

    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        if isinstance(value, LogLevel):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidLevelError(value) from None


class LogMode(str, Enum):
    """Independently togglable output sinks."""

    CONSOLE = "console"
    JSON = "json"
    TXT = "txt"

    @classmethod
    def parse_many(cls, modes: str | Iterable[str | LogMode] | None) -> frozenset[LogMode]:
        """Normalize a mode list; unknown tokens are dropped without error.

        Accepts an iterable of tokens or a comma-separated string such as
        ``"console,json"``.
        """
        if modes is None:
            return frozenset()
        if isinstance(modes, str):
            modes = modes.split(",")

        known = {m.value for m in cls}
        parsed = set()
        for mode in modes:
            name = mode.value if isinstance(mode, LogMode) else str(mode).strip().lower()
            if name in known:
                parsed.add(cls(name))
        return frozenset(parsed)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision, e.g. ``2024-05-01T12:00:00.123Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Field names and order are the on-disk contract of the JSON log file.
    """

    timestamp: str
    service: str
    module: str
    caller: str
    level: LogLevel
    message: str

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["level"] = self.level.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LogEntry:
        return cls(
            timestamp=str(data.get("timestamp", "")),
            service=str(data.get("service", "")),
            module=str(data.get("module", "")),
            caller=str(data.get("caller", "")),
            level=LogLevel.parse(data.get("level", LogLevel.INFO)),
            message=str(data.get("message", "")),
        )
