"""
The Logger: one per (service, module) identity, fanning entries out to sinks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from .caller import resolve_caller
from .config import settings
from .formatters import build_entry
from .sinks import BaseSink, ConsoleSink, JsonFileSink, TextFileSink
from .types import LogLevel, LogMode

DEFAULT_LOGS_DIR = Path(__file__).resolve().parent / "logs"


def resolve_logs_dir(logs_dir: str | Path | None = None) -> Path:
    """Explicit directory, else ``SL_LOG_DIR``, else ``logs/`` inside the package."""
    if logs_dir is not None:
        return Path(logs_dir)
    if settings.logging.dir is not None:
        return Path(settings.logging.dir)
    return DEFAULT_LOGS_DIR


class Logger:
    """Structured logger writing to console, JSON file and/or text file.

    File paths are fixed at construction. The logs directory is created only
    when a file-backed mode is enabled.

    Args:
        service: Name of the service using the logger
        module: Module within the service
        modes: Output modes (console, json, txt); unknown modes are ignored
        logs_dir: Directory for the log files
        console: Sink to use for console output instead of the default ConsoleSink
    """

    def __init__(
        self,
        service: str,
        module: str,
        modes: str | Iterable[str | LogMode] | None,
        *,
        logs_dir: str | Path | None = None,
        console: BaseSink | None = None,
    ):
        self.service = service
        self.module = module
        self.modes = LogMode.parse_many(modes)
        self.json_file_path: Path | None = None
        self.text_file_path: Path | None = None

        # Ordered: console, json, txt
        self._sinks: list[BaseSink] = []

        if LogMode.CONSOLE in self.modes:
            self._sinks.append(console or ConsoleSink())

        if LogMode.JSON in self.modes or LogMode.TXT in self.modes:
            directory = resolve_logs_dir(logs_dir)
            directory.mkdir(parents=True, exist_ok=True)
            if LogMode.JSON in self.modes:
                self.json_file_path = directory / f"{service}.log.json"
                self._sinks.append(JsonFileSink(self.json_file_path))
            if LogMode.TXT in self.modes:
                self.text_file_path = directory / f"{service}.log.txt"
                self._sinks.append(TextFileSink(self.text_file_path))

    def __repr__(self) -> str:
        modes = ",".join(sorted(m.value for m in self.modes))
        return f"Logger(service={self.service!r}, module={self.module!r}, modes={modes!r})"

    def _write(self, level: LogLevel, messages: tuple[Any, ...], caller: str | None) -> None:
        entry = build_entry(
            level,
            messages,
            service=self.service,
            module=self.module,
            caller=resolve_caller() if caller is None else caller,
        )
        for sink in self._sinks:
            sink.emit(entry)

    def log(self, level: LogLevel | str, *messages: Any, caller: str | None = None) -> None:
        """Log at an arbitrary level; raises InvalidLevelError for unknown names."""
        self._write(LogLevel.parse(level), messages, caller)

    def debug(self, *messages: Any, caller: str | None = None) -> None:
        """Log a debug-level message or object."""
        self._write(LogLevel.DEBUG, messages, caller)

    def info(self, *messages: Any, caller: str | None = None) -> None:
        """Log an info-level message or object."""
        self._write(LogLevel.INFO, messages, caller)

    def warn(self, *messages: Any, caller: str | None = None) -> None:
        """Log a warn-level message or object."""
        self._write(LogLevel.WARN, messages, caller)

    def error(self, *messages: Any, caller: str | None = None) -> None:
        """Log an error-level message or object."""
        self._write(LogLevel.ERROR, messages, caller)

    def fatal(self, *messages: Any, caller: str | None = None) -> None:
        """Log a fatal-level message or object. Does not exit the process."""
        self._write(LogLevel.FATAL, messages, caller)

    def close(self) -> None:
        for sink in self._sinks:
            sink.close()
