"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import orjson

from .config import ConsoleFormat, ConsoleStream, settings
from .diagnostics import get_diagnostics_logger
from .formatters import ConsoleFormatter, entry_dict, format_text_line, orjson_dumps
from .types import LogEntry

# =============================================================================
# Per-file Write Locks
# =============================================================================

# One lock per distinct resolved path, kept for the life of the process.
# Locks are never released, even after remove_logger, so a logger rebuilt
# for the same path keeps serializing against in-flight writers.
_file_locks: dict[Path, threading.Lock] = {}
_file_locks_guard = threading.Lock()


def file_lock(path: str | Path) -> threading.Lock:
    """Return the process-wide lock serializing writes to ``path``."""
    key = Path(path).resolve()
    with _file_locks_guard:
        lock = _file_locks.get(key)
        if lock is None:
            lock = _file_locks[key] = threading.Lock()
        return lock


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, entry: LogEntry) -> None:
        """Emit a log entry to the sink."""
        ...

    def close(self) -> None:
        """Release resources held by the sink.

        The built-in sinks open files per write and hold nothing between
        calls; this is the hook for sinks that keep handles open.
        """


class ConsoleSink(BaseSink):
    """Console sink with configurable format.

    Args:
        fmt: "console" (level tag + entry) or "json" (entry only)
        stream: Output stream (default: stdout/stderr per settings, looked up on each emit)
        use_color: Force ANSI colors on/off; auto-detects a TTY when None
    """

    def __init__(
        self,
        fmt: ConsoleFormat | str | None = None,
        stream: Any = None,
        use_color: bool | None = None,
    ):
        self._fmt = ConsoleFormat(fmt) if fmt else settings.logging.console_format
        self._stream = stream
        self._use_color = use_color if use_color is not None else settings.logging.console_color

    @property
    def stream(self) -> Any:
        if self._stream is not None:
            return self._stream
        if settings.logging.console_stream == ConsoleStream.STDERR:
            return sys.stderr
        return sys.stdout

    def _should_color(self, stream: Any) -> bool:
        if self._use_color is not None:
            return self._use_color
        return bool(getattr(stream, "isatty", lambda: False)())

    def emit(self, entry: LogEntry) -> None:
        stream = self.stream
        if stream is None:
            return
        try:
            if self._fmt == ConsoleFormat.JSON:
                output = orjson_dumps(entry_dict(entry))
            else:
                output = ConsoleFormatter.format(entry, use_color=self._should_color(stream))
            stream.write(output + "\n")
            stream.flush()
        except (OSError, ValueError):
            # Console output is best-effort (closed or detached stream)
            pass


class JsonFileSink(BaseSink):
    """Keeps a pretty-printed JSON array of entries in a single file.

    Every emit reads the whole file, appends the entry and rewrites it.
    Unparseable content is discarded and the array restarts from the new entry.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_entries(self) -> list[Any]:
        if not self._path.exists():
            return []
        raw = self._path.read_bytes()
        try:
            entries = orjson.loads(raw)
        except orjson.JSONDecodeError:
            entries = None
        if not isinstance(entries, list):
            get_diagnostics_logger("servicelog.sinks").warning(
                "json_log_reset",
                path=str(self._path),
                size=len(raw),
            )
            return []
        return entries

    def emit(self, entry: LogEntry) -> None:
        with file_lock(self._path):
            entries = self._read_entries()
            entries.append(entry_dict(entry))
            self._path.write_bytes(orjson.dumps(entries, option=orjson.OPT_INDENT_2))


class TextFileSink(BaseSink):
    """Appends one line per entry to a plain-text file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, entry: LogEntry) -> None:
        with file_lock(self._path):
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(format_text_line(entry))
