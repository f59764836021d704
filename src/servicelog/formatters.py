"""
Entry formatting: message flattening, entry construction and line rendering.
"""

from __future__ import annotations

from typing import Any, Iterable

import orjson

from .types import LogEntry, LogLevel, utc_timestamp

MESSAGE_SEPARATOR = ", "


def orjson_dumps(v: Any, *, indent: bool = False) -> str:
    """JSON serialization using orjson; compact unless ``indent`` is set."""
    option = orjson.OPT_INDENT_2 if indent else None
    return orjson.dumps(v, default=str, option=option).decode()


def sanitize_text(text: str) -> str:
    """Make ``text`` encodable as UTF-8.

    Lone surrogates (e.g. from ``os.fsdecode`` on undecodable bytes) are
    rendered as backslash escapes such as ``\\udce9``.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return text


def entry_dict(entry: LogEntry) -> dict[str, Any]:
    """``entry.to_dict()`` with every field UTF-8 encodable."""
    return {k: sanitize_text(v) if isinstance(v, str) else v for k, v in entry.to_dict().items()}


def render_message_part(part: Any) -> str:
    """Render one message argument: strings verbatim, anything else as compact JSON."""
    if isinstance(part, str):
        return sanitize_text(part)
    try:
        return orjson_dumps(part)
    except TypeError:
        # orjson rejects e.g. non-str dict keys, >64-bit ints or lone surrogates
        return sanitize_text(str(part))


def flatten_messages(messages: Iterable[Any]) -> str:
    """Join message arguments into a single string.

    >>> flatten_messages(["First", {"second": True}, "Third"])
    'First, {"second":true}, Third'
    """
    return MESSAGE_SEPARATOR.join(render_message_part(m) for m in messages)


def build_entry(
    level: LogLevel,
    messages: Iterable[Any],
    *,
    service: str,
    module: str,
    caller: str = "",
    timestamp: str | None = None,
) -> LogEntry:
    """Build an immutable log entry stamped with the current UTC time."""
    return LogEntry(
        timestamp=timestamp or utc_timestamp(),
        service=sanitize_text(service),
        module=sanitize_text(module),
        caller=sanitize_text(caller),
        level=level,
        message=flatten_messages(messages),
    )


# =============================================================================
# Line Renderers
# =============================================================================


def format_text_line(entry: LogEntry) -> str:
    """Render the text-file record: ``<ts> <service> <module> <caller> [<LEVEL>]: <message>``."""
    return sanitize_text(
        f"{entry.timestamp} {entry.service} {entry.module} {entry.caller} "
        f"[{entry.level.tag}]: {entry.message}\n"
    )


class ConsoleFormatter:
    """Renders an entry as ``[LEVEL] {json}`` with a per-level colored tag."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        LogLevel.DEBUG: "\x1b[32m",
        LogLevel.INFO: "\x1b[34m",
        LogLevel.WARN: "\x1b[33m",
        LogLevel.ERROR: "\x1b[31m",
        LogLevel.FATAL: "\x1b[35m",
    }

    @classmethod
    def level_tag(cls, level: LogLevel, *, use_color: bool) -> str:
        tag = f"[{level.tag}]"
        if not use_color:
            return tag
        return f"{cls._LEVEL_COLORS[level]}{tag}{cls._RESET}"

    @classmethod
    def format(cls, entry: LogEntry, *, use_color: bool = True) -> str:
        """Format an entry into a single console line (no trailing newline)."""
        return f"{cls.level_tag(entry.level, use_color=use_color)} {orjson_dumps(entry_dict(entry))}"
