"""
Internal diagnostics for servicelog itself.

These messages describe what the library is doing (loggers created and
removed, corrupt JSON log files reset) and never reach the user's log files.
The logger is assembled with ``structlog.wrap_logger`` so the host
application's global structlog configuration is left untouched.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import orjson
import structlog
from structlog.typing import EventDict, WrappedLogger

from .config import settings

# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.get("_name", "servicelog")
    event_dict.pop("_name", None)
    return event_dict


def orjson_serializer(v: Any, **kwargs: Any) -> str:
    """JSONRenderer serializer backed by orjson."""
    return orjson.dumps(v, default=str).decode()


# =============================================================================
# Factory
# =============================================================================


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = level or settings.logging.diagnostics_level.value
    return getattr(logging, str(name).upper(), logging.WARNING)


def get_diagnostics_logger(
    name: str = "servicelog",
    *,
    level: str | int | None = None,
    stream: Any = None,
) -> structlog.typing.FilteringBoundLogger:
    """Get the structlog logger servicelog uses to report on itself.

    Args:
        name: Logger name rendered into each event
        level: Minimum level (defaults to ``settings.logging.diagnostics_level``)
        stream: Output stream (default: the current ``sys.stderr``)
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(file=stream or sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            add_timestamp,
            add_logger_name,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=orjson_serializer),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        cache_logger_on_first_use=False,
    ).bind(_name=name)
