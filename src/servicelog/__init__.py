"""
servicelog: structured, leveled logging per service and module.

Output modes:
- console: one colored line per entry on stdout
- json: a pretty-printed JSON array of entries in <logs_dir>/<service>.log.json
- txt: one line per entry appended to <logs_dir>/<service>.log.txt

Usage:
    from servicelog import get_logger

    log = get_logger("billing", "invoices", ["console", "json"])
    log.info("Invoice created", {"id": 42})

Library: orjson for JSON, structlog for servicelog's own diagnostics.
"""

from .exceptions import InvalidLevelError, ServiceLogError
from .logger import Logger
from .registry import LoggerRegistry, get_logger, remove_logger, reset_registry
from .types import LogEntry, LogLevel, LogMode

__all__ = [
    "InvalidLevelError",
    "LogEntry",
    "LogLevel",
    "LogMode",
    "Logger",
    "LoggerRegistry",
    "ServiceLogError",
    "get_logger",
    "remove_logger",
    "reset_registry",
]
