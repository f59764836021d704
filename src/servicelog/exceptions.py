"""
Exception hierarchy for servicelog.

Filesystem failures are not wrapped: ``OSError`` from directory creation,
file writes and appends propagates to the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceLogError(Exception):
    """Base class for all servicelog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidLevelError(ServiceLogError, ValueError):
    """Raised when a level name is not one of debug, info, warn, error, fatal."""

    def __init__(self, level: Any) -> None:
        super().__init__(
            f"Unsupported log level: {level!r}. Supported: ['debug', 'info', 'warn', 'error', 'fatal']",
            code="INVALID_LEVEL",
            details={"level": level},
        )


__all__ = [
    "ServiceLogError",
    "InvalidLevelError",
]
