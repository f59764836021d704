"""
LoggerRegistry: process-wide cache of Logger instances

One Logger per identity, where the identity key is ``service + module``.
The key is a plain concatenation, so ``("ab", "c")`` and ``("a", "bc")``
share a Logger.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable

from .diagnostics import get_diagnostics_logger
from .logger import Logger
from .types import LogMode

ModesArg = str | Iterable[str | LogMode] | None


def identity_key(service: str, module: str) -> str:
    return service + module


class LoggerRegistry:
    """Thread-safe get-or-create cache of Logger instances."""

    def __init__(self) -> None:
        self._loggers: dict[str, Logger] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self,
        service: str,
        module: str,
        modes: ModesArg,
        *,
        logs_dir: str | Path | None = None,
    ) -> Logger:
        """
        Return the Logger for (service, module), creating it on first use.

        ``modes`` and ``logs_dir`` only apply when the Logger is created;
        they are ignored when an instance already exists.
        """
        key = identity_key(service, module)
        with self._lock:
            logger = self._loggers.get(key)
            if logger is None:
                logger = Logger(service, module, modes, logs_dir=logs_dir)
                self._loggers[key] = logger
                get_diagnostics_logger("servicelog.registry").debug(
                    "logger_created",
                    service=service,
                    module=module,
                    modes=sorted(m.value for m in logger.modes),
                )
            return logger

    def remove(self, service: str, module: str) -> None:
        """Forget the Logger for (service, module); log files are left in place."""
        with self._lock:
            logger = self._loggers.pop(identity_key(service, module), None)
        if logger is not None:
            logger.close()
            get_diagnostics_logger("servicelog.registry").debug("logger_removed", service=service, module=module)

    def clear(self) -> None:
        with self._lock:
            loggers = list(self._loggers.values())
            self._loggers.clear()
        for logger in loggers:
            logger.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __contains__(self, identity: object) -> bool:
        if not isinstance(identity, tuple) or len(identity) != 2:
            return False
        with self._lock:
            return identity_key(*identity) in self._loggers


# 模块级单例
_default_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    return _default_registry


def get_logger(
    service: str,
    module: str,
    modes: ModesArg,
    *,
    logs_dir: str | Path | None = None,
) -> Logger:
    """
    Retrieve or create the Logger for a service and module.

    Args:
        service: Name of the service requesting a logger
        module: Name of the module requesting a logger
        modes: Output modes (console, json, txt), as an iterable or a comma-separated string
        logs_dir: Directory for file-backed modes; defaults to settings, then the package's logs/

    Returns:
        An existing or newly created Logger
    """
    return _default_registry.get_or_create(service, module, modes, logs_dir=logs_dir)


def remove_logger(service: str, module: str) -> None:
    """Remove the Logger for a service and module, if any."""
    _default_registry.remove(service, module)


def reset_registry() -> None:
    """重置单例缓存 (用于测试)"""
    _default_registry.clear()


__all__ = [
    "LoggerRegistry",
    "get_logger",
    "get_registry",
    "identity_key",
    "remove_logger",
    "reset_registry",
]
