"""
Best-effort identification of the code that invoked a log method.
"""

from __future__ import annotations

import inspect
from types import FrameType

# Frames from these modules are never reported as the caller.
INTERNAL_PREFIXES = ("servicelog.",)
INTERNAL_MODULES = ("servicelog",)

MAX_DEPTH = 50


def _is_internal(module: str) -> bool:
    return module in INTERNAL_MODULES or module.startswith(INTERNAL_PREFIXES)


def _simplify_module_name(name: str) -> str:
    if name == "__main__":
        return "main"
    return name


def describe_frame(frame: FrameType) -> str:
    """Describe a frame as ``<module>.<function>:<lineno>``."""
    module = _simplify_module_name(frame.f_globals.get("__name__", "") or "?")
    return f"{module}.{frame.f_code.co_name}:{frame.f_lineno}"


def resolve_caller(frame: FrameType | None = None) -> str:
    """Return a description of the first frame outside servicelog.

    Returns an empty string if the interpreter exposes no frames or the
    stack is exhausted before a foreign frame is found.
    """
    frame = frame or inspect.currentframe()
    try:
        for _ in range(MAX_DEPTH):
            if frame is None:
                break
            module = frame.f_globals.get("__name__", "")
            if not _is_internal(module):
                return describe_frame(frame)
            frame = frame.f_back
        return ""
    finally:
        del frame
