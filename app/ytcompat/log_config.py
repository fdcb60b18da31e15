"""Logging helpers for the ytcompat service."""

from __future__ import annotations

import os
import sys
from typing import Any, Optional
from .utils import now_iso


def _read_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def _log_file() -> Optional[str]:
    raw = os.getenv("YTCOMPAT_LOG_FILE")
    if raw is None:
        return None
    return raw.strip() or None


def _default_verbose() -> bool:
    # stderr is left alone unless a log file is configured
    return _log_file() is not None


DEBUG = _read_flag("YTCOMPAT_DEBUG", False)
VERBOSE = _read_flag("YTCOMPAT_VERBOSE", _default_verbose())


def _emit(prefix: str, label: str, payload: Any) -> None:
    timestamp = now_iso()
    message = f"[{prefix}][{timestamp}] {label}: {payload}"
    _append_log(message)


def _append_log(message: str) -> None:
    encoding = getattr(sys.stderr, "encoding", None) or "utf-8"
    safe_message = message.encode(encoding, errors="replace").decode(encoding)
    path = _log_file()
    if path is None:
        sys.stderr.write(f"{safe_message}\n")
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "a", encoding=encoding) as log_file:
        log_file.write(f"{safe_message}\n")


def verbose_log(label: str, payload: Any) -> None:
    """Emit structured logs when verbose mode is enabled."""
    if not VERBOSE:
        return
    _emit("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    """Emit debug logs when debug mode is active, or always in verbose mode."""
    if not (DEBUG or VERBOSE):
        return
    _emit("DEBUG", label, payload)


__all__ = ["DEBUG", "VERBOSE", "verbose_log", "debug_verbose"]
