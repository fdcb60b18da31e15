from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

_DEFAULTS: Dict[str, str] = {
    "YTCOMPAT_SERVER_NAME": "ytcompat",
    "YTCOMPAT_SERVER_HOST": "127.0.0.1",
    "YTCOMPAT_SERVER_PORT": "5050",
    "YTCOMPAT_SERVER_API_ROOT": "/api",
    "YTCOMPAT_LOG_LEVEL": "info",
    "YTCOMPAT_SOCKET_TIMEOUT": "30",
    "YTCOMPAT_LIVE_DURATION_FALLBACK": "1",
}

_TRUE_TOKENS = {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class ServiceEnvironmentConfig:
    name: str
    host: str
    port: int
    api_root: str
    log_level: str
    socket_timeout: int
    proxy: Optional[str]
    cookie_file: Optional[str]
    live_duration_fallback: bool

    def ytdlp_options(self) -> Dict[str, object]:
        """Return the yt-dlp options derived from this configuration."""
        options: Dict[str, object] = {"socket_timeout": self.socket_timeout}
        if self.proxy:
            options["proxy"] = self.proxy
        if self.cookie_file:
            options["cookiefile"] = self.cookie_file
        return options


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed:
        if default is not None:
            return default
        raise RuntimeError(f"Environment variable '{key}' cannot be empty")
    return trimmed


def _optional_env(key: str) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def _parse_int(key: str) -> int:
    raw = _coalesce_env(key)
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable '{key}' must be an integer") from exc


def _parse_flag(key: str) -> bool:
    return _coalesce_env(key).lower() in _TRUE_TOKENS


def _sanitize_path(raw: str) -> str:
    trimmed = raw.strip().rstrip("/") or "/"
    return trimmed if trimmed.startswith("/") else f"/{trimmed}"


@lru_cache(maxsize=1)
def get_service_environment() -> ServiceEnvironmentConfig:
    return ServiceEnvironmentConfig(
        name=_coalesce_env("YTCOMPAT_SERVER_NAME"),
        host=_coalesce_env("YTCOMPAT_SERVER_HOST"),
        port=_parse_int("YTCOMPAT_SERVER_PORT"),
        api_root=_sanitize_path(_coalesce_env("YTCOMPAT_SERVER_API_ROOT")),
        log_level=_coalesce_env("YTCOMPAT_LOG_LEVEL").lower(),
        socket_timeout=_parse_int("YTCOMPAT_SOCKET_TIMEOUT"),
        proxy=_optional_env("YTCOMPAT_PROXY"),
        cookie_file=_optional_env("YTCOMPAT_COOKIE_FILE"),
        live_duration_fallback=_parse_flag("YTCOMPAT_LIVE_DURATION_FALLBACK"),
    )


__all__ = ["ServiceEnvironmentConfig", "get_service_environment"]
