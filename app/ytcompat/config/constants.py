from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from .environment import get_service_environment

# ---------------------------------------------------------------------------
# Application bootstrap defaults
# ---------------------------------------------------------------------------
_SERVICE_ENV = get_service_environment()

DEFAULT_HOST: Final[str] = _SERVICE_ENV.host
DEFAULT_PORT: Final[int] = _SERVICE_ENV.port
DEFAULT_LOG_LEVEL: Final[str] = _SERVICE_ENV.log_level

# ---------------------------------------------------------------------------
# API routing conventions
# ---------------------------------------------------------------------------
API_PREFIX: Final[str] = _SERVICE_ENV.api_root.rstrip("/")
HEALTH_CHECK_PATH: Final[str] = "/"


class ApiRoute(str, Enum):
    INFO = f"{API_PREFIX}/info"


# ---------------------------------------------------------------------------
# Format normalization
# ---------------------------------------------------------------------------
CODEC_NONE: Final[str] = "none"
UNKNOWN: Final[str] = "unknown"
LENGTH_UNKNOWN: Final[str] = "0"

# Lower-cased extension -> container. Opus audio ships inside WebM.
CONTAINER_BY_EXTENSION: Final[Mapping[str, str]] = MappingProxyType(
    {
        "webm": "webm",
        "mp4": "mp4",
        "m4a": "m4a",
        "ogg": "ogg",
        "opus": "webm",
    }
)


class LiveStatus(str, Enum):
    IS_LIVE = "is_live"
    WAS_LIVE = "was_live"
    NOT_LIVE = "not_live"
    IS_UPCOMING = "is_upcoming"
    POST_LIVE = "post_live"
