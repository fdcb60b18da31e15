"""Configuration constants for ytcompat."""

from .constants import (
    API_PREFIX,
    CODEC_NONE,
    CONTAINER_BY_EXTENSION,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    HEALTH_CHECK_PATH,
    LENGTH_UNKNOWN,
    UNKNOWN,
    ApiRoute,
    LiveStatus,
)
from .environment import ServiceEnvironmentConfig, get_service_environment

__all__ = [
    "API_PREFIX",
    "CODEC_NONE",
    "CONTAINER_BY_EXTENSION",
    "DEFAULT_HOST",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "HEALTH_CHECK_PATH",
    "LENGTH_UNKNOWN",
    "UNKNOWN",
    "ApiRoute",
    "LiveStatus",
    "ServiceEnvironmentConfig",
    "get_service_environment",
]
