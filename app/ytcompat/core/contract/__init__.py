"""Normalized contracts built from raw yt-dlp payloads."""

from .info import (
    LiveDetector,
    PlayerResponse,
    PlayerVideoDetails,
    VideoDetails,
    VideoFormat,
    VideoInfo,
    codecs_from_format,
    container_from_ext,
    extract_itag,
    format_length_seconds,
    infer_is_live,
)

__all__ = [
    "LiveDetector",
    "PlayerResponse",
    "PlayerVideoDetails",
    "VideoDetails",
    "VideoFormat",
    "VideoInfo",
    "codecs_from_format",
    "container_from_ext",
    "extract_itag",
    "format_length_seconds",
    "infer_is_live",
]
