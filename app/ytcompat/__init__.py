"""ytdl-core compatible metadata on top of yt-dlp."""

from .core import VideoFormat, VideoInfo, VideoInfoService, default_service, get_info
from .exceptions import ExtractionFailed
from .schemas import dump_video_info

__all__ = [
    "ExtractionFailed",
    "VideoFormat",
    "VideoInfo",
    "VideoInfoService",
    "default_service",
    "dump_video_info",
    "get_info",
]
