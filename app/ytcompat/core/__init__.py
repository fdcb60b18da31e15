"""Extraction and normalization core."""

from .contract import VideoFormat, VideoInfo, infer_is_live
from .downloader import DownloadError, fetch_video_record
from .manager import VideoInfoService, default_service, get_info

__all__ = [
    "DownloadError",
    "VideoFormat",
    "VideoInfo",
    "VideoInfoService",
    "default_service",
    "fetch_video_record",
    "get_info",
    "infer_is_live",
]
