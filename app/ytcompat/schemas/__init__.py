"""Marshmallow schemas for ytcompat payloads."""

from .base import CompatSchema, OmitNoneSchema
from .info import VideoInfoSchema, dump_video_info

__all__ = ["CompatSchema", "OmitNoneSchema", "VideoInfoSchema", "dump_video_info"]
