"""Serialization of :class:`~ytcompat.core.contract.VideoInfo` into the ytdl-core layout."""

from __future__ import annotations

from typing import Any

from marshmallow import fields  # type: ignore[import-not-found]

from .base import OmitNoneSchema


class VideoFormatSchema(OmitNoneSchema):
    url = fields.String()
    itag = fields.Integer(allow_none=True)
    format_id = fields.String(data_key="format_id")
    ext = fields.String()
    acodec = fields.String()
    vcodec = fields.String()
    abr = fields.Raw()
    asr = fields.Raw()
    filesize = fields.Raw()
    format_note = fields.Raw(data_key="format_note")
    container = fields.String()
    codecs = fields.String()
    audio_sample_rate = fields.String()
    average_bitrate = fields.Raw()
    bitrate = fields.Raw()
    is_live = fields.Boolean()
    loudness_db = fields.Raw()
    width = fields.Integer(allow_none=True)
    height = fields.Integer(allow_none=True)
    fps = fields.Raw()
    video_bitrate = fields.Raw()
    quality = fields.Raw()
    quality_label = fields.String()
    has_audio = fields.Boolean()
    has_video = fields.Boolean()


class VideoDetailsSchema(OmitNoneSchema):
    title = fields.String()
    length_seconds = fields.String()
    is_live_content = fields.Boolean()
    video_id = fields.String()
    video_url = fields.String()
    author = fields.String()
    description = fields.String()
    upload_date = fields.String()
    view_count = fields.String()
    thumbnail = fields.String()


class PlayerVideoDetailsSchema(OmitNoneSchema):
    is_live_content = fields.Boolean()


class PlayerResponseSchema(OmitNoneSchema):
    video_details = fields.Nested(PlayerVideoDetailsSchema)


class VideoInfoSchema(OmitNoneSchema):
    video_details = fields.Nested(VideoDetailsSchema)
    formats = fields.List(fields.Nested(VideoFormatSchema))
    player_response = fields.Nested(PlayerResponseSchema, data_key="player_response")


def dump_video_info(info: Any) -> dict[str, Any]:
    """Serialize a ``VideoInfo`` to the JSON layout ytdl-core callers expect."""

    return VideoInfoSchema().dump(info)


__all__ = [
    "PlayerResponseSchema",
    "VideoDetailsSchema",
    "VideoFormatSchema",
    "VideoInfoSchema",
    "dump_video_info",
]
