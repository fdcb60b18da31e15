from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from ...config import (
    CODEC_NONE,
    CONTAINER_BY_EXTENSION,
    LENGTH_UNKNOWN,
    UNKNOWN,
    LiveStatus,
)
from ...utils import (
    Number,
    format_number,
    normalize_int,
    normalize_number,
    normalize_upload_date,
    to_float,
)

if TYPE_CHECKING:
    from ...core.downloader import YtDlpFormat, YtDlpInfoResult


LiveDetector = Callable[[Mapping[str, Any]], bool]

_ITAG_PATTERN = re.compile(r"[0-9]+")


def _read_str(data: Mapping[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else default


def _read_number(data: Mapping[str, Any], key: str) -> Optional[Number]:
    return normalize_number(data.get(key))


def _read_raw(data: Mapping[str, Any], key: str) -> Optional[Any]:
    return data.get(key)


def _sample_rate_string(asr: Any) -> Optional[str]:
    if not asr:
        return None
    numeric = normalize_number(asr)
    return format_number(numeric) if numeric is not None else str(asr)


def _read_identifier(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return None


def _read_duration(data: Mapping[str, Any]) -> Optional[Number]:
    raw = data.get("duration")
    value = normalize_number(raw)
    if value is None and isinstance(raw, str):
        value = normalize_number(to_float(raw))
    return value


def extract_itag(format_id: Any) -> Optional[int]:
    """Return the numeric itag hidden in ``format_id`` when it is all digits."""

    if isinstance(format_id, int) and not isinstance(format_id, bool):
        return format_id if format_id >= 0 else None
    if not isinstance(format_id, str):
        return None
    if _ITAG_PATTERN.fullmatch(format_id) is None:
        return None
    return int(format_id, 10)


def container_from_ext(ext: Any) -> str:
    """Map a file extension to its container; unknown values keep their case."""

    if not isinstance(ext, str) or not ext:
        return UNKNOWN
    return CONTAINER_BY_EXTENSION.get(ext.lower(), ext)


def _present_codec(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value or value == CODEC_NONE:
        return None
    return value


def codecs_from_format(data: Mapping[str, Any]) -> str:
    """Compose ``audio+video`` for muxed streams, a single codec otherwise."""

    acodec = _present_codec(data.get("acodec"))
    vcodec = _present_codec(data.get("vcodec"))
    if acodec and vcodec:
        return f"{acodec}+{vcodec}"
    if acodec:
        return acodec
    if vcodec:
        return vcodec
    return UNKNOWN


def infer_is_live(data: Mapping[str, Any], *, duration_fallback: bool = True) -> bool:
    """Decide whether the raw record describes an ongoing broadcast.

    An explicit ``is_live`` flag or ``live_status == "is_live"`` wins. With
    ``duration_fallback`` enabled, a record without any duration is also
    treated as live unless ``is_live`` is explicitly false. That fallback
    misclassifies on-demand videos whose duration is simply unreported.
    """

    raw_flag = data.get("is_live")
    flag = raw_flag if isinstance(raw_flag, bool) else None
    if flag is True:
        return True
    if _read_str(data, "live_status") == LiveStatus.IS_LIVE.value:
        return True
    if not duration_fallback:
        return False
    return _read_duration(data) is None and flag is not False


def format_length_seconds(data: Mapping[str, Any]) -> str:
    """Render the duration as seconds, ``"0"`` meaning the length is unknown."""

    duration = _read_duration(data)
    if duration is None:
        return LENGTH_UNKNOWN
    return format_number(duration)


def _quality_label(height: Optional[int], fps: Optional[Number]) -> Optional[str]:
    if not height:
        return None
    label = f"{height}p"
    if fps is not None and fps > 30:
        label += str(round(fps))
    return label


@dataclass(frozen=True)
class VideoFormat:
    """Normalized view over a single yt-dlp format entry.

    Attributes:
        url: Direct media URL, passed through verbatim.
        format_id: yt-dlp format identifier, passed through verbatim.
        itag: Numeric identifier derived from an all-digit ``format_id``.
        ext: File extension hint reported by yt-dlp.
        acodec: Audio codec or ``"none"``.
        vcodec: Video codec or ``"none"``.
        container: Container derived from ``ext``.
        codecs: ``audio+video`` for muxed streams, one codec otherwise.
        audio_sample_rate: ``asr`` rendered as a string.
        average_bitrate: Copy of ``abr``.
        bitrate: Copy of ``tbr``.
        is_live: Live decision shared by every format of the video.
        loudness_db: Copy of ``loudness``.
    """

    url: Optional[str]
    format_id: Optional[str]
    itag: Optional[int]
    ext: Optional[str]
    acodec: str
    vcodec: str
    container: str
    codecs: str
    abr: Optional[Any]
    asr: Optional[Any]
    filesize: Optional[Any]
    format_note: Optional[Any]
    audio_sample_rate: Optional[str]
    average_bitrate: Optional[Any]
    bitrate: Optional[Any]
    is_live: bool
    loudness_db: Optional[Any]
    width: Optional[int]
    height: Optional[int]
    fps: Optional[Number]
    video_bitrate: Optional[Number]
    quality: Optional[Number]
    quality_label: Optional[str]
    has_audio: bool
    has_video: bool

    @classmethod
    def from_format(cls, data: "YtDlpFormat", *, is_live: bool) -> "VideoFormat":
        raw: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
        format_id = raw.get("format_id")
        acodec = raw.get("acodec")
        vcodec = raw.get("vcodec")
        asr = _read_raw(raw, "asr")
        abr = _read_raw(raw, "abr")
        height = normalize_int(_read_number(raw, "height"))
        fps = _read_number(raw, "fps")
        has_video = _present_codec(vcodec) is not None
        filesize = _read_raw(raw, "filesize")

        return cls(
            url=_read_str(raw, "url"),
            format_id=_read_identifier(format_id),
            itag=extract_itag(format_id),
            ext=_read_str(raw, "ext"),
            acodec=acodec if isinstance(acodec, str) else CODEC_NONE,
            vcodec=vcodec if isinstance(vcodec, str) else CODEC_NONE,
            container=container_from_ext(raw.get("ext")),
            codecs=codecs_from_format(raw),
            abr=abr,
            asr=asr,
            filesize=filesize,
            format_note=_read_raw(raw, "format_note"),
            audio_sample_rate=_sample_rate_string(asr),
            average_bitrate=abr,
            bitrate=_read_raw(raw, "tbr"),
            is_live=is_live,
            loudness_db=_read_raw(raw, "loudness"),
            width=normalize_int(_read_number(raw, "width")),
            height=height,
            fps=fps,
            video_bitrate=_read_number(raw, "vbr"),
            quality=_read_number(raw, "quality"),
            quality_label=_quality_label(height, fps) if has_video else None,
            has_audio=_present_codec(acodec) is not None,
            has_video=has_video,
        )


@dataclass(frozen=True)
class VideoDetails:
    title: Optional[str]
    length_seconds: str
    is_live_content: bool
    video_id: Optional[str] = None
    video_url: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    upload_date: Optional[str] = None
    view_count: Optional[str] = None
    thumbnail: Optional[str] = None


@dataclass(frozen=True)
class PlayerVideoDetails:
    is_live_content: bool


@dataclass(frozen=True)
class PlayerResponse:
    video_details: PlayerVideoDetails


def _extract_formats(data: Mapping[str, Any]) -> Tuple[Mapping[str, Any], ...]:
    raw = data.get("formats")
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        return ()
    return tuple(entry for entry in raw if isinstance(entry, Mapping))


def _view_count(data: Mapping[str, Any]) -> Optional[str]:
    count = normalize_number(data.get("view_count"))
    return format_number(count) if count is not None else None


@dataclass(frozen=True)
class VideoInfo:
    """Normalized, ytdl-core shaped view over a yt-dlp metadata record.

    ``player_response`` mirrors the live decision for callers written
    against the older interface and is derived, never stored.
    """

    video_details: VideoDetails
    formats: Tuple[VideoFormat, ...]

    @property
    def player_response(self) -> PlayerResponse:
        return PlayerResponse(
            video_details=PlayerVideoDetails(
                is_live_content=self.video_details.is_live_content
            )
        )

    @classmethod
    def from_record(
        cls,
        data: "YtDlpInfoResult",
        *,
        live_detector: LiveDetector = infer_is_live,
    ) -> "VideoInfo":
        """Normalize ``data``; the live decision is taken once and shared."""

        raw: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
        is_live = bool(live_detector(raw))
        formats = tuple(
            VideoFormat.from_format(entry, is_live=is_live)  # type: ignore[arg-type]
            for entry in _extract_formats(raw)
        )
        details = VideoDetails(
            title=_read_str(raw, "title"),
            length_seconds=format_length_seconds(raw),
            is_live_content=is_live,
            video_id=_read_str(raw, "id"),
            video_url=_read_str(raw, "webpage_url") or _read_str(raw, "original_url"),
            author=_read_str(raw, "uploader") or _read_str(raw, "channel"),
            description=_read_str(raw, "description"),
            upload_date=normalize_upload_date(_read_str(raw, "upload_date")),
            view_count=_view_count(raw),
            thumbnail=_read_str(raw, "thumbnail"),
        )
        return cls(video_details=details, formats=formats)


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
