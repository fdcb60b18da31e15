"""Integration layer around :mod:`yt_dlp` metadata extraction.

Every direct call to :mod:`yt_dlp` lives here so the normalizer can depend
on a plain dictionary contract.  The functions return the sanitized info
dict yt-dlp produces for ``--dump-json`` and raise :class:`DownloadError`
for anything that goes wrong inside yt-dlp.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Mapping,
    Optional,
    Protocol,
    TypedDict,
    TypeVar,
    cast,
)

from yt_dlp import YoutubeDL

from ..utils import strip_ansi


TReturn = TypeVar("TReturn")


class YtDlpFormat(TypedDict, total=False):
    """One entry of the ``formats`` list reported by yt-dlp."""

    url: str
    format_id: str
    ext: str
    acodec: Optional[str]
    vcodec: Optional[str]
    abr: Optional[float]  # average audio bitrate, kbps
    asr: Optional[int]  # audio sampling rate, Hz
    tbr: Optional[float]  # total bitrate, kbps
    vbr: Optional[float]
    filesize: Optional[int]
    filesize_approx: Optional[int]
    format_note: Optional[str]
    loudness: Optional[float]  # dB
    quality: Optional[float]
    width: Optional[int]
    height: Optional[int]
    fps: Optional[float]


class YtDlpInfoResult(TypedDict, total=False):
    """Type alias for yt-dlp info dicts."""

    id: Optional[str]
    title: Optional[str]
    description: Optional[str]
    thumbnail: Optional[str]
    _type: Optional[str]
    url: Optional[str]
    webpage_url: Optional[str]
    duration: Optional[float]
    is_live: Optional[bool]
    live_status: Optional[str]
    formats: Optional[list[YtDlpFormat]]
    uploader: Optional[str]
    channel: Optional[str]
    upload_date: Optional[str]
    view_count: Optional[int]
    extractor: Optional[str]
    extractor_key: Optional[str]


Invoker = Callable[[str], Mapping[str, Any]]


class LoggerLike(Protocol):
    def debug(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


class _BufferedLogger(LoggerLike):
    """Minimal logger that stores yt-dlp warnings/errors for later inspection."""

    def __init__(self) -> None:
        self._warnings: list[str] = []
        self._errors: list[str] = []

    @staticmethod
    def _normalize(message: object) -> Optional[str]:
        text = str(message)
        cleaned = strip_ansi(text)
        if cleaned is not None:
            text = cleaned
        normalized = " ".join(part for part in text.split() if part)
        return normalized or None

    def debug(self, msg: str) -> None:  # noqa: D401 - interface contract
        return None

    def warning(self, msg: str) -> None:
        normalized = self._normalize(msg)
        if normalized:
            self._warnings.append(normalized)

    def error(self, msg: str) -> None:
        normalized = self._normalize(msg)
        if normalized:
            self._errors.append(normalized)

    def last_message(self) -> Optional[str]:
        for bucket in (self._errors, self._warnings):
            for message in reversed(bucket):
                if message:
                    return message
        return None


class DownloadError(RuntimeError):
    """Raised when yt_dlp raises an unexpected exception."""


_BASE_OPTIONS: Mapping[str, Any] = {
    "quiet": True,
    "no_warnings": False,
    "noprogress": True,
    "skip_download": True,
    "simulate": True,
    "noplaylist": True,
}


def build_ytdlp_options(overrides: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Merge caller supplied yt-dlp options over the metadata-only defaults."""

    options = dict(_BASE_OPTIONS)
    if overrides:
        options.update(overrides)
    return options


def fetch_video_record(
    url: str,
    *,
    options: Optional[Mapping[str, Any]] = None,
) -> YtDlpInfoResult:
    """Retrieve the raw yt-dlp metadata record for ``url``.

    Mirrors ``yt-dlp --dump-json``: formats are fully processed and the
    result is sanitized into JSON compatible values.
    """
    target = url.strip() if isinstance(url, str) else ""
    if not target:
        raise DownloadError("A non-empty URL is required")

    ydl_opts = build_ytdlp_options(options)
    capture_logger: Optional[_BufferedLogger] = None
    if "logger" not in ydl_opts:
        capture_logger = _BufferedLogger()
        ydl_opts["logger"] = capture_logger

    def _resolve_extract_failure_message() -> str:
        if capture_logger:
            buffered = capture_logger.last_message()
            if buffered:
                return buffered
        return "yt-dlp returned no information for the requested URL"

    def _runner(ydl: YoutubeDL) -> YtDlpInfoResult:
        info_payload = ydl.extract_info(target, download=False)
        if info_payload is None:
            raise DownloadError(_resolve_extract_failure_message())
        sanitized = ydl.sanitize_info(info_payload)
        if not isinstance(sanitized, Mapping):
            raise DownloadError("yt-dlp returned an unexpected result")
        return cast(YtDlpInfoResult, dict(sanitized))

    return _run_with_ytdlp(ydl_opts, _runner)


def _run_with_ytdlp(
    options: Mapping[str, Any],
    runner: Callable[[YoutubeDL], TReturn],
) -> TReturn:
    try:
        with YoutubeDL(cast(Any, dict(options))) as ydl:
            return runner(ydl)
    except DownloadError:
        raise
    except Exception as exc:  # noqa: BLE001 - wrap third-party exceptions
        raise DownloadError(str(exc)) from exc


__all__ = [
    "DownloadError",
    "Invoker",
    "LoggerLike",
    "YtDlpFormat",
    "YtDlpInfoResult",
    "build_ytdlp_options",
    "fetch_video_record",
]
