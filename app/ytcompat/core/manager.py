from __future__ import annotations

import asyncio
from functools import lru_cache, partial
from typing import Any, Mapping, Optional

from ..config import ServiceEnvironmentConfig, get_service_environment
from ..exceptions import ExtractionFailed
from ..log_config import debug_verbose, verbose_log
from .contract import LiveDetector, VideoInfo, infer_is_live
from .downloader import Invoker, fetch_video_record


class VideoInfoService:
    """Fetch yt-dlp metadata and expose it in the ytdl-core ``getInfo`` shape.

    The service keeps no per-call state, so one instance can be shared by
    any number of concurrent callers.
    """

    def __init__(
        self,
        *,
        invoker: Optional[Invoker] = None,
        live_detector: Optional[LiveDetector] = None,
        environment: Optional[ServiceEnvironmentConfig] = None,
    ) -> None:
        env = environment or get_service_environment()
        if invoker is None:
            invoker = partial(fetch_video_record, options=env.ytdlp_options())
        if live_detector is None:
            live_detector = partial(
                infer_is_live, duration_fallback=env.live_duration_fallback
            )
        self._invoker = invoker
        self._live_detector = live_detector

    def normalize(self, record: Mapping[str, Any]) -> VideoInfo:
        """Normalize an already fetched raw record."""

        return VideoInfo.from_record(
            record,  # type: ignore[arg-type]
            live_detector=self._live_detector,
        )

    async def get_info(self, url: str) -> VideoInfo:
        """Return normalized metadata for ``url``.

        Raises:
            ExtractionFailed: whenever the extraction step fails.
        """

        loop = asyncio.get_running_loop()
        try:
            record = await loop.run_in_executor(None, self._invoker, url)
        except Exception as exc:  # noqa: BLE001 - surface a single error kind
            verbose_log("get_info_error", {"url": url, "error": repr(exc)})
            raise ExtractionFailed(f"Failed to get video info: {exc}") from exc

        info = self.normalize(record)
        debug_verbose(
            "get_info",
            {
                "url": url,
                "formats": len(info.formats),
                "is_live": info.video_details.is_live_content,
            },
        )
        return info


@lru_cache(maxsize=1)
def default_service() -> VideoInfoService:
    """Return the process-wide service built from the environment."""

    return VideoInfoService()


async def get_info(url: str) -> VideoInfo:
    """Shortcut for :meth:`VideoInfoService.get_info` on :func:`default_service`."""

    return await default_service().get_info(url)


__all__ = ["VideoInfoService", "default_service", "get_info"]
