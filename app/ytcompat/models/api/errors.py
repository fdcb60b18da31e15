from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Canonical error identifiers returned by the HTTP API."""

    URL_REQUIRED = "url_required"
    EXTRACTION_FAILED = "extraction_failed"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


__all__ = ["ErrorCode"]
