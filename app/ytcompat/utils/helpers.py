from __future__ import annotations

import re
import math
from datetime import datetime, timezone
from typing import Any, Optional, Union
from .parsers import to_float

Number = Union[int, float]
_ANSI_ESCAPE_RE = re.compile(r"\x1B[@-_][0-?]*[ -/]*[@-~]")


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def normalize_number(value: Any) -> Optional[Number]:
    """Return numeric values untouched, rejecting bools, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


def normalize_int(value: Any) -> Optional[int]:
    numeric = to_float(value)
    if numeric is None or math.isnan(numeric) or math.isinf(numeric):
        return None
    if numeric.is_integer():
        return int(numeric)
    # round towards zero
    return int(numeric // 1)


def format_number(value: Number) -> str:
    """Render ``value`` the way a JSON number prints (``125.0`` -> ``"125"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_upload_date(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if len(text) == 8 and text.isdigit():
        return f"{text[:4]}-{text[4:6]}-{text[6:]}"
    try:
        parsed = datetime.fromisoformat(text)
        return parsed.date().isoformat()
    except ValueError:
        return text


def strip_ansi(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    cleaned = _ANSI_ESCAPE_RE.sub("", text)
    trimmed = cleaned.strip()
    return trimmed or None


__all__ = [
    "Number",
    "now_iso",
    "normalize_number",
    "normalize_int",
    "format_number",
    "normalize_upload_date",
    "strip_ansi",
]
