"""Shared helpers for defensive value handling."""

from .helpers import (
    Number,
    format_number,
    normalize_int,
    normalize_number,
    normalize_upload_date,
    now_iso,
    strip_ansi,
)
from .parsers import to_float

__all__ = [
    "Number",
    "format_number",
    "normalize_int",
    "normalize_number",
    "normalize_upload_date",
    "now_iso",
    "strip_ansi",
    "to_float",
]
