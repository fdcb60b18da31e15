"""Query parameter helpers validated via Marshmallow schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marshmallow import ValidationError, fields, post_load, validates

from ...schemas.base import CompatSchema


@dataclass(slots=True)
class InfoQueryParams:
    url: str


class InfoQuerySchema(CompatSchema):
    url = fields.String(
        required=True,
        error_messages={"required": "url_required", "invalid": "url_required"},
    )

    @validates("url")
    def _validate_url(self, value: str, **_: Any) -> None:
        if not value.strip():
            raise ValidationError("url_required")

    @post_load
    def _build_params(self, data: dict[str, Any], **_: Any) -> InfoQueryParams:
        return InfoQueryParams(url=data["url"].strip())


__all__ = ["InfoQueryParams", "InfoQuerySchema"]
