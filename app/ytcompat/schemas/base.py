"""Base Marshmallow schemas and helpers for ytcompat."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, post_dump  # type: ignore[import-not-found]


def _camel_case(name: str) -> str:
    parts = name.split("_")
    return (
        parts[0] + "".join(part.capitalize() for part in parts[1:]) if parts else name
    )


class CompatSchema(Schema):
    """Default schema with common configuration (ordered output, ignore unknown)."""

    class Meta:
        ordered = True
        unknown = EXCLUDE

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        if not getattr(field_obj, "data_key", None):
            field_obj.data_key = _camel_case(field_name)


class OmitNoneSchema(CompatSchema):
    """Drops ``None`` values from dumps, like ``undefined`` vanishing from JSON."""

    @post_dump
    def _omit_none(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        return {key: value for key, value in data.items() if value is not None}


__all__ = ["CompatSchema", "OmitNoneSchema"]
