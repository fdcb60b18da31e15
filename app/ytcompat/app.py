"""ASGI application for ``uvicorn ytcompat.app:app``."""

from __future__ import annotations

from starlette.applications import Starlette

from .server import create_app

app: Starlette
app, _service = create_app()

__all__ = ["app"]
