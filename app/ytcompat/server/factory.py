from __future__ import annotations

import os
from typing import Optional, Tuple

import certifi
from starlette.applications import Starlette

from ..api.http import register_http_routes
from ..core import VideoInfoService, default_service


def _configure_certificates() -> None:
    cert_path = certifi.where()
    os.environ.setdefault("SSL_CERT_FILE", cert_path)
    os.environ.setdefault("REQUESTS_CA_BUNDLE", cert_path)


def create_app(
    service: Optional[VideoInfoService] = None,
) -> Tuple[Starlette, VideoInfoService]:
    """Instantiate the Starlette app along with the service it exposes."""

    _configure_certificates()
    resolved = service or default_service()
    app = Starlette()
    register_http_routes(app, resolved)
    app.state.info_service = resolved
    return app, resolved


__all__ = ["create_app"]
