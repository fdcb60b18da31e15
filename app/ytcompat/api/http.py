from __future__ import annotations

from typing import Any, Dict, Mapping, TypeAlias

from marshmallow import ValidationError
from starlette import status
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse

from ..config import ApiRoute, HEALTH_CHECK_PATH, get_service_environment
from ..core import VideoInfoService
from ..exceptions import ExtractionFailed
from ..log_config import verbose_log
from ..models.api import ErrorCode, InfoQueryParams, InfoQuerySchema
from ..schemas import dump_video_info

JSONPrimitive = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]


def error_response(
    code: ErrorCode,
    *,
    status_code: int,
    detail: JSONValue | None = None,
) -> JSONResponse:
    payload: Dict[str, JSONValue] = {"error": code.value}
    if detail is not None:
        payload["detail"] = detail
    return JSONResponse(payload, status_code=status_code)


def parse_info_query(query: Mapping[str, Any]) -> InfoQueryParams:
    """Validate the ``/info`` query string; every failure concerns ``url``."""

    return InfoQuerySchema().load(dict(query))


def register_http_routes(app: Starlette, service: VideoInfoService) -> None:
    """Attach REST endpoints to the Starlette application."""

    async def health_check(_: Request) -> JSONResponse:
        env = get_service_environment()
        return JSONResponse({"status": "ok", "name": env.name})

    async def info_endpoint(request: Request) -> JSONResponse:
        try:
            params = parse_info_query(request.query_params)
        except ValidationError as exc:
            return error_response(
                ErrorCode.URL_REQUIRED,
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=exc.normalized_messages(),
            )
        try:
            info = await service.get_info(params.url)
        except ExtractionFailed as exc:
            verbose_log("info_endpoint_error", {"url": params.url, "error": str(exc)})
            return error_response(
                ErrorCode.EXTRACTION_FAILED,
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=str(exc),
            )
        return JSONResponse(dump_video_info(info))

    app.add_route(HEALTH_CHECK_PATH, health_check, methods=["GET"])
    app.add_route(ApiRoute.INFO.value, info_endpoint, methods=["GET"])


__all__ = ["error_response", "parse_info_query", "register_http_routes"]
