"""
AWS Lambda entry point for the production run mode.

API Gateway proxy events (REST API payload v1 and HTTP API payload v2) are
translated to `TaskApi.handle` calls; no socket is opened. Configure the
function handler as `backend_fastapi.lambda_handler.handler`.
"""

import base64
import json
import logging
from typing import Any, Callable

from backend_fastapi.api.deps import get_settings, get_task_api
from backend_fastapi.api.schemas import field_error
from backend_fastapi.api.task_api import ApiResponse, TaskApi
from backend_fastapi.main import API_PREFIX, CORS_HEADERS, CORS_METHODS
from infrastructure.logging_setup import setup_logging
from infrastructure.settings import Settings

logger = logging.getLogger(__name__)

LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]


def _method(event: dict[str, Any]) -> str:
    if "httpMethod" in event:
        return event["httpMethod"]
    return event.get("requestContext", {}).get("http", {}).get("method", "GET")


def _path(event: dict[str, Any]) -> str:
    """Request path with the stage and /api prefixes removed."""
    path = event.get("rawPath") or event.get("path") or "/"
    stage = event.get("requestContext", {}).get("stage")
    if stage and stage != "$default" and path.startswith(f"/{stage}/"):
        path = path[len(stage) + 1:]
    if path == API_PREFIX or path.startswith(f"{API_PREFIX}/"):
        path = path[len(API_PREFIX):] or "/"
    return path


def _body(event: dict[str, Any]) -> Any:
    """
    Decodes the JSON body of the event.

    Raises:
        ValueError: If the body is not valid JSON.
    """
    raw = event.get("body")
    if raw is None or raw == "":
        return None
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    return json.loads(raw)


def _cors_headers(event: dict[str, Any], settings: Settings) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
    }
    if "*" in settings.cors_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    else:
        request_headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
        origin = request_headers.get("origin")
        if origin in settings.cors_origins:
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
    return headers


def _to_proxy_response(result: ApiResponse, headers: dict[str, str]) -> dict[str, Any]:
    if result.body is None:
        return {"statusCode": result.status, "headers": headers, "body": "", "isBase64Encoded": False}
    return {
        "statusCode": result.status,
        "headers": {**headers, "Content-Type": "application/json"},
        "body": json.dumps(result.body),
        "isBase64Encoded": False,
    }


def dispatch(event: dict[str, Any], api: TaskApi, settings: Settings) -> dict[str, Any]:
    headers = _cors_headers(event, settings)
    method = _method(event).upper()
    if method == "OPTIONS":
        return _to_proxy_response(ApiResponse(200), headers)

    try:
        body = _body(event)
    except ValueError as e:
        error = field_error("", f"Malformed JSON body: {e}")
        return _to_proxy_response(ApiResponse(400, {"errors": [error]}), headers)

    path = _path(event)
    try:
        result = api.handle(method, path, body)
    except Exception:
        logger.exception(f"Unhandled error on {method} {path}")
        result = ApiResponse(500, {"message": "Internal server error"})
    return _to_proxy_response(result, headers)


def make_handler(
    api_factory: Callable[[], TaskApi] = get_task_api,
    settings_factory: Callable[[], Settings] = get_settings,
    configure_logging: bool = True,
) -> LambdaHandler:
    configured = not configure_logging

    def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        nonlocal configured
        settings = settings_factory()
        if not configured:
            setup_logging(settings.log_level)
            configured = True
        return dispatch(event, api_factory(), settings)

    return lambda_handler


handler = make_handler()
