import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from backend_fastapi.api.deps import get_settings
from backend_fastapi.api.routes.tasks import router as tasks_router
from backend_fastapi.api.schemas import CreateTaskRequest, UpdateTaskRequest, field_error
from infrastructure.settings import Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
DOCS_URL = "/api-docs"

TITLE = "Tasks API"
VERSION = "1.0.0"
DESCRIPTION = "API for managing tasks in DynamoDB"

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def _openapi(app: FastAPI) -> dict[str, Any]:
    """
    OpenAPI document with the request body models registered as components.
    The routes take raw JSON bodies and reference these schemas by name.
    """
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    components = schema.setdefault("components", {}).setdefault("schemas", {})
    for model in (CreateTaskRequest, UpdateTaskRequest):
        model_schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
        for name, definition in model_schema.pop("$defs", {}).items():
            components.setdefault(name, definition)
        components[model.__name__] = model_schema

    app.openapi_schema = schema
    return schema


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for bodies FastAPI cannot parse (malformed JSON)
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        errors.append(field_error(".".join(loc[1:]), error.get("msg", "Invalid request"), location=location))
    return JSONResponse(status_code=400, content={"errors": errors})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=TITLE,
        version=VERSION,
        description=DESCRIPTION,
        docs_url=DOCS_URL,
        openapi_url=f"{DOCS_URL}/openapi.json",
        redoc_url=None,
    )
    app.openapi = lambda: _openapi(app)  # type: ignore[method-assign]

    # CORS_ORIGINS defaults to "*": restrict it before exposing the API publicly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    app.include_router(tasks_router, prefix=API_PREFIX)

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    return app


app = create_app()
