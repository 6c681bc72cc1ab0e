"""
HTTP-agnostic request handling for the task routes.

`TaskApi.handle(method, path, body)` maps a request to an `ApiResponse`
(status code + JSON-ready body). The FastAPI routes and the Lambda adapter are
both thin wrappers around it, so validation and error mapping live only here.
Paths are relative to the `/api` prefix.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from backend_fastapi.api.schemas import (
    CREATE_MESSAGES,
    UPDATE_MESSAGES,
    CreateTaskRequest,
    UpdateTaskRequest,
    field_error,
    format_validation_errors,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase

logger = logging.getLogger(__name__)

_TASK_PATH = re.compile(r"/tasks/([^/]+)")
# Same shape as validator.js isInt: ASCII digits, optional sign, no leading zeros.
_INTEGER = re.compile(r"[+-]?(?:0|[1-9][0-9]*)", re.ASCII)
# Task ids are generated below 2**53; anything larger cannot name a task.
_MAX_ID = 2**53

ID_MESSAGE = "ID must be an integer"
NOT_FOUND_MESSAGE = "Task not found"


@dataclass(slots=True)
class ApiResponse:
    status: int
    body: Any = None


class TaskApi:
    def __init__(
        self,
        list_tasks: ListTasksUseCase,
        get_task: GetTaskUseCase,
        create_task: CreateTaskUseCase,
        update_task: UpdateTaskUseCase,
        delete_task: DeleteTaskUseCase,
        require_description: bool = False,
        expose_errors: bool = False,
    ) -> None:
        self._list_tasks = list_tasks
        self._get_task = get_task
        self._create_task = create_task
        self._update_task = update_task
        self._delete_task = delete_task
        self.require_description = require_description
        self.expose_errors = expose_errors

    # ──────────────────────────────────────────────────────────────────────
    # Dispatch
    # ──────────────────────────────────────────────────────────────────────

    def handle(self, method: str, path: str, body: Any = None) -> ApiResponse:
        method = method.upper()
        path = "/" + path.strip("/")

        if path == "/tasks":
            if method == "GET":
                return self.list_tasks()
            if method == "POST":
                return self.create_task(body)
            return ApiResponse(405, {"message": "Method not allowed"})

        match = _TASK_PATH.fullmatch(path)
        if match:
            raw_id = match.group(1)
            if method == "GET":
                return self.get_task(raw_id)
            if method == "PUT":
                return self.update_task(raw_id, body)
            if method == "DELETE":
                return self.delete_task(raw_id)
            return ApiResponse(405, {"message": "Method not allowed"})

        return ApiResponse(404, {"message": "Not found"})

    # ──────────────────────────────────────────────────────────────────────
    # Routes
    # ──────────────────────────────────────────────────────────────────────

    def list_tasks(self) -> ApiResponse:
        try:
            tasks = self._list_tasks.execute()
        except Exception as e:
            return self._failure("Failed to fetch tasks", e)
        return ApiResponse(200, [task.to_dict() for task in tasks])

    def get_task(self, raw_id: str) -> ApiResponse:
        task_id, errors = _parse_id(raw_id)
        if errors:
            return ApiResponse(400, {"errors": errors})

        try:
            task = self._get_task.execute(task_id)
        except Exception as e:
            return self._failure("Failed to fetch task", e)
        if task is None:
            return ApiResponse(404, {"message": NOT_FOUND_MESSAGE})
        return ApiResponse(200, task.to_dict())

    def create_task(self, body: Any) -> ApiResponse:
        if body is None:
            body = {}
        if not isinstance(body, dict):
            return ApiResponse(400, {"errors": [_body_not_object(body)]})

        try:
            request = CreateTaskRequest.model_validate(
                body, context={"require_description": self.require_description}
            )
        except ValidationError as e:
            return ApiResponse(400, {"errors": format_validation_errors(e, CREATE_MESSAGES)})

        cmd = CreateTaskCommand(
            task=request.task,
            description=request.description,
            status=request.status,
        )
        try:
            task = self._create_task.execute(cmd)
        except Exception as e:
            return self._failure("Failed to create task", e)
        return ApiResponse(201, task.to_dict())

    def update_task(self, raw_id: str, body: Any) -> ApiResponse:
        task_id, errors = _parse_id(raw_id)
        request: UpdateTaskRequest | None = None
        if body is None:
            body = {}
        if not isinstance(body, dict):
            errors.append(_body_not_object(body))
        else:
            try:
                request = UpdateTaskRequest.model_validate(body)
            except ValidationError as e:
                errors.extend(format_validation_errors(e, UPDATE_MESSAGES))
        if errors or request is None:
            return ApiResponse(400, {"errors": errors})

        cmd = UpdateTaskCommand(
            task=request.task,
            description=request.description,
            status=request.status,
        )
        try:
            task = self._update_task.execute(task_id, cmd)
        except Exception as e:
            return self._failure("Failed to update task", e)
        if task is None:
            return ApiResponse(404, {"message": NOT_FOUND_MESSAGE})
        return ApiResponse(200, task.to_dict())

    def delete_task(self, raw_id: str) -> ApiResponse:
        task_id, errors = _parse_id(raw_id)
        if errors:
            return ApiResponse(400, {"errors": errors})

        try:
            deleted = self._delete_task.execute(DeleteTaskCommand(id=task_id))
        except Exception as e:
            return self._failure("Failed to delete task", e)
        if not deleted:
            return ApiResponse(404, {"message": NOT_FOUND_MESSAGE})
        return ApiResponse(204)

    # ──────────────────────────────────────────────────────────────────────

    def _failure(self, message: str, exc: Exception) -> ApiResponse:
        logger.exception(message)
        body: dict[str, Any] = {"message": message}
        if self.expose_errors:
            body["error"] = {"type": type(exc).__name__, "detail": str(exc)}
        return ApiResponse(500, body)


def _parse_id(raw_id: str) -> tuple[int, list[dict[str, Any]]]:
    if _INTEGER.fullmatch(raw_id):
        task_id = int(raw_id)
        if abs(task_id) < _MAX_ID:
            return task_id, []
    return 0, [field_error("id", ID_MESSAGE, value=raw_id, location="params")]


def _body_not_object(body: Any) -> dict[str, Any]:
    # raw bytes reach here when the request was not sent as JSON
    value = body if isinstance(body, (str, int, float, bool, list)) else None
    return field_error("", "Request body must be a JSON object", value=value)
