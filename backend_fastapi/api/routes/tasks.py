from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Response, status
from fastapi.responses import JSONResponse

from backend_fastapi.api.deps import get_task_api
from backend_fastapi.api.schemas import Task
from backend_fastapi.api.task_api import ApiResponse, TaskApi

router = APIRouter(prefix="/tasks", tags=["tasks"])

_ERRORS = {"description": "Validation failed"}
_NOT_FOUND = {"description": "Task not found"}
_STORE_ERROR = {"description": "Store error"}


def _request_body(model_name: str, required: bool) -> dict[str, Any]:
    return {
        "requestBody": {
            "required": required,
            "content": {
                "application/json": {
                    "schema": {"$ref": f"#/components/schemas/{model_name}"}
                }
            },
        }
    }


def _to_response(result: ApiResponse) -> Response:
    if result.body is None:
        return Response(status_code=result.status)
    return JSONResponse(status_code=result.status, content=result.body)



@router.get(
    "",
    response_model=list[Task],
    summary="Retrieve all tasks",
    responses={500: _STORE_ERROR},
)
def list_tasks(api: TaskApi = Depends(get_task_api)) -> Response:
    """
    Returns every task in the table. No pagination, no ordering guarantee.
    """
    return _to_response(api.handle("GET", "/tasks"))


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Retrieve a task by ID",
    responses={400: _ERRORS, 404: _NOT_FOUND, 500: _STORE_ERROR},
)
def get_task(
    task_id: str = Path(description="Task id (integer)"),
    api: TaskApi = Depends(get_task_api),
) -> Response:
    return _to_response(api.handle("GET", f"/tasks/{task_id}"))


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
    responses={400: _ERRORS, 500: _STORE_ERROR},
    openapi_extra=_request_body("CreateTaskRequest", required=True),
)
def create_task(
    payload: Any = Body(default=None),
    api: TaskApi = Depends(get_task_api),
) -> Response:
    """
    Creates a task. The service assigns `id` and `created_at`.

    - **task**: non-empty title.
    - **description**: free text.
    - **status**: one of Todo, In Progress, Completed.
    """
    return _to_response(api.handle("POST", "/tasks", payload))


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
    responses={400: _ERRORS, 404: _NOT_FOUND, 500: _STORE_ERROR},
    openapi_extra=_request_body("UpdateTaskRequest", required=False),
)
def update_task(
    task_id: str = Path(description="Task id (integer)"),
    payload: Any = Body(default=None),
    api: TaskApi = Depends(get_task_api),
) -> Response:
    """
    Merges the provided fields over the stored task; omitted fields keep
    their current value.
    """
    return _to_response(api.handle("PUT", f"/tasks/{task_id}", payload))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={400: _ERRORS, 404: _NOT_FOUND, 500: _STORE_ERROR},
)
def delete_task(
    task_id: str = Path(description="Task id (integer)"),
    api: TaskApi = Depends(get_task_api),
) -> Response:
    return _to_response(api.handle("DELETE", f"/tasks/{task_id}"))
