from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from core.domain.models.task import TaskStatus

STATUS_MESSAGE = "Status must be Todo, In Progress, or Completed"

CREATE_MESSAGES = {
    "task": "Task is required",
    "description": "Description is required",
    "status": STATUS_MESSAGE,
}

UPDATE_MESSAGES = {
    "task": "Task cannot be empty",
    "description": "Description cannot be empty",
    "status": STATUS_MESSAGE,
}


class Task(BaseModel):
    """Task as returned by the API. Published in the OpenAPI document as `Task`."""

    id: int
    task: str
    description: str
    status: TaskStatus
    created_at: str = Field(json_schema_extra={"format": "date-time"})


class CreateTaskRequest(BaseModel):
    """
    Body of POST /tasks.

    `description` is optional unless the validation context carries
    `require_description=True`.
    """

    task: str | None = Field(default=None, validate_default=True)
    description: str | None = Field(default=None, validate_default=True)
    status: TaskStatus | None = Field(default=None, validate_default=True)

    @field_validator("task")
    @classmethod
    def _task_not_empty(cls, value: str | None) -> str:
        if value is None or not value.strip():
            raise ValueError(CREATE_MESSAGES["task"])
        return value

    @field_validator("description")
    @classmethod
    def _description_rule(cls, value: str | None, info: ValidationInfo) -> str:
        required = bool(info.context and info.context.get("require_description"))
        if required and (value is None or not value.strip()):
            raise ValueError(CREATE_MESSAGES["description"])
        return value or ""

    @field_validator("status")
    @classmethod
    def _status_required(cls, value: TaskStatus | None) -> TaskStatus:
        if value is None:
            raise ValueError(STATUS_MESSAGE)
        return value


class UpdateTaskRequest(BaseModel):
    """
    Body of PUT /tasks/{id}. Every field is optional, but a field that is sent
    is validated: an explicit null is rejected like an empty value.
    """

    task: str | None = None
    description: str | None = None
    status: TaskStatus | None = None

    # Defaults are not validated, so these only run for fields present in the body.
    @field_validator("task", "description", "status")
    @classmethod
    def _valid_when_present(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(UPDATE_MESSAGES[info.field_name])
        return value


def field_error(path: str, msg: str, value: Any = None, location: str = "body") -> dict[str, Any]:
    return {"type": "field", "value": value, "msg": msg, "path": path, "location": location}


def format_validation_errors(exc: ValidationError, messages: dict[str, str]) -> list[dict[str, Any]]:
    """Turns a pydantic ValidationError into the API's field-level error list."""
    errors = []
    for error in exc.errors():
        path = str(error["loc"][0]) if error["loc"] else ""
        errors.append(
            field_error(
                path=path,
                msg=messages.get(path, error["msg"]),
                value=error.get("input") if path else None,
            )
        )
    return errors
