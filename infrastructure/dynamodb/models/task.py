from decimal import Decimal
from typing import Any

from pydantic import BaseModel, field_validator

from core.domain.models.task import Task, TaskStatus


class TaskItem(BaseModel):
    """
    Task as stored in DynamoDB.
    Numbers come back from boto3 as Decimal, so `id` is coerced on load.
    """

    id: int
    task: str
    description: str = ""
    status: str
    created_at: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _decimal_to_int(cls, value: Any) -> Any:
        if isinstance(value, Decimal):
            return int(value)
        return value

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            task=self.task,
            description=self.description,
            status=TaskStatus(self.status),
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskItem":
        return cls(
            id=task.id,
            task=task.task,
            description=task.description,
            status=task.status.value,
            created_at=task.created_at,
        )
