from pydantic import BaseModel, Field

from core.domain.models.task import Task, TaskStatus


class TaskDocument(BaseModel):
    """
    Task as stored in MongoDB.
    The task id doubles as the document `_id`.
    """

    id: int = Field(alias="_id")
    task: str
    description: str = ""
    status: str
    created_at: str = ""

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            task=self.task,
            description=self.description,
            status=TaskStatus(self.status),
            created_at=self.created_at,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskDocument":
        return cls(
            id=task.id,
            task=task.task,
            description=task.description,
            status=task.status.value,
            created_at=task.created_at,
        )
