import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

# Ids stay within the exactly representable range of a JSON number (2**53).
_ID_BITS = 53


def new_task_id() -> int:
    """Random identifier taken from the high bits of a UUID4."""
    return (uuid4().int >> (128 - _ID_BITS)) or 1


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T10:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class CreateTaskCommand:
    task: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO


class CreateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        id_factory: Callable[[], int] = new_task_id,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self._repository = repository
        self._id_factory = id_factory
        self._clock = clock

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task = Task(
            id=self._id_factory(),
            task=cmd.task,
            description=cmd.description,
            status=cmd.status,
            created_at=self._clock(),
        )
        self._repository.put(task)
        logger.info(f"Task {task.id} created")
        return task
