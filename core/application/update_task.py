import logging
from dataclasses import dataclass

from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    """Partial update: fields left as None are not touched."""

    task: str | None = None
    description: str | None = None
    status: TaskStatus | None = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task | None:
        """
        Reads the stored task and merges the provided fields over it.

        Not atomic: two concurrent updates of the same id both read the same
        prior state and the last write wins.

        Returns:
            The merged task, or None when no task exists with that id.
        """
        task = self._repository.get_by_key(task_id)
        if task is None:
            return None

        if cmd.task is not None:
            task.task = cmd.task
        if cmd.description is not None:
            task.description = cmd.description
        if cmd.status is not None:
            task.status = cmd.status

        self._repository.put(task)
        logger.info(f"Task {task_id} updated")
        return task
