import logging
from dataclasses import dataclass

from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> bool:
        """
        Deletes a task after checking that it exists.

        Returns:
            True if the task existed and was deleted, False otherwise.
        """
        if self._repository.get_by_key(cmd.id) is None:
            return False
        self._repository.delete_by_key(cmd.id)
        logger.info(f"Task {cmd.id} deleted")
        return True
