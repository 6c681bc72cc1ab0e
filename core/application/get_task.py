from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int) -> Task | None:
        return self._repository.get_by_key(task_id)
