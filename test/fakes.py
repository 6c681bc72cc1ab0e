from dataclasses import replace

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """Dict-backed store. Hands out copies so callers cannot mutate stored rows."""

    def __init__(self) -> None:
        self._data: dict[int, Task] = {}
        self.puts = 0

    def scan_all(self) -> list[Task]:
        return [replace(task) for task in self._data.values()]

    def get_by_key(self, task_id: int) -> Task | None:
        task = self._data.get(task_id)
        return replace(task) if task is not None else None

    def put(self, task: Task) -> None:
        self.puts += 1
        self._data[task.id] = replace(task)

    def delete_by_key(self, task_id: int) -> None:
        self._data.pop(task_id, None)


class FailingTaskRepository(TaskRepository):
    """Every call fails the way an unreachable store would."""

    def __init__(self, message: str = "store unreachable") -> None:
        self.message = message

    def scan_all(self) -> list[Task]:
        raise ConnectionError(self.message)

    def get_by_key(self, task_id: int) -> Task | None:
        raise ConnectionError(self.message)

    def put(self, task: Task) -> None:
        raise ConnectionError(self.message)

    def delete_by_key(self, task_id: int) -> None:
        raise ConnectionError(self.message)
