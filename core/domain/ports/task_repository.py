from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def scan_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def get_by_key(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, task: Task) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_by_key(self, task_id: int) -> None:
        raise NotImplementedError
