from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    TODO = "Todo"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


@dataclass(slots=True)
class Task:
    id: int
    task: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
