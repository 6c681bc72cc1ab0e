from typing import Any

from pymongo.collection import Collection
from pymongo.database import Database

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskDocument


class MongoTaskRepository(TaskRepository):
    """
    TaskRepository implementation on a MongoDB collection (synchronous).
    """

    def __init__(self, db: Database[Any], collection_name: str) -> None:
        self.db = db
        self.collection: Collection[Any] = db[collection_name]

    def scan_all(self) -> list[Task]:
        """
        Lists every task in the collection.

        Returns:
            list[Task]: All tasks, empty when the collection is empty.
        """
        return [TaskDocument(**doc).to_domain() for doc in self.collection.find()]

    def get_by_key(self, task_id: int) -> Task | None:
        """
        Fetches one task by id.

        Returns:
            Task | None: The task, or None if it does not exist.
        """
        doc = self.collection.find_one({"_id": task_id})
        if not doc:
            return None
        return TaskDocument(**doc).to_domain()

    def put(self, task: Task) -> None:
        """
        Inserts the task or overwrites the stored copy.
        """
        document = TaskDocument.from_domain(task).model_dump(by_alias=True)
        self.collection.replace_one({"_id": document["_id"]}, document, upsert=True)

    def delete_by_key(self, task_id: int) -> None:
        self.collection.delete_one({"_id": task_id})
