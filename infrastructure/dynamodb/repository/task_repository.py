import logging
from typing import Any

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.dynamodb.models.task import TaskItem

logger = logging.getLogger(__name__)


class DynamoTaskRepository(TaskRepository):
    """
    TaskRepository backed by a single DynamoDB table keyed by `id` (Number).

    Errors raised by boto3 (botocore ClientError, connection errors) are not
    caught here; the HTTP layer turns them into 500 responses.
    """

    def __init__(self, table: Any) -> None:
        self.table = table

    def scan_all(self) -> list[Task]:
        """
        Reads the whole table, following LastEvaluatedKey across scan pages.

        Returns:
            list[Task]: Every stored task, in DynamoDB's native order.
        """
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        while True:
            page = self.table.scan(**kwargs)
            items.extend(page.get("Items", []))
            last_key = page.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        logger.debug(f"Scanned {len(items)} tasks")
        return [TaskItem(**item).to_domain() for item in items]

    def get_by_key(self, task_id: int) -> Task | None:
        response = self.table.get_item(Key={"id": task_id})
        item = response.get("Item")
        if not item:
            return None
        return TaskItem(**item).to_domain()

    def put(self, task: Task) -> None:
        self.table.put_item(Item=TaskItem.from_domain(task).model_dump())

    def delete_by_key(self, task_id: int) -> None:
        self.table.delete_item(Key={"id": task_id})
