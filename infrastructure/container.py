from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.dynamodb.repository.task_repository import DynamoTaskRepository
from infrastructure.dynamodb.session.client import get_table
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.mongo.session.client import get_db
from infrastructure.settings import Settings


def get_task_repository(settings: Settings) -> TaskRepository:
    if settings.task_store == "mongo":
        return MongoTaskRepository(get_db(settings), settings.dynamodb_table)
    # Default to DynamoDB
    return DynamoTaskRepository(get_table(settings))


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
