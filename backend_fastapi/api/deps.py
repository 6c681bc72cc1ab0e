from functools import lru_cache

from backend_fastapi.api.task_api import TaskApi
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_task_repository,
    get_update_task_use_case,
)
from infrastructure.settings import Settings, load_settings


@lru_cache
def get_settings() -> Settings:
    return load_settings()


def build_task_api(repository: TaskRepository, settings: Settings) -> TaskApi:
    return TaskApi(
        list_tasks=get_list_tasks_use_case(repository),
        get_task=get_get_task_use_case(repository),
        create_task=get_create_task_use_case(repository),
        update_task=get_update_task_use_case(repository),
        delete_task=get_delete_task_use_case(repository),
        require_description=settings.require_description,
        expose_errors=settings.expose_errors,
    )


@lru_cache
def get_task_api() -> TaskApi:
    """Process-wide TaskApi, built on first request from the startup settings."""
    settings = get_settings()
    return build_task_api(get_task_repository(settings), settings)
