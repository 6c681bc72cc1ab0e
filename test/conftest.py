import pytest
from fakes import InMemoryTaskRepository

from backend_fastapi.api.deps import build_task_api
from infrastructure.settings import Settings


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def api(repository, settings):
    return build_task_api(repository, settings)
