from unittest.mock import MagicMock

import pytest

from core.domain.models.task import Task, TaskStatus
from infrastructure.mongo.repository.task_repository import MongoTaskRepository


@pytest.fixture
def mock_mongo_collection():
    return MagicMock()


@pytest.fixture
def mongo_repository(mock_mongo_collection):
    db = MagicMock()
    db.__getitem__.return_value = mock_mongo_collection
    repo = MongoTaskRepository(db, "tasks")
    db.__getitem__.assert_called_once_with("tasks")
    return repo


def test_put_task(mongo_repository, mock_mongo_collection):
    task = Task(
        id=11,
        task="Test task",
        description="Test description",
        status=TaskStatus.TODO,
        created_at="2024-01-01T00:00:00.000Z",
    )

    mongo_repository.put(task)

    mock_mongo_collection.replace_one.assert_called_once()
    args, kwargs = mock_mongo_collection.replace_one.call_args
    assert args[0] == {"_id": 11}
    assert args[1]["task"] == "Test task"
    assert args[1]["status"] == "Todo"
    assert "id" not in args[1]
    assert kwargs["upsert"] is True


def test_get_by_key_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = {
        "_id": 11,
        "task": "Found task",
        "description": "Found description",
        "status": "In Progress",
        "created_at": "2024-01-01T00:00:00.000Z",
    }

    result = mongo_repository.get_by_key(11)

    mock_mongo_collection.find_one.assert_called_once_with({"_id": 11})
    assert result is not None
    assert result.id == 11
    assert result.task == "Found task"
    assert result.status is TaskStatus.IN_PROGRESS


def test_get_by_key_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    assert mongo_repository.get_by_key(11) is None


def test_scan_all(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find.return_value = [
        {"_id": 1, "task": "Task 1", "description": "Desc 1", "status": "Todo"},
        {"_id": 2, "task": "Task 2", "description": "Desc 2", "status": "Completed"},
    ]

    results = mongo_repository.scan_all()

    assert len(results) == 2
    assert results[0].task == "Task 1"
    assert results[1].status is TaskStatus.COMPLETED


def test_delete_by_key(mongo_repository, mock_mongo_collection):
    mongo_repository.delete_by_key(11)

    mock_mongo_collection.delete_one.assert_called_once_with({"_id": 11})
