from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from core.domain.models.task import Task, TaskStatus
from infrastructure.dynamodb.repository.task_repository import DynamoTaskRepository
from infrastructure.dynamodb.session.client import get_table
from infrastructure.settings import Settings


@pytest.fixture
def mock_table():
    return MagicMock()


@pytest.fixture
def dynamo_repository(mock_table):
    return DynamoTaskRepository(mock_table)


def _item(task_id, title="Task", status="Todo"):
    return {
        "id": Decimal(task_id),
        "task": title,
        "description": "Desc",
        "status": status,
        "created_at": "2024-01-01T00:00:00.000Z",
    }


def test_put_writes_full_item(dynamo_repository, mock_table):
    task = Task(
        id=1700000000000,
        task="Test task",
        description="Test description",
        status=TaskStatus.IN_PROGRESS,
        created_at="2024-01-01T00:00:00.000Z",
    )

    dynamo_repository.put(task)

    mock_table.put_item.assert_called_once_with(
        Item={
            "id": 1700000000000,
            "task": "Test task",
            "description": "Test description",
            "status": "In Progress",
            "created_at": "2024-01-01T00:00:00.000Z",
        }
    )


def test_get_by_key_found_converts_decimal_id(dynamo_repository, mock_table):
    mock_table.get_item.return_value = {"Item": _item(5, "Found")}

    result = dynamo_repository.get_by_key(5)

    mock_table.get_item.assert_called_once_with(Key={"id": 5})
    assert result is not None
    assert result.id == 5
    assert isinstance(result.id, int)
    assert result.task == "Found"
    assert result.status is TaskStatus.TODO


def test_get_by_key_not_found(dynamo_repository, mock_table):
    mock_table.get_item.return_value = {}

    assert dynamo_repository.get_by_key(5) is None


def test_scan_all_empty_table(dynamo_repository, mock_table):
    mock_table.scan.return_value = {"Items": []}

    assert dynamo_repository.scan_all() == []


def test_scan_all_follows_pagination(dynamo_repository, mock_table):
    mock_table.scan.side_effect = [
        {"Items": [_item(1, "Task 1")], "LastEvaluatedKey": {"id": Decimal(1)}},
        {"Items": [_item(2, "Task 2", "Completed")]},
    ]

    results = dynamo_repository.scan_all()

    assert [t.task for t in results] == ["Task 1", "Task 2"]
    assert results[1].status is TaskStatus.COMPLETED
    assert mock_table.scan.call_count == 2
    _, second_kwargs = mock_table.scan.call_args_list[1]
    assert second_kwargs == {"ExclusiveStartKey": {"id": Decimal(1)}}


def test_delete_by_key(dynamo_repository, mock_table):
    dynamo_repository.delete_by_key(9)

    mock_table.delete_item.assert_called_once_with(Key={"id": 9})


def test_store_errors_propagate(dynamo_repository, mock_table):
    mock_table.scan.side_effect = ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "no table"}},
        "Scan",
    )

    with pytest.raises(ClientError):
        dynamo_repository.scan_all()


def test_get_table_uses_settings():
    settings = Settings(
        aws_region="eu-west-1",
        aws_access_key_id="key",
        aws_secret_access_key="secret",
        dynamodb_table="my-tasks",
        dynamodb_endpoint_url="http://localhost:8001",
    )

    with patch("infrastructure.dynamodb.session.client.boto3") as mock_boto3:
        table = get_table(settings)

    mock_boto3.resource.assert_called_once_with(
        "dynamodb",
        region_name="eu-west-1",
        aws_access_key_id="key",
        aws_secret_access_key="secret",
        endpoint_url="http://localhost:8001",
    )
    mock_boto3.resource.return_value.Table.assert_called_once_with("my-tasks")
    assert table is mock_boto3.resource.return_value.Table.return_value
