from typing import Any

import boto3

from infrastructure.settings import Settings


def get_table(settings: Settings) -> Any:
    """
    Builds the DynamoDB Table resource for the configured task table.

    Credentials left unset fall back to boto3's default provider chain
    (environment, shared config, instance/Lambda role).
    """
    resource = boto3.resource(
        "dynamodb",
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
    return resource.Table(settings.dynamodb_table)
