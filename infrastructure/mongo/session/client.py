from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

from infrastructure.settings import Settings

_clients: dict[str, MongoClient[Any]] = {}


def get_client(mongo_uri: str) -> MongoClient[Any]:
    """
    Returns the MongoClient for the URI, creating it on first use.
    MongoClient keeps its own connection pool, so one per URI is enough.
    """
    client = _clients.get(mongo_uri)
    if client is None:
        client = MongoClient(mongo_uri)
        _clients[mongo_uri] = client
    return client


def get_db(settings: Settings) -> Database[Any]:
    return get_client(settings.mongo_uri)[settings.mongo_db_name]
