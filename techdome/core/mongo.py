from __future__ import annotations

from typing import Callable, Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

# Database mongoose falls back to when the URI has no path.
DEFAULT_DB_NAME = "test"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 2000


def connect(
    uri: str,
    server_selection_timeout_ms: int = DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    client_factory: Callable[..., MongoClient] = MongoClient,
) -> MongoClient:
    """Open a client and make sure the server answers.

    MongoClient connects lazily, so a ping is sent to surface an unreachable
    server here instead of on the first query.
    """
    client = client_factory(uri, serverSelectionTimeoutMS=server_selection_timeout_ms)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    return client


def get_db(client: MongoClient, name: Optional[str] = None) -> Database:
    if name:
        return client[name]
    return client.get_default_database(default=DEFAULT_DB_NAME)


def health_check(client: MongoClient) -> bool:
    try:
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False
