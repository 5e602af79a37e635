from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from core import mongo


def test_connect_pings_and_returns_client():
    client = MagicMock()
    factory = MagicMock(return_value=client)

    result = mongo.connect('mongodb://db.example:27017/blog', server_selection_timeout_ms=500, client_factory=factory)

    assert result is client
    factory.assert_called_once_with('mongodb://db.example:27017/blog', serverSelectionTimeoutMS=500)
    client.admin.command.assert_called_once_with('ping')
    client.close.assert_not_called()


def test_connect_closes_client_when_ping_fails():
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError('no servers')

    with pytest.raises(ServerSelectionTimeoutError):
        mongo.connect('mongodb://nowhere:27017', client_factory=MagicMock(return_value=client))

    client.close.assert_called_once()


def test_get_db_prefers_explicit_name():
    client = MagicMock()
    mongo.get_db(client, 'blogdb')
    client.__getitem__.assert_called_once_with('blogdb')
    client.get_default_database.assert_not_called()


def test_get_db_uses_uri_database_then_default():
    client = MagicMock()
    mongo.get_db(client)
    client.get_default_database.assert_called_once_with(default=mongo.DEFAULT_DB_NAME)


def test_health_check():
    healthy = MagicMock()
    assert mongo.health_check(healthy) is True

    down = MagicMock()
    down.admin.command.side_effect = ServerSelectionTimeoutError('down')
    assert mongo.health_check(down) is False
