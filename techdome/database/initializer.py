"""
Startup check for the blog backend's MongoDB store.

Connects, counts the documents in the ``blogs`` and ``users`` collections,
logs which of them are still empty and closes the connection again. Nothing
is ever written to the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from pymongo import MongoClient
from pymongo.database import Database

from core import mongo

logger = logging.getLogger(__name__)

# (log label, collection name)
DEFAULT_COLLECTIONS: Tuple[Tuple[str, str], ...] = (
    ("Blog", "blogs"),
    ("User", "users"),
)


class BootstrapState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CHECKING = "checking"
    CLOSED = "closed"
    FAILED = "failed"


@dataclass
class CollectionCheck:
    label: str
    collection: str
    count: int

    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass
class CheckResult:
    checks: List[CollectionCheck] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def empty_collections(self) -> List[str]:
        return [c.collection for c in self.checks if c.is_empty]


@dataclass
class BootstrapReport:
    state: BootstrapState
    check: Optional[CheckResult] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.state == BootstrapState.CLOSED and self.error is None


def check_collections(
    db: Database,
    collections: Sequence[Tuple[str, str]] = DEFAULT_COLLECTIONS,
) -> CheckResult:
    """Count each collection in order and log the empty ones.

    Errors are logged and returned on the result instead of raised.
    """
    result = CheckResult()
    try:
        for label, name in collections:
            count = db[name].count_documents({})
            result.checks.append(CollectionCheck(label=label, collection=name, count=count))
            if count == 0:
                # Default documents would be inserted here; the store is left untouched.
                logger.info(f"Creating default {label} collections...")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        result.error = e
    return result


class BootstrapInitializer:
    """Runs the connect, check and close sequence once per ``run()`` call."""

    def __init__(
        self,
        uri: str,
        db_name: Optional[str] = None,
        server_selection_timeout_ms: int = mongo.DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        collections: Sequence[Tuple[str, str]] = DEFAULT_COLLECTIONS,
        client_factory: Callable[..., MongoClient] = MongoClient,
    ):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.collections = collections
        self.client_factory = client_factory
        self.state = BootstrapState.DISCONNECTED

    def run(self) -> BootstrapReport:
        self.state = BootstrapState.CONNECTING
        try:
            client = mongo.connect(
                self.uri,
                server_selection_timeout_ms=self.server_selection_timeout_ms,
                client_factory=self.client_factory,
            )
        except Exception as e:
            # URI and option validation errors surface as ValueError/TypeError, not PyMongoError.
            logger.error(f"MongoDB connection error: {e}")
            self.state = BootstrapState.FAILED
            return BootstrapReport(state=self.state, error=e)

        self.state = BootstrapState.CONNECTED
        logger.info("MongoDB connected...")
        return self._initialize(client)

    def _initialize(self, client: MongoClient) -> BootstrapReport:
        self.state = BootstrapState.CHECKING
        try:
            try:
                db = mongo.get_db(client, self.db_name)
            except Exception as e:
                logger.error(f"Error initializing database: {e}")
                result = CheckResult(error=e)
            else:
                result = check_collections(db, self.collections)
        finally:
            client.close()
            self.state = BootstrapState.CLOSED
        return BootstrapReport(state=self.state, check=result, error=result.error)


def run(uri: str, db_name: Optional[str] = None, **options) -> BootstrapReport:
    return BootstrapInitializer(uri, db_name=db_name, **options).run()
