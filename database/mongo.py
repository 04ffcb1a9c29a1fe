import logging
import threading
from contextlib import contextmanager

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError

from utils.errors import StoreConnectionError, StoreError

logger = logging.getLogger(__name__)

# Collections
COURSES = "courses"            # course documents
QUIZZES = "quizzes"            # quizzes, full documents incl. answers
ASSIGNMENTS = "assignments"    # assignment records, file stored on disk


class MongoStore:
    """
    Pooled access to the document store.

    One MongoClient (which owns the connection pool) is created on first use
    and shared by every request; each operation borrows a collection through
    collection() and gets pymongo failures translated into store errors.
    """

    def __init__(self, uri, db_name, connect_timeout_ms=5000, socket_timeout_ms=30000,
                 client_factory=MongoClient):
        self.uri = uri
        self.db_name = db_name
        self.connect_timeout_ms = connect_timeout_ms
        self.socket_timeout_ms = socket_timeout_ms
        self._client_factory = client_factory
        self._client = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config):
        return cls(
            config["MONGO_URI"],
            config["DB_NAME"],
            connect_timeout_ms=config.get("MONGO_CONNECT_TIMEOUT_MS", 5000),
            socket_timeout_ms=config.get("MONGO_SOCKET_TIMEOUT_MS", 30000),
        )

    def connect(self):
        client = self._client
        if client is not None:
            return client
        with self._lock:
            if self._client is None:
                try:
                    self._client = self._client_factory(
                        self.uri,
                        connectTimeoutMS=self.connect_timeout_ms,
                        socketTimeoutMS=self.socket_timeout_ms,
                        serverSelectionTimeoutMS=self.connect_timeout_ms,
                    )
                except PyMongoError as e:
                    logger.exception("Could not create MongoDB client for %s", self.db_name)
                    raise StoreConnectionError() from e
                logger.info("MongoDB client created for database '%s'", self.db_name)
            return self._client

    @contextmanager
    def _translate_errors(self, target):
        try:
            yield
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.exception("MongoDB unreachable during operation on '%s'", target)
            raise StoreConnectionError() from e
        except PyMongoError as e:
            logger.exception("MongoDB operation on '%s' failed", target)
            raise StoreError() from e

    @contextmanager
    def collection(self, name):
        client = self.connect()
        with self._translate_errors(name):
            yield client[self.db_name][name]

    def ping(self):
        client = self.connect()
        with self._translate_errors("admin"):
            client.admin.command("ping")
        return True

    def close(self):
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()
            logger.info("MongoDB client closed")
