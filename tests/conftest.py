import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId

from app import create_app
from database.mongo import MongoStore


class FakeCollection:
    """In-memory stand-in for a pymongo collection (equality filters only)."""

    def __init__(self):
        self.docs = []
        self.fail_with = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _matches(self, doc, filter):
        return all(doc.get(k) == v for k, v in (filter or {}).items())

    def find(self, filter=None):
        self._check()
        return [copy.deepcopy(d) for d in self.docs if self._matches(d, filter)]

    def find_one(self, filter=None):
        found = self.find(filter)
        return found[0] if found else None

    def count_documents(self, filter, limit=0):
        n = len(self.find(filter))
        return min(n, limit) if limit else n

    def insert_one(self, doc):
        self._check()
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def update_one(self, filter, update):
        self._check()
        for d in self.docs:
            if self._matches(d, filter):
                d.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, filter):
        self._check()
        for i, d in enumerate(self.docs):
            if self._matches(d, filter):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase(dict):
    def __missing__(self, name):
        self[name] = FakeCollection()
        return self[name]


class FakeMongoClient:
    instances = []

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.databases = {}
        self.closed = False
        self.ping_error = None
        self.admin = SimpleNamespace(command=self._command)
        FakeMongoClient.instances.append(self)

    def _command(self, name):
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1}

    def __getitem__(self, name):
        return self.databases.setdefault(name, FakeDatabase())

    def close(self):
        self.closed = True


class TestConfig:
    MONGO_URI = "mongodb://test-host:27017"
    DB_NAME = "classmate_test"
    BACKEND_URL = "http://backend.test"
    FRONTEND_URL = "http://frontend.test/"
    MONGO_CONNECT_TIMEOUT_MS = 5000
    MONGO_SOCKET_TIMEOUT_MS = 30000
    MAX_CONTENT_LENGTH = 1024 * 1024
    PORT = 8000
    LOG_LEVEL = "DEBUG"
    TESTING = True

    def __init__(self, upload_folder):
        self.UPLOAD_FOLDER = upload_folder


@pytest.fixture
def store():
    store = MongoStore("mongodb://test-host:27017", "classmate_test", client_factory=FakeMongoClient)
    yield store
    store.close()


@pytest.fixture
def db(store):
    return store.connect()["classmate_test"]


@pytest.fixture
def app(store, tmp_path):
    return create_app(TestConfig(str(tmp_path / "uploads")), store=store)


@pytest.fixture
def client(app):
    return app.test_client()
