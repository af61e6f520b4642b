"""PlanetStore behaviour and the startup lifecycle."""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient
from pymongo import AsyncMongoClient
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from planet_api.app.core import db
from planet_api.app.core.config import Settings
from planet_api.app.core.db import PlanetStore, create_client
from planet_api.app.core.exceptions import StartupFailure
from planet_api.app.main import create_app
from tests._harness import EARTH, FakeStore


class FakeCollection:
    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self.documents = documents
        self.filters: List[Dict[str, Any]] = []

    async def find_one(self, query: Dict[str, Any]):
        self.filters.append(query)
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return document
        return None


class FakeDatabase:
    def __init__(self, name: str, collection: FakeCollection, ping_error: Exception = None) -> None:
        self.name = name
        self.collection = collection
        self.ping_error = ping_error
        self.commands: List[str] = []

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collection

    async def command(self, name: str):
        self.commands.append(name)
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1}


class FakeClient:
    def __init__(self, database: FakeDatabase) -> None:
        self.db = database
        self.closed = False

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.db

    async def close(self) -> None:
        self.closed = True


def _store(documents=(), ping_error=None) -> PlanetStore:
    database = FakeDatabase("solar-system", FakeCollection(list(documents)), ping_error)
    return PlanetStore(FakeClient(database), "solar-system")


@pytest.mark.anyio
async def test_find_planet_queries_by_exact_id():
    store = _store([EARTH])
    assert await store.find_planet(3) == EARTH
    assert store.collection.filters == [{"id": 3}]


@pytest.mark.anyio
async def test_find_planet_returns_none_when_missing():
    store = _store([EARTH])
    assert await store.find_planet(42) is None


@pytest.mark.anyio
async def test_connect_pings_the_database():
    store = _store()
    await store.connect()
    assert store.database.commands == ["ping"]


@pytest.mark.anyio
async def test_connect_failure_raises_startup_failure():
    store = _store(ping_error=ServerSelectionTimeoutError("no servers"))
    with pytest.raises(StartupFailure):
        await store.connect()


@pytest.mark.anyio
async def test_connect_failure_on_bad_credentials():
    store = _store(ping_error=OperationFailure("Authentication failed", code=18))
    with pytest.raises(StartupFailure):
        await store.connect()


@pytest.mark.anyio
async def test_close_closes_client():
    store = _store()
    await store.close()
    assert store.client.closed


@pytest.mark.anyio
async def test_create_client_applies_timeout():
    settings = Settings(
        mongo_uri="mongodb://db.example:27017/solar-system",
        mongo_username="reader",
        mongo_password="secret",
        mongo_timeout_ms=1234,
    )
    client = create_client(settings)
    try:
        assert isinstance(client, AsyncMongoClient)
        assert client.options.server_selection_timeout == 1.234
    finally:
        await client.close()


class RecordingClient:
    def __init__(self, uri: str, **options: Any) -> None:
        self.uri = uri
        self.options = options


def test_create_client_passes_credentials(monkeypatch):
    monkeypatch.setattr(db, "AsyncMongoClient", RecordingClient)
    settings = Settings(
        mongo_uri="mongodb://db.example:27017/solar-system",
        mongo_username="reader",
        mongo_password="secret",
        mongo_timeout_ms=1234,
    )
    client = create_client(settings)
    assert client.uri == "mongodb://db.example:27017/solar-system"
    assert client.options == {
        "serverSelectionTimeoutMS": 1234,
        "username": "reader",
        "password": "secret",
    }


def test_create_client_omits_unset_credentials(monkeypatch):
    monkeypatch.setattr(db, "AsyncMongoClient", RecordingClient)
    client = create_client(Settings(mongo_username=None, mongo_password=None))
    assert "username" not in client.options
    assert "password" not in client.options


def test_lifespan_connects_and_closes_store(settings):
    store = FakeStore([EARTH])
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        assert store.connected
        assert client.post("/planet", json={"id": 3}).json() == EARTH
    assert store.closed


def test_startup_failure_prevents_serving(settings):
    class UnreachableStore(FakeStore):
        async def connect(self) -> None:
            raise StartupFailure("MongoDB connection error: no servers")

    app = create_app(settings=settings, store=UnreachableStore())
    with pytest.raises(StartupFailure):
        with TestClient(app):
            pass


@pytest.mark.anyio
@pytest.mark.parametrize(
    "uri, database, expected",
    [
        ("mongodb://db.example:27017/galaxy", None, "galaxy"),
        ("mongodb://db.example:27017/galaxy", "override", "override"),
        ("mongodb://db.example:27017", None, "solar-system"),
    ],
)
async def test_from_settings_resolves_database(uri, database, expected):
    store = PlanetStore.from_settings(Settings(mongo_uri=uri, mongo_database=database))
    try:
        assert store.database.name == expected
        assert store.collection.name == "planets"
    finally:
        await store.close()
