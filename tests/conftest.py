from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from planet_api.app.core.config import Settings
from planet_api.app.main import create_app
from tests._harness import EARTH, FakeStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def store() -> FakeStore:
    return FakeStore([EARTH])


@pytest.fixture
def build_client(settings: Settings):
    """
    Fixture returns a callable:
        client = build_client(store=FakeStore([...]), settings=Settings(...))
    The lifespan is not entered, so no MongoDB connection is attempted.
    """

    def _build(store: Any = None, settings: Settings = settings) -> TestClient:
        return TestClient(create_app(settings=settings, store=store or FakeStore()))

    return _build


@pytest.fixture
def client(build_client, store: FakeStore) -> TestClient:
    return build_client(store=store)
