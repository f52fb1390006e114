"""Shared pytest fixtures: an app wired to an in-memory Mongo database."""

import asyncio
from typing import Any, Callable, Generator, Mapping

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import OperationFailure

from resell.core.config import Settings
from resell.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        MONGO_URL="mongodb://unused",
        DB_NAME="resell-test",
        STRIPE_SECRET_KEY="sk_test",
        ENSURE_INDEXES=True,
    )


@pytest.fixture
def database():
    return AsyncMongoMockClient()["resell-test"]


@pytest.fixture
def app(settings: Settings, database) -> FastAPI:
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def run() -> Callable:
    """Run a store coroutine from a sync test."""
    return asyncio.run


@pytest.fixture
def create_user(client: TestClient) -> Callable[..., Mapping[str, Any]]:
    def _create(email: str, **extra: Any) -> Mapping[str, Any]:
        response = client.post("/users", json={"email": email, **extra})
        assert response.status_code == 200
        return client.get("/users", params={"email": email}).json()[0]

    return _create


@pytest.fixture
def create_order(client: TestClient) -> Callable[..., Mapping[str, Any]]:
    def _create(buyer: str, product: str, **extra: Any) -> Mapping[str, Any]:
        response = client.post(
            "/orders", json={"buyerEmail": buyer, "productName": product, **extra}
        )
        assert response.status_code == 200
        return response.json()

    return _create


class _IndexRejectingCollection:
    def __init__(self, collection):
        self._collection = collection

    async def create_index(self, *args, **kwargs):
        raise OperationFailure("E11000 duplicate key error collection: Users index: email_unique")

    def __getattr__(self, name):
        return getattr(self._collection, name)


class _IndexRejectingDatabase:
    def __init__(self, db):
        self._db = db

    def __getitem__(self, name):
        return _IndexRejectingCollection(self._db[name])


@pytest.fixture
def index_rejecting_db():
    """In-memory database whose collections refuse to build indexes."""
    return _IndexRejectingDatabase(AsyncMongoMockClient()["resell-test"])
