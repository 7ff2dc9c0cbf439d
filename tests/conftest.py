from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from task_api.main import create_app
from task_api.repositories import InMemoryTaskRepository
from task_api.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(host="127.0.0.1", port=8081, log_level="DEBUG", cors_allow_origins=["*"])


@pytest.fixture()
def store() -> InMemoryTaskRepository:
    """A fresh, empty store for every test."""
    return InMemoryTaskRepository()


@pytest.fixture()
def app(store: InMemoryTaskRepository, settings: Settings) -> FastAPI:
    return create_app(store=store, settings=settings)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
