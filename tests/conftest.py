"""Pytest fixtures for todo-api tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import NullPool

from todo_api.api.dependencies import get_todo_repository
from todo_api.core.config import Settings
from todo_api.core.database import Database
from todo_api.core.exceptions import TodoCreationError, TodoRetrievalError
from todo_api.main import create_app
from todo_api.models import Todo
from todo_api.services.todo import STORED_TASK_SUFFIX


class FakeTodoRepository:
    """In-memory stand-in for TodoRepository."""

    def __init__(self) -> None:
        self.rows: list[Todo] = []
        self.fail_list = False
        self.fail_create = False

    async def list(self) -> list[Todo]:
        if self.fail_list:
            raise TodoRetrievalError()
        return list(self.rows)

    async def create(self, task: str, completed: bool = False) -> int:
        if self.fail_create:
            raise TodoCreationError()
        todo_id = len(self.rows) + 1
        self.rows.append(Todo(id=todo_id, task=task + STORED_TASK_SUFFIX, completed=completed))
        return todo_id


class FakeDatabase:
    """Database stand-in whose ping can be made to fail."""

    def __init__(self) -> None:
        self.reachable = True

    async def ping(self) -> None:
        if not self.reachable:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def repository() -> FakeTodoRepository:
    return FakeTodoRepository()


@pytest.fixture
def fake_database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def app(settings: Settings, repository: FakeTodoRepository, fake_database: FakeDatabase) -> FastAPI:
    """Application wired to the in-memory repository."""
    app = create_app(fake_database, settings)
    app.dependency_overrides[get_todo_repository] = lambda: repository
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def sqlite_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.db"


@pytest.fixture
def sqlite_database(sqlite_path: Path) -> Database:
    """
    File-backed SQLite database.

    NullPool keeps connections from outliving the event loop that opened
    them, so the same Database can be used from pytest-asyncio tests and
    from TestClient's own loop.
    """
    return Database(
        f"sqlite+aiosqlite:///{sqlite_path}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )
