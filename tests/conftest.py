"""Shared fixtures: a fresh file-backed SQLite database per test."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from cardsets.config import Settings
from cardsets.database import Database
from cardsets.main import create_app


def _database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'cardsets_test.db'}"


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(_database_url(tmp_path))
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.sessionmaker() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def app(tmp_path: Path) -> AsyncGenerator[FastAPI, None]:
    application = create_app(Settings(database_url=_database_url(tmp_path)))
    # ASGITransport doesn't run the lifespan, so do its startup/shutdown here.
    await application.state.database.create_all()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
