"""Fixtures for SQLite integration tests."""

from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from datayoinker.config import Config
from datayoinker.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from datayoinker.infrastructure.persistence.schema import ensure_schema


@pytest.fixture
def db_config(tmp_path: Path) -> Config:
    """Config pointing at a fresh database file for each test."""
    return Config(db_path=str(tmp_path / "yoink.db"))


@pytest_asyncio.fixture
async def sqlite_engine(db_config: Config):
    """Per-test async engine with the schema in place."""
    engine = create_db_engine(db_config)
    await ensure_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine: AsyncEngine):
    factory = create_session_factory(sqlite_engine)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def other_session(sqlite_engine: AsyncEngine):
    """A second, independent session on the same database."""
    factory = create_session_factory(sqlite_engine)
    async with factory() as session:
        yield session
