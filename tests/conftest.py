"""Test configuration and fixtures."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from nameguard.persistence.database import provision_schema

# Identity keys as reported by the host for two different players
ALICE_KEY = "0f8fad5b-d9cb-469f-a165-70867728950e"
MALLORY_KEY = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """SQLite binding store in a temporary file, schema provisioned."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'nameguard.db'}")
    await provision_schema(engine)
    yield engine
    await engine.dispose()
