import asyncio
import sys
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

# Add project root (2 levels up from tests/) to sys.path so tests can import 'gotogether'
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from gotogether.models import Base as DBBase
import gotogether.models.database as database_module


def _sqlite_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'gotogether_test.db'}"


async def _create_schema(engine):
    async with engine.begin() as conn:
        await conn.run_sync(DBBase.metadata.create_all)


@pytest.fixture
def async_db(tmp_path):
    """Point the app's database dependency at a fresh SQLite file.

    NullPool opens a new connection per session, so the engine is usable
    from the TestClient's event loop as well as from the fixture's.
    """
    test_engine = database_module.create_engine_for_url(_sqlite_url(tmp_path), poolclass=NullPool)
    asyncio.run(_create_schema(test_engine))
    test_async_session = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def _get_test_db():
        async with test_async_session() as session:
            yield session

    from gotogether.main import app as _app
    _app.dependency_overrides[database_module.get_db] = _get_test_db
    yield test_async_session
    _app.dependency_overrides.clear()


@pytest.fixture
async def db_session(tmp_path):
    """Session on a fresh SQLite file, for service-level tests."""
    engine = database_module.create_engine_for_url(_sqlite_url(tmp_path), poolclass=NullPool)
    await _create_schema(engine)
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
