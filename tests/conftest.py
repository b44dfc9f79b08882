# tests/conftest.py: Shared test fixtures
import os

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# The app-level engine only needs a URL at import; tests use their own engine per test
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_ENV"] = "test"

from kanban.db.base import Base
from kanban.db.models import BoardColumn, Task
from kanban.db.session import enable_sqlite_foreign_keys, get_db
from kanban.main import app


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    # SQLite file under pytest's tmp dir, so nothing is left in the working directory
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'kanban.db'}", echo=False)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory):
    """HTTP test client with overridden DB dependency"""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def two_columns(db_session):
    """Columns A (order 1) and B (order 2), both empty"""
    a = BoardColumn(title="A", order=1)
    b = BoardColumn(title="B", order=2)
    db_session.add_all([a, b])
    await db_session.commit()
    return a, b


async def add_task(db_session, column, title, order):
    task = Task(title=title, column_id=column.id, order=order)
    db_session.add(task)
    await db_session.commit()
    return task
