import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from capstone_catalog.backend.app.infrastructure.db import (
    SqlAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
    init_db,
)


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    # a throwaway SQLite file per test keeps runs isolated
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session):
    return SqlAlchemyUnitOfWork(session)
