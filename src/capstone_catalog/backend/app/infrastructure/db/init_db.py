from sqlalchemy.ext.asyncio import AsyncEngine

from capstone_catalog.backend.app.infrastructure.db.base import Base
from capstone_catalog.backend.app.infrastructure.db.models import project  # noqa: F401  (registers tables)


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
