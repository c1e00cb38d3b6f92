from types import TracebackType
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from capstone_catalog.backend.app.infrastructure.projects.repositories import SqlAlchemyProjectRepository


class SqlAlchemyUnitOfWork:
    """
    One transaction per `async with` block over a request-scoped session.

    A use case may enter the same unit of work several times (update reads the current
    record in one transaction and writes in the next); each block ends in its own
    commit or rollback.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self.project_repo = SqlAlchemyProjectRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None:
        if exc is None:
            await self.commit()
            return
        await self.rollback()
