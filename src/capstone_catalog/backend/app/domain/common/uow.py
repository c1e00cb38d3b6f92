from types import TracebackType
from typing import Protocol, Optional

from capstone_catalog.backend.app.domain.projects import ProjectRepository


class UnitOfWork(Protocol):
    project_repo: ProjectRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork": ...

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None: ...
