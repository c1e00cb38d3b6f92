from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .entities import Project, ProjectFile
from .value_objects import ProjectDetails


class ProjectRepository(Protocol):
    async def add(
            self,
            *,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            created_at: datetime,
    ) -> Project:
        """The store assigns the id; updated_at starts equal to created_at."""
        ...

    async def update(
            self,
            *,
            project_id: str,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            updated_at: datetime,
    ) -> Project:
        """Full-record write. Raises ProjectNotFound for an unknown id."""
        ...

    async def delete(self, project_id: str) -> None: ...

    async def get_by_id(self, project_id: str) -> Optional[Project]: ...

    async def list_ordered(self) -> Sequence[Project]:
        """Newest first; ties keep the most recently inserted record first."""
        ...
