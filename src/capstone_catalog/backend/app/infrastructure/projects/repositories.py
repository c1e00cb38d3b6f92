from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import delete as sa_delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from capstone_catalog.backend.app.domain.projects import Project, ProjectDetails, ProjectFile
from capstone_catalog.backend.app.domain.projects.errors import ProjectNotFound
from capstone_catalog.backend.app.infrastructure.db.models.project import ProjectModel
from capstone_catalog.backend.app.infrastructure.projects.mappers import (
    project_details_to_columns,
    project_file_to_columns,
    project_model_to_domain,
)


class SqlAlchemyProjectRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
            self,
            *,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            created_at: datetime,
    ) -> Project:
        pm = ProjectModel(
            **project_details_to_columns(details),
            **project_file_to_columns(file),
            created_at=created_at,
            updated_at=created_at,
        )
        self._session.add(pm)
        await self._session.flush()
        await self._session.refresh(pm)
        return project_model_to_domain(pm)

    async def update(
            self,
            *,
            project_id: str,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            updated_at: datetime,
    ) -> Project:
        await self._session.execute(
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(
                **project_details_to_columns(details),
                **project_file_to_columns(file),
                updated_at=updated_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        await self._session.flush()

        project = await self.get_by_id(project_id)
        if project is None:
            raise ProjectNotFound(project_id=project_id)
        return project

    async def delete(self, project_id: str) -> None:
        await self._session.execute(
            sa_delete(ProjectModel).where(ProjectModel.id == project_id)
        )
        await self._session.flush()

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.id == project_id)
            .execution_options(populate_existing=True)
        )
        res = await self._session.execute(stmt)
        pm = res.scalar_one_or_none()
        if pm is None:
            return None
        return project_model_to_domain(pm)

    async def list_ordered(self) -> Sequence[Project]:
        stmt = select(ProjectModel).order_by(
            ProjectModel.created_at.desc(),
            ProjectModel.seq.desc(),
        )
        res = await self._session.execute(stmt)
        return [project_model_to_domain(pm) for pm in res.scalars().all()]
