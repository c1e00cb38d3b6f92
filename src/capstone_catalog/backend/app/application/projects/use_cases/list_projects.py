# capstone_catalog/backend/app/application/projects/use_cases/list_projects.py
from __future__ import annotations

from capstone_catalog.backend.app.application.projects.dto import (
    ListProjectsInputDTO,
    ProjectCatalogDTO,
)
from capstone_catalog.backend.app.application.projects.filtering import (
    count_recent,
    distinct_domains,
    distinct_passout_years,
    filter_projects,
)
from capstone_catalog.backend.app.application.projects.mappers import project_domain_to_output_dto
from capstone_catalog.backend.app.domain.common import utcnow
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork


class ListProjectsUseCase:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, dto: ListProjectsInputDTO) -> ProjectCatalogDTO:
        async with self._uow:
            projects = await self._uow.project_repo.list_ordered()
        everything = [project_domain_to_output_dto(p) for p in projects]
        # facets and stats describe the whole catalog, not the filtered view
        return ProjectCatalogDTO(
            items=filter_projects(everything, dto),
            domains=distinct_domains(everything),
            passout_years=distinct_passout_years(everything),
            total=len(everything),
            recent=count_recent(everything, utcnow()),
        )
