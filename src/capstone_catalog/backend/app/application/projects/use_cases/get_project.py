from capstone_catalog.backend.app.application.projects.dto import GetProjectInputDTO, ProjectDTO
from capstone_catalog.backend.app.application.projects.mappers import project_domain_to_output_dto
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork
from capstone_catalog.backend.app.domain.projects.errors import ProjectNotFound


class GetProjectUseCase:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, dto: GetProjectInputDTO) -> ProjectDTO:
        async with self._uow:
            project = await self._uow.project_repo.get_by_id(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=dto.project_id)
            return project_domain_to_output_dto(project)
