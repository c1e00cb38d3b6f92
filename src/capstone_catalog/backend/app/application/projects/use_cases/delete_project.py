from __future__ import annotations

import logging
from typing import Optional

from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.application.projects.attachments import remove_blob
from capstone_catalog.backend.app.application.projects.dto import (
    DeleteProjectInputDTO,
    DeleteProjectOutputDTO,
    OrphanedBlobDTO,
)
from capstone_catalog.backend.app.application.projects.interfaces import ProjectFeed
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork
from capstone_catalog.backend.app.domain.files.interfaces import BlobStorage
from capstone_catalog.backend.app.domain.projects.errors import ProjectNotFound, FailedToDeleteProject

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            blob_storage: BlobStorage,
            feed: ProjectFeed,
            guard: Optional[InFlightGuard] = None,
    ) -> None:
        self._uow = uow
        self._blob_storage = blob_storage
        self._feed = feed
        self._guard = guard or InFlightGuard()

    async def execute(self, dto: DeleteProjectInputDTO) -> DeleteProjectOutputDTO:
        async with self._guard.hold(dto.project_id):
            # the record goes first; storage cleanup never blocks removal
            try:
                async with self._uow:
                    project = await self._uow.project_repo.get_by_id(dto.project_id)
                    if not project:
                        raise ProjectNotFound(project_id=dto.project_id)
                    await self._uow.project_repo.delete(dto.project_id)
            except ProjectNotFound:
                raise
            except Exception as e:
                raise FailedToDeleteProject(dto.project_id) from e

            orphan: Optional[OrphanedBlobDTO] = None
            if project.file is not None:
                orphan = await remove_blob(self._blob_storage, project.file.file_name)

        logger.info("Deleted project %s", dto.project_id)
        await self._feed.publish()
        return DeleteProjectOutputDTO(project_id=dto.project_id, orphaned_blob=orphan)
