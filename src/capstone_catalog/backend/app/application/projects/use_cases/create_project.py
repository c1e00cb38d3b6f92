from __future__ import annotations

import logging
from typing import Optional

from capstone_catalog.backend.app.application.projects.attachments import upload_attachment
from capstone_catalog.backend.app.application.projects.dto import CreateProjectInputDTO, ProjectDTO
from capstone_catalog.backend.app.application.projects.interfaces import ProjectFeed
from capstone_catalog.backend.app.application.projects.mappers import project_domain_to_output_dto
from capstone_catalog.backend.app.application.projects.validation import (
    MAX_ATTACHMENT_BYTES,
    validate_submission,
)
from capstone_catalog.backend.app.domain.common import utcnow
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork
from capstone_catalog.backend.app.domain.files.interfaces import BlobStorage
from capstone_catalog.backend.app.domain.projects import ProjectFile
from capstone_catalog.backend.app.domain.projects.errors import FailedToCreateProject

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            blob_storage: BlobStorage,
            feed: ProjectFeed,
            *,
            max_attachment_bytes: int = MAX_ATTACHMENT_BYTES,
    ) -> None:
        self._uow = uow
        self._blob_storage = blob_storage
        self._feed = feed
        self._max_attachment_bytes = max_attachment_bytes

    async def execute(self, dto: CreateProjectInputDTO) -> ProjectDTO:
        details = validate_submission(
            dto.form,
            dto.attachment,
            max_attachment_bytes=self._max_attachment_bytes,
        )

        # 1) Upload the file first; on failure no record is written
        file: Optional[ProjectFile] = None
        if dto.attachment is not None:
            file = await upload_attachment(self._blob_storage, dto.attachment)

        # 2) Persist the record (commit handled by UoW)
        try:
            async with self._uow:
                saved = await self._uow.project_repo.add(
                    details=details,
                    file=file,
                    created_at=utcnow(),
                )
        except Exception as e:
            if file is not None:
                await self._discard_upload(file.file_name)
            raise FailedToCreateProject(details.name) from e

        logger.info("Created project %s (%s)", saved.id, details.name)
        await self._feed.publish()
        return project_domain_to_output_dto(saved)

    async def _discard_upload(self, key: str) -> None:
        try:
            await self._blob_storage.delete(key=key)
        except Exception:
            logger.warning("Record write failed and uploaded file %s could not be removed", key, exc_info=True)
