from __future__ import annotations

import logging
from typing import Optional

from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.application.projects.attachments import remove_blob, upload_attachment
from capstone_catalog.backend.app.application.projects.dto import (
    OrphanedBlobDTO,
    UpdateProjectInputDTO,
    UpdateProjectOutputDTO,
)
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
from capstone_catalog.backend.app.domain.projects.errors import (
    FailedToUpdateProject,
    ProjectNotFound,
)

logger = logging.getLogger(__name__)


class UpdateProjectUseCase:
    def __init__(
            self,
            uow: UnitOfWork,
            blob_storage: BlobStorage,
            feed: ProjectFeed,
            guard: Optional[InFlightGuard] = None,
            *,
            max_attachment_bytes: int = MAX_ATTACHMENT_BYTES,
    ) -> None:
        self._uow = uow
        self._blob_storage = blob_storage
        self._feed = feed
        self._guard = guard or InFlightGuard()
        self._max_attachment_bytes = max_attachment_bytes

    async def execute(self, dto: UpdateProjectInputDTO) -> UpdateProjectOutputDTO:
        """
        Full-record update.

        Ordering: upload the replacement, write the record, and only then delete the
        previous blob. A failed record write leaves the previous record and blob intact;
        the fresh upload is left behind as an orphan.
        """
        async with self._guard.hold(dto.project_id):
            details = validate_submission(
                dto.form,
                dto.attachment,
                max_attachment_bytes=self._max_attachment_bytes,
            )

            async with self._uow:
                current = await self._uow.project_repo.get_by_id(dto.project_id)
            if current is None:
                raise ProjectNotFound(project_id=dto.project_id)

            previous: Optional[ProjectFile] = current.file
            uploaded: Optional[ProjectFile] = None
            if dto.attachment is not None:
                uploaded = await upload_attachment(self._blob_storage, dto.attachment)

            try:
                async with self._uow:
                    saved = await self._uow.project_repo.update(
                        project_id=dto.project_id,
                        details=details,
                        file=uploaded or previous,
                        updated_at=current.next_updated_at(utcnow()),
                    )
            except Exception as e:
                if uploaded is not None:
                    logger.warning(
                        "Update of project %s failed; uploaded file %s is left orphaned",
                        dto.project_id,
                        uploaded.file_name,
                    )
                if isinstance(e, ProjectNotFound):
                    raise
                raise FailedToUpdateProject(dto.project_id) from e

            orphan: Optional[OrphanedBlobDTO] = None
            if (
                    uploaded is not None
                    and previous is not None
                    and previous.file_name != uploaded.file_name
            ):
                orphan = await remove_blob(self._blob_storage, previous.file_name)

        logger.info("Updated project %s", saved.id)
        await self._feed.publish()
        return UpdateProjectOutputDTO(
            project=project_domain_to_output_dto(saved),
            orphaned_blob=orphan,
        )
