from __future__ import annotations

import logging
from typing import Optional

from .dto import AttachmentInputDTO, OrphanedBlobDTO
from .mappers import build_project_file
from capstone_catalog.backend.app.domain.files import generate_storage_key
from capstone_catalog.backend.app.domain.files.errors import UploadError
from capstone_catalog.backend.app.domain.files.interfaces import BlobStorage
from capstone_catalog.backend.app.domain.projects import ProjectFile
from capstone_catalog.backend.app.domain.projects.errors import OrphanCleanupError

logger = logging.getLogger(__name__)


async def upload_attachment(storage: BlobStorage, attachment: AttachmentInputDTO) -> ProjectFile:
    key = generate_storage_key(attachment.filename)
    try:
        stored = await storage.upload(
            key=key,
            content=attachment.content,
            content_type=attachment.content_type,
        )
    except Exception as e:
        # nothing was written to the record store yet
        raise UploadError(attachment.filename) from e
    logger.info("Uploaded %s as %s (%d bytes)", attachment.filename, key, attachment.size_bytes)
    return build_project_file(attachment, stored)


async def remove_blob(storage: BlobStorage, key: str) -> Optional[OrphanedBlobDTO]:
    """
    Delete a blob no record references any more.

    Failure is not propagated: the record write already succeeded, so the blob is
    reported as orphaned instead.
    """
    try:
        await storage.delete(key=key)
    except Exception as e:
        err = OrphanCleanupError(key)
        logger.warning("%s: %s", err, e)
        return OrphanedBlobDTO(file_name=key, detail=str(err))
    logger.info("Deleted stored file %s", key)
    return None
