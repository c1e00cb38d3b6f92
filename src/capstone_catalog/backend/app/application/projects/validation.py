from __future__ import annotations

from typing import Optional

from .dto import AttachmentInputDTO, ProjectFormDTO
from .mappers import project_form_dto_to_details
from capstone_catalog.backend.app.domain.projects import ProjectDetails
from capstone_catalog.backend.app.domain.projects.errors import AttachmentTooLarge, ValidationError

MAX_ATTACHMENT_BYTES = 10 * 1024 * 1024


def validate_submission(
        form: ProjectFormDTO,
        attachment: Optional[AttachmentInputDTO],
        *,
        max_attachment_bytes: int = MAX_ATTACHMENT_BYTES,
) -> ProjectDetails:
    """
    Check a create/edit submission before anything touches the network.

    Field errors and the size-limit error are reported together, one entry per field.
    """
    errors: dict[str, str] = {}
    details: Optional[ProjectDetails] = None
    try:
        details = project_form_dto_to_details(form)
    except ValidationError as e:
        errors.update(e.errors)

    if attachment is not None and attachment.size_bytes > max_attachment_bytes:
        limit_mb = max_attachment_bytes / 1024 / 1024
        errors["file"] = f"File must be at most {limit_mb:g} MB"
        raise AttachmentTooLarge(
            errors,
            size_bytes=attachment.size_bytes,
            limit_bytes=max_attachment_bytes,
        )

    if errors or details is None:
        raise ValidationError(errors)
    return details
