from __future__ import annotations

from typing import Optional

from .dto import AttachmentInputDTO, ProjectDTO, ProjectFileDTO, ProjectFormDTO
from capstone_catalog.backend.app.domain.files import StoredBlob, shorten_filename
from capstone_catalog.backend.app.domain.projects import Project, ProjectDetails, ProjectFile

# well inside the String(512) display name column
MAX_ORIGINAL_NAME_CHARS = 255


def project_file_domain_to_dto(f: Optional[ProjectFile]) -> Optional[ProjectFileDTO]:
    if f is None:
        return None
    return ProjectFileDTO(
        name=f.name,
        size=f.size,
        download_url=f.download_url,
        file_name=f.file_name,
    )


def project_domain_to_output_dto(project: Project) -> ProjectDTO:
    d = project.details
    return ProjectDTO(
        id=project.id,
        name=d.name,
        description=d.description,
        student_name=d.student_name,
        department=d.department,
        guide=d.guide,
        domain=d.domain,
        passout_year=d.passout_year,
        created_at=project.created_at,
        updated_at=project.updated_at,
        file=project_file_domain_to_dto(project.file),
    )


def project_form_dto_to_details(form: ProjectFormDTO) -> ProjectDetails:
    # raises ValidationError listing every blank field
    return ProjectDetails(
        name=form.name,
        description=form.description,
        student_name=form.student_name,
        department=form.department,
        guide=form.guide,
        domain=form.domain,
        passout_year=form.passout_year,
    )


def build_project_file(attachment: AttachmentInputDTO, stored: StoredBlob) -> ProjectFile:
    return ProjectFile(
        name=shorten_filename(attachment.filename, MAX_ORIGINAL_NAME_CHARS),
        size=attachment.size_bytes,
        download_url=stored.download_url,
        file_name=stored.key,
    )
