from typing import Annotated, Optional

from fastapi import Form, UploadFile

from capstone_catalog.backend.app.api.v1.projects.schemas import ProjectResponse, ProjectsSnapshotMessage
from capstone_catalog.backend.app.application.projects.dto import (
    AttachmentInputDTO,
    ProjectDTO,
    ProjectFormDTO,
)


def get_project_form_dto(
        name: Annotated[str, Form()] = "",
        description: Annotated[str, Form()] = "",
        student_name: Annotated[str, Form()] = "",
        department: Annotated[str, Form()] = "",
        guide: Annotated[str, Form()] = "",
        domain: Annotated[str, Form()] = "",
        passout_year: Annotated[str, Form()] = "",
) -> ProjectFormDTO:
    # blanks are accepted here so the use case can report every missing field at once
    return ProjectFormDTO(
        name=name,
        description=description,
        student_name=student_name,
        department=department,
        guide=guide,
        domain=domain,
        passout_year=passout_year,
    )


async def get_attachment_input_dto(file: Optional[UploadFile]) -> Optional[AttachmentInputDTO]:
    if file is None or not file.filename:
        return None
    content = await file.read()
    return AttachmentInputDTO(
        filename=file.filename,
        content=content,
        content_type=file.content_type or "application/octet-stream",
    )


def projects_dtos_to_snapshot(projects: list[ProjectDTO]) -> ProjectsSnapshotMessage:
    return ProjectsSnapshotMessage(
        items=[ProjectResponse.model_validate(p) for p in projects],
    )
