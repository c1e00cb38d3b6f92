from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class ProjectFileResponse(BaseModel):
    name: str
    size: int
    download_url: str
    file_name: str

    model_config = ConfigDict(from_attributes=True)


class ProjectResponse(BaseModel):
    id: str
    name: str
    description: str
    student_name: str
    department: str
    guide: str
    domain: str
    passout_year: str
    file: Optional[ProjectFileResponse] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrphanedBlobResponse(BaseModel):
    """Returned alongside a successful write when old file cleanup failed."""
    code: Literal["orphan_cleanup_failed"] = "orphan_cleanup_failed"
    file_name: str
    detail: str

    model_config = ConfigDict(from_attributes=True)


class UpdateProjectResponse(BaseModel):
    project: ProjectResponse
    orphaned_blob: Optional[OrphanedBlobResponse] = None

    model_config = ConfigDict(from_attributes=True)


class DeleteProjectResponse(BaseModel):
    project_id: str
    orphaned_blob: Optional[OrphanedBlobResponse] = None

    model_config = ConfigDict(from_attributes=True)


class ListProjectsResponse(BaseModel):
    items: list[ProjectResponse]
    domains: list[str]
    passout_years: list[str]
    total: int
    recent: int

    model_config = ConfigDict(from_attributes=True)


class ProjectsSnapshotMessage(BaseModel):
    type: Literal["snapshot"] = "snapshot"
    items: list[ProjectResponse]


class ErrorResponse(BaseModel):
    code: str
    detail: str
    errors: dict[str, str] = {}
