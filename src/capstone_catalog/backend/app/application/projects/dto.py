from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ProjectFormDTO:
    name: str = ""
    description: str = ""
    student_name: str = ""
    department: str = ""
    guide: str = ""
    domain: str = ""
    passout_year: str = ""


@dataclass(frozen=True)
class AttachmentInputDTO:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class CreateProjectInputDTO:
    form: ProjectFormDTO
    attachment: Optional[AttachmentInputDTO] = None


@dataclass(frozen=True)
class UpdateProjectInputDTO:
    project_id: str
    form: ProjectFormDTO
    attachment: Optional[AttachmentInputDTO] = None


@dataclass(frozen=True)
class DeleteProjectInputDTO:
    project_id: str


@dataclass(frozen=True)
class GetProjectInputDTO:
    project_id: str


@dataclass(frozen=True)
class ListProjectsInputDTO:
    search: str = ""
    domain: str = ""
    passout_year: str = ""


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class ProjectFileDTO:
    name: str
    size: int
    download_url: str
    file_name: str


@dataclass(frozen=True)
class ProjectDTO:
    id: str
    name: str
    description: str
    student_name: str
    department: str
    guide: str
    domain: str
    passout_year: str
    created_at: datetime
    updated_at: datetime
    file: Optional[ProjectFileDTO] = None


@dataclass(frozen=True)
class OrphanedBlobDTO:
    file_name: str
    detail: str


@dataclass(frozen=True)
class UpdateProjectOutputDTO:
    project: ProjectDTO
    orphaned_blob: Optional[OrphanedBlobDTO] = None


@dataclass(frozen=True)
class DeleteProjectOutputDTO:
    project_id: str
    orphaned_blob: Optional[OrphanedBlobDTO] = None


@dataclass(frozen=True)
class ProjectCatalogDTO:
    items: list[ProjectDTO]
    domains: list[str] = field(default_factory=list)
    passout_years: list[str] = field(default_factory=list)
    total: int = 0
    recent: int = 0
