from typing import Optional

from capstone_catalog.backend.app.domain.common import ensure_utc
from capstone_catalog.backend.app.domain.projects import Project, ProjectDetails, ProjectFile
from capstone_catalog.backend.app.infrastructure.db.models.project import ProjectModel


def project_file_model_to_domain(m: ProjectModel) -> Optional[ProjectFile]:
    if m.file_name is None:
        return None
    return ProjectFile(
        name=m.file_original_name or m.file_name,
        size=m.file_size or 0,
        download_url=m.file_download_url or "",
        file_name=m.file_name,
    )


def project_model_to_domain(m: ProjectModel) -> Project:
    return Project(
        id=m.id,
        details=ProjectDetails(
            name=m.name,
            description=m.description,
            student_name=m.student_name,
            department=m.department,
            guide=m.guide,
            domain=m.domain,
            passout_year=m.passout_year,
        ),
        file=project_file_model_to_domain(m),
        created_at=ensure_utc(m.created_at),
        updated_at=ensure_utc(m.updated_at),
    )


def project_details_to_columns(d: ProjectDetails) -> dict:
    return {
        "name": d.name,
        "description": d.description,
        "student_name": d.student_name,
        "department": d.department,
        "guide": d.guide,
        "domain": d.domain,
        "passout_year": d.passout_year,
    }


def project_file_to_columns(f: Optional[ProjectFile]) -> dict:
    if f is None:
        return {
            "file_name": None,
            "file_original_name": None,
            "file_size": None,
            "file_download_url": None,
        }
    return {
        "file_name": f.file_name,
        "file_original_name": f.name,
        "file_size": f.size,
        "file_download_url": f.download_url,
    }
