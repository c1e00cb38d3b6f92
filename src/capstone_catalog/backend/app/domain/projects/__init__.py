from .entities import Project, ProjectFile
from .value_objects import ProjectDetails, PASSOUT_YEARS
from .repositories import ProjectRepository

__all__ = [
    "Project",
    "ProjectFile",
    "ProjectDetails",
    "PASSOUT_YEARS",
    "ProjectRepository",
]
