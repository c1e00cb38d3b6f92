# capstone_catalog/backend/app/application/projects/use_cases/__init__.py
from .create_project import CreateProjectUseCase
from .update_project import UpdateProjectUseCase
from .delete_project import DeleteProjectUseCase
from .get_project import GetProjectUseCase
from .list_projects import ListProjectsUseCase

__all__ = [
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
]
