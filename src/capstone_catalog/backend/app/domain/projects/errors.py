from __future__ import annotations

from typing import Mapping


class ValidationError(Exception):
    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "Invalid project submission: " + ", ".join(self.errors)
        )


class AttachmentTooLarge(ValidationError):
    def __init__(self, errors: Mapping[str, str], *, size_bytes: int, limit_bytes: int):
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        super().__init__(errors)


class ProjectNotFound(Exception):
    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project with id {project_id} not found.")


class ProjectBusy(Exception):
    def __init__(self, project_id: str):
        super().__init__(
            f"Another operation on project {project_id} is still in progress."
        )


class RecordWriteError(Exception):
    pass


class FailedToCreateProject(RecordWriteError):
    def __init__(self, project_name: str):
        super().__init__(
            f"Failed to create project with name {project_name}"
        )


class FailedToUpdateProject(RecordWriteError):
    def __init__(self, project_id: str):
        super().__init__(
            f"Failed to update project with id {project_id}"
        )


class FailedToDeleteProject(RecordWriteError):
    def __init__(self, project_id: str):
        super().__init__(
            f"Failed to delete project with id {project_id}"
        )


class OrphanCleanupError(Exception):
    def __init__(self, storage_key: str):
        self.storage_key = storage_key
        super().__init__(
            f"Project saved, but the previous file {storage_key} could not be removed from storage"
        )
