# capstone_catalog/backend/app/domain/projects/entities.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from .value_objects import ProjectDetails


@dataclass(frozen=True)
class ProjectFile:
    name: str  # original filename as uploaded
    size: int
    download_url: str
    file_name: str  # storage key in the blob store


@dataclass
class Project:
    id: str
    details: ProjectDetails
    created_at: datetime
    updated_at: datetime
    file: Optional[ProjectFile] = None

    def next_updated_at(self, now: datetime) -> datetime:
        """
        Timestamp for the next revision. Never equal to or earlier than the current one,
        even if the clock did not advance between two writes.
        """
        if now <= self.updated_at:
            return self.updated_at + timedelta(microseconds=1)
        return now

    def revise(
            self,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            updated_at: datetime,
    ) -> Project:
        return replace(self, details=details, file=file, updated_at=updated_at)
