from __future__ import annotations

import itertools
from collections.abc import Sequence
from copy import deepcopy
from datetime import datetime
from typing import Optional
from uuid import uuid4

from capstone_catalog.backend.app.domain.projects import Project, ProjectDetails, ProjectFile
from capstone_catalog.backend.app.domain.projects.errors import ProjectNotFound


class FakeProjectRepository:
    """
    In-memory fake for ProjectRepository.

    - assigns ids like the real store does
    - keeps insertion order for created_at ties
    - `fail_on` makes the named command raise, to simulate record store outages
    - every command is appended to `journal` so tests can assert ordering
    """

    def __init__(self, journal: Optional[list[tuple[str, str]]] = None) -> None:
        self._projects: dict[str, Project] = {}
        self._seq: dict[str, int] = {}
        self._counter = itertools.count(1)
        self.journal = journal if journal is not None else []
        self.fail_on: set[str] = set()
        self.calls: list[str] = []

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if op in self.fail_on:
            raise RuntimeError(f"record store unavailable ({op})")

    # ---------- Commands ----------

    async def add(
            self,
            *,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            created_at: datetime,
    ) -> Project:
        self._check("add")
        project = Project(
            id=uuid4().hex,
            details=details,
            file=file,
            created_at=created_at,
            updated_at=created_at,
        )
        self._projects[project.id] = deepcopy(project)
        self._seq[project.id] = next(self._counter)
        self.journal.append(("record.add", project.id))
        return deepcopy(project)

    async def update(
            self,
            *,
            project_id: str,
            details: ProjectDetails,
            file: Optional[ProjectFile],
            updated_at: datetime,
    ) -> Project:
        self._check("update")
        current = self._projects.get(project_id)
        if current is None:
            raise ProjectNotFound(project_id=project_id)
        revised = current.revise(details=details, file=file, updated_at=updated_at)
        self._projects[project_id] = deepcopy(revised)
        self.journal.append(("record.update", project_id))
        return deepcopy(revised)

    async def delete(self, project_id: str) -> None:
        self._check("delete")
        self._projects.pop(project_id, None)
        self._seq.pop(project_id, None)
        self.journal.append(("record.delete", project_id))

    # ---------- Queries ----------

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        self._check("get_by_id")
        project = self._projects.get(project_id)
        return deepcopy(project) if project else None

    async def list_ordered(self) -> Sequence[Project]:
        self._check("list_ordered")
        ordered = sorted(
            self._projects.values(),
            key=lambda p: (p.created_at, self._seq[p.id]),
            reverse=True,
        )
        return [deepcopy(p) for p in ordered]

    # ---------- Test helpers ----------

    def _add_raw(self, project: Project) -> None:
        self._projects[project.id] = project
        self._seq[project.id] = next(self._counter)

    def _all(self) -> list[Project]:
        return list(self._projects.values())
