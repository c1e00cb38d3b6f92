from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from capstone_catalog.backend.app.domain.projects.errors import ProjectBusy


class InFlightGuard:
    """
    Rejects a second operation on the same project while one is still running.

    All callers share one event loop, so a plain set is enough.
    """

    def __init__(self) -> None:
        self._active: set[str] = set()

    def is_busy(self, project_id: str) -> bool:
        return project_id in self._active

    @asynccontextmanager
    async def hold(self, project_id: str) -> AsyncIterator[None]:
        if project_id in self._active:
            raise ProjectBusy(project_id)
        self._active.add(project_id)
        try:
            yield
        finally:
            self._active.discard(project_id)
