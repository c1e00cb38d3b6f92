from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from .dto import ProjectDTO

ProjectsListener = Callable[[list[ProjectDTO]], Awaitable[None]]


class Subscription(Protocol):
    def close(self) -> None: ...


class ProjectFeed(Protocol):
    async def subscribe(self, listener: ProjectsListener) -> Subscription:
        """Deliver the current ordered list immediately, then after every change."""
        ...

    async def publish(self) -> None:
        """Called after a committed write; pushes a fresh snapshot to every listener."""
        ...
