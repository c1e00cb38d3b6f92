from typing import Annotated

from fastapi import Depends

from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.application.projects.interfaces import ProjectFeed
from capstone_catalog.backend.app.application.projects.use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from capstone_catalog.backend.app.core import Settings, get_uow
from capstone_catalog.backend.app.core.deps import (
    get_blob_storage,
    get_in_flight_guard,
    get_project_feed,
    get_settings,
)
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork
from capstone_catalog.backend.app.domain.files.interfaces import BlobStorage


async def get_create_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[BlobStorage, Depends(get_blob_storage)],
        feed: Annotated[ProjectFeed, Depends(get_project_feed)],
        settings: Annotated[Settings, Depends(get_settings)],
) -> CreateProjectUseCase:
    return CreateProjectUseCase(
        uow, storage, feed,
        max_attachment_bytes=settings.MAX_ATTACHMENT_BYTES,
    )


async def get_update_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[BlobStorage, Depends(get_blob_storage)],
        feed: Annotated[ProjectFeed, Depends(get_project_feed)],
        guard: Annotated[InFlightGuard, Depends(get_in_flight_guard)],
        settings: Annotated[Settings, Depends(get_settings)],
) -> UpdateProjectUseCase:
    return UpdateProjectUseCase(
        uow, storage, feed, guard,
        max_attachment_bytes=settings.MAX_ATTACHMENT_BYTES,
    )


async def get_delete_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
        storage: Annotated[BlobStorage, Depends(get_blob_storage)],
        feed: Annotated[ProjectFeed, Depends(get_project_feed)],
        guard: Annotated[InFlightGuard, Depends(get_in_flight_guard)],
) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(uow, storage, feed, guard)


async def get_get_project_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
) -> GetProjectUseCase:
    return GetProjectUseCase(uow)


async def get_list_projects_use_case(
        uow: Annotated[UnitOfWork, Depends(get_uow)],
) -> ListProjectsUseCase:
    return ListProjectsUseCase(uow)
