from pathlib import Path
from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.application.projects.dto import ProjectDTO
from capstone_catalog.backend.app.application.projects.mappers import project_domain_to_output_dto
from capstone_catalog.backend.app.core.config import Settings
from capstone_catalog.backend.app.domain.common.uow import UnitOfWork
from capstone_catalog.backend.app.domain.files.interfaces import BlobStorage
from capstone_catalog.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from capstone_catalog.backend.app.infrastructure.files.filesystem_storage import FilesystemBlobStorage
from capstone_catalog.backend.app.infrastructure.files.supabase_storage import SupabaseBlobStorage
from capstone_catalog.backend.app.infrastructure.projects.feed import ProjectChangeFeed
from capstone_catalog.backend.app.infrastructure.projects.repositories import SqlAlchemyProjectRepository


def build_blob_storage(settings: Settings) -> BlobStorage:
    """
    Built once at startup and closed at shutdown.
    Swap implementation here without touching use cases.
    """
    if settings.BLOB_STORAGE_BACKEND == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
            raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set for the supabase backend")
        return SupabaseBlobStorage.from_credentials(
            base_url=settings.SUPABASE_URL,
            service_key=settings.SUPABASE_SERVICE_KEY,
            bucket=settings.SUPABASE_BUCKET,
        )
    base_dir = Path(settings.FILE_STORAGE_DIR)
    base_dir.mkdir(parents=True, exist_ok=True)
    return FilesystemBlobStorage(base_dir, settings.FILES_PUBLIC_BASE_URL)


def build_project_feed(
        session_factory: async_sessionmaker[AsyncSession],
) -> ProjectChangeFeed[ProjectDTO]:
    async def load_snapshot() -> list[ProjectDTO]:
        async with session_factory() as session:
            projects = await SqlAlchemyProjectRepository(session).list_ordered()
        return [project_domain_to_output_dto(p) for p in projects]

    return ProjectChangeFeed(load_snapshot)


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.session_factory() as session:
        yield session


async def get_uow(
    session: AsyncSession = Depends(get_session),
) -> AsyncIterator[UnitOfWork]:
    # the transaction lifecycle (commit/rollback) is handled by UnitOfWork
    uow = SqlAlchemyUnitOfWork(session)
    yield uow


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_blob_storage(request: Request) -> BlobStorage:
    return request.app.state.blob_storage


def get_project_feed(request: Request) -> ProjectChangeFeed[ProjectDTO]:
    return request.app.state.project_feed


def get_in_flight_guard(request: Request) -> InFlightGuard:
    return request.app.state.in_flight_guard
