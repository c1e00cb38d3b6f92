import pytest

from capstone_catalog.backend.app.application.projects.dto import (
    AttachmentInputDTO,
    ProjectDTO,
    ProjectFormDTO,
)
from capstone_catalog.backend.app.application.projects.mappers import project_domain_to_output_dto
from capstone_catalog.backend.app.infrastructure.projects.feed import ProjectChangeFeed
from tests.unit.fakes.blob_storage import FakeBlobStorage
from tests.unit.fakes.project_repo import FakeProjectRepository
from tests.unit.fakes.uow import FakeUnitOfWork


@pytest.fixture
def journal() -> list[tuple[str, str]]:
    # shared between the fake stores so tests can assert cross-store ordering
    return []


@pytest.fixture
def project_repo(journal) -> FakeProjectRepository:
    return FakeProjectRepository(journal)


@pytest.fixture
def uow(project_repo) -> FakeUnitOfWork:
    return FakeUnitOfWork(project_repo)


@pytest.fixture
def blob_storage(journal) -> FakeBlobStorage:
    return FakeBlobStorage(journal)


@pytest.fixture
def feed(project_repo) -> ProjectChangeFeed[ProjectDTO]:
    async def load_snapshot() -> list[ProjectDTO]:
        return [project_domain_to_output_dto(p) for p in await project_repo.list_ordered()]

    return ProjectChangeFeed(load_snapshot)


@pytest.fixture
def form() -> ProjectFormDTO:
    return ProjectFormDTO(
        name="Smart Irrigation",
        description="Soil moisture driven irrigation controller",
        student_name="Asha Rao",
        department="ECE",
        guide="Dr. Menon",
        domain="IoT",
        passout_year="2024",
    )


@pytest.fixture
def attachment() -> AttachmentInputDTO:
    return AttachmentInputDTO(
        filename="report.pdf",
        content=b"%PDF-1.4 capstone report",
        content_type="application/pdf",
    )
