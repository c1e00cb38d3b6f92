from datetime import timedelta

import pytest

from capstone_catalog.backend.app.application.projects.dto import (
    GetProjectInputDTO,
    ListProjectsInputDTO,
    ProjectFormDTO,
)
from capstone_catalog.backend.app.application.projects.mappers import project_form_dto_to_details
from capstone_catalog.backend.app.application.projects.use_cases import (
    GetProjectUseCase,
    ListProjectsUseCase,
)
from capstone_catalog.backend.app.domain.common import utcnow
from capstone_catalog.backend.app.domain.projects.errors import ProjectNotFound

pytestmark = pytest.mark.asyncio


async def _add(project_repo, *, name, domain, year, age_days=0):
    form = ProjectFormDTO(
        name=name,
        description=f"{name} description",
        student_name="Student",
        department="CSE",
        guide="Guide",
        domain=domain,
        passout_year=year,
    )
    return await project_repo.add(
        details=project_form_dto_to_details(form),
        file=None,
        created_at=utcnow() - timedelta(days=age_days),
    )


async def test_list_is_newest_first_with_facets_and_stats(uow, project_repo):
    oldest = await _add(project_repo, name="Crop Yield", domain="AI", year="2023", age_days=30)
    middle = await _add(project_repo, name="Mesh Router", domain="Networks", year="2021", age_days=3)
    newest = await _add(project_repo, name="Chatbot", domain="AI", year="2024")

    catalog = await ListProjectsUseCase(uow).execute(ListProjectsInputDTO())

    assert [p.id for p in catalog.items] == [newest.id, middle.id, oldest.id]
    assert catalog.domains == ["AI", "Networks"]
    assert catalog.passout_years == ["2021", "2023", "2024"]
    assert catalog.total == 3
    assert catalog.recent == 2


async def test_filters_narrow_items_but_not_facets(uow, project_repo):
    await _add(project_repo, name="Crop Yield", domain="Applied AI", year="2023")
    await _add(project_repo, name="Mesh Router", domain="Networks", year="2021")

    catalog = await ListProjectsUseCase(uow).execute(
        ListProjectsInputDTO(search="CROP", domain="ai", passout_year="2023")
    )

    assert [p.name for p in catalog.items] == ["Crop Yield"]
    assert catalog.total == 2
    assert catalog.domains == ["Networks", "Applied AI"]


async def test_get_project_returns_record(uow, project_repo):
    project = await _add(project_repo, name="Chatbot", domain="AI", year="2024")

    out = await GetProjectUseCase(uow).execute(GetProjectInputDTO(project_id=project.id))

    assert out.id == project.id
    assert out.name == "Chatbot"


async def test_get_missing_project_raises(uow):
    with pytest.raises(ProjectNotFound):
        await GetProjectUseCase(uow).execute(GetProjectInputDTO(project_id="nope"))
