from datetime import timedelta

import pytest

from capstone_catalog.backend.app.application.common.in_flight import InFlightGuard
from capstone_catalog.backend.app.application.projects.dto import (
    AttachmentInputDTO,
    ProjectFormDTO,
    UpdateProjectInputDTO,
)
from capstone_catalog.backend.app.application.projects.mappers import project_form_dto_to_details
from capstone_catalog.backend.app.application.projects.use_cases import UpdateProjectUseCase
from capstone_catalog.backend.app.domain.common import utcnow
from capstone_catalog.backend.app.domain.files.errors import UploadError
from capstone_catalog.backend.app.domain.projects import ProjectFile
from capstone_catalog.backend.app.domain.projects.errors import (
    FailedToUpdateProject,
    ProjectBusy,
    ProjectNotFound,
    ValidationError,
)
from tests.unit.fakes.feed import RecordingListener

pytestmark = pytest.mark.asyncio

OLD_KEY = "123_old.pdf"


@pytest.fixture
def new_file() -> AttachmentInputDTO:
    return AttachmentInputDTO(filename="new.pdf", content=b"new contents", content_type="application/pdf")


async def _seed(project_repo, blob_storage, form, journal, *, with_file=True, created_at=None):
    file = None
    if with_file:
        file = ProjectFile(
            name="old.pdf",
            size=3,
            download_url=f"https://files.test/{OLD_KEY}",
            file_name=OLD_KEY,
        )
        blob_storage.put(OLD_KEY)
    project = await project_repo.add(
        details=project_form_dto_to_details(form),
        file=file,
        created_at=created_at or utcnow(),
    )
    journal.clear()
    project_repo.calls.clear()
    return project


def _renamed(form: ProjectFormDTO, name: str) -> ProjectFormDTO:
    return ProjectFormDTO(**{**form.__dict__, "name": name})


async def test_replacing_file_deletes_old_blob_after_record_write(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal)

    out = await UpdateProjectUseCase(uow, blob_storage, feed).execute(
        UpdateProjectInputDTO(project_id=seeded.id, form=form, attachment=new_file)
    )

    new_key = out.project.file.file_name
    assert new_key != OLD_KEY
    assert new_key.endswith("_new.pdf")
    assert out.orphaned_blob is None
    assert journal == [
        ("blob.upload", new_key),
        ("record.update", seeded.id),
        ("blob.delete", OLD_KEY),
    ]
    assert not blob_storage.exists(OLD_KEY)
    assert blob_storage.exists(new_key)
    assert blob_storage.delete_calls == [OLD_KEY]


async def test_record_write_failure_keeps_old_blob_and_record(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal)
    project_repo.fail_on.add("update")

    with pytest.raises(FailedToUpdateProject):
        await UpdateProjectUseCase(uow, blob_storage, feed).execute(
            UpdateProjectInputDTO(project_id=seeded.id, form=_renamed(form, "Renamed"), attachment=new_file)
        )

    assert uow.rolled_back is True
    assert blob_storage.exists(OLD_KEY)
    assert blob_storage.delete_calls == []
    # the fresh upload is left behind
    assert blob_storage.count() == 2

    current = await project_repo.get_by_id(seeded.id)
    assert current.file.file_name == OLD_KEY
    assert current.details.name == form.name
    assert current.updated_at == seeded.updated_at


async def test_old_blob_cleanup_failure_is_reported_not_raised(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal)
    blob_storage.fail_delete = True

    out = await UpdateProjectUseCase(uow, blob_storage, feed).execute(
        UpdateProjectInputDTO(project_id=seeded.id, form=form, attachment=new_file)
    )

    assert out.orphaned_blob is not None
    assert out.orphaned_blob.file_name == OLD_KEY
    assert OLD_KEY in out.orphaned_blob.detail
    current = await project_repo.get_by_id(seeded.id)
    assert current.file.file_name == out.project.file.file_name


async def test_update_without_file_carries_attachment_over(
        uow, blob_storage, feed, form, project_repo, journal
):
    seeded = await _seed(project_repo, blob_storage, form, journal)

    out = await UpdateProjectUseCase(uow, blob_storage, feed).execute(
        UpdateProjectInputDTO(project_id=seeded.id, form=_renamed(form, "  Renamed  "))
    )

    assert out.project.name == "Renamed"
    assert out.project.file.file_name == OLD_KEY
    assert blob_storage.upload_calls == []
    assert blob_storage.delete_calls == []


async def test_adding_first_file_deletes_nothing(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal, with_file=False)

    out = await UpdateProjectUseCase(uow, blob_storage, feed).execute(
        UpdateProjectInputDTO(project_id=seeded.id, form=form, attachment=new_file)
    )

    assert out.project.file is not None
    assert blob_storage.delete_calls == []


async def test_updated_at_strictly_increases_and_created_at_is_kept(
        uow, blob_storage, feed, form, project_repo, journal
):
    # a record stamped ahead of the local clock still moves forward
    seeded = await _seed(
        project_repo, blob_storage, form, journal, created_at=utcnow() + timedelta(hours=1)
    )
    use_case = UpdateProjectUseCase(uow, blob_storage, feed)

    first = await use_case.execute(UpdateProjectInputDTO(project_id=seeded.id, form=form))
    second = await use_case.execute(UpdateProjectInputDTO(project_id=seeded.id, form=form))

    assert first.project.updated_at > seeded.updated_at
    assert second.project.updated_at > first.project.updated_at
    assert first.project.created_at == seeded.created_at
    assert second.project.created_at == seeded.created_at


async def test_update_rejects_blank_fields_without_store_calls(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal)

    with pytest.raises(ValidationError) as exc_info:
        await UpdateProjectUseCase(uow, blob_storage, feed).execute(
            UpdateProjectInputDTO(project_id=seeded.id, form=_renamed(form, ""), attachment=new_file)
        )

    assert exc_info.value.errors == {"name": "Project name is required"}
    assert project_repo.calls == []
    assert blob_storage.upload_calls == []


async def test_update_missing_project_uploads_nothing(uow, blob_storage, feed, form, new_file):
    with pytest.raises(ProjectNotFound):
        await UpdateProjectUseCase(uow, blob_storage, feed).execute(
            UpdateProjectInputDTO(project_id="missing", form=form, attachment=new_file)
        )

    assert blob_storage.upload_calls == []


async def test_upload_failure_leaves_record_untouched(
        uow, blob_storage, feed, form, project_repo, journal, new_file
):
    seeded = await _seed(project_repo, blob_storage, form, journal)
    blob_storage.fail_upload = True

    with pytest.raises(UploadError):
        await UpdateProjectUseCase(uow, blob_storage, feed).execute(
            UpdateProjectInputDTO(project_id=seeded.id, form=form, attachment=new_file)
        )

    assert "update" not in project_repo.calls
    assert blob_storage.exists(OLD_KEY)


async def test_second_update_while_first_in_flight_is_rejected(
        uow, blob_storage, feed, form, project_repo, journal
):
    seeded = await _seed(project_repo, blob_storage, form, journal)
    guard = InFlightGuard()

    async with guard.hold(seeded.id):
        with pytest.raises(ProjectBusy):
            await UpdateProjectUseCase(uow, blob_storage, feed, guard).execute(
                UpdateProjectInputDTO(project_id=seeded.id, form=form)
            )

    assert project_repo.calls == []
    assert not guard.is_busy(seeded.id)


async def test_update_pushes_new_snapshot(uow, blob_storage, feed, form, project_repo, journal):
    seeded = await _seed(project_repo, blob_storage, form, journal)
    listener = RecordingListener()
    await feed.subscribe(listener)

    await UpdateProjectUseCase(uow, blob_storage, feed).execute(
        UpdateProjectInputDTO(project_id=seeded.id, form=_renamed(form, "Renamed"))
    )

    assert len(listener.snapshots) == 2
    assert listener.snapshots[-1][0].name == "Renamed"
