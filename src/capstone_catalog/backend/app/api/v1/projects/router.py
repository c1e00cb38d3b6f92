from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from capstone_catalog.backend.app.api.v1.projects.deps import (
    get_create_project_use_case,
    get_delete_project_use_case,
    get_get_project_use_case,
    get_list_projects_use_case,
    get_update_project_use_case,
)
from capstone_catalog.backend.app.api.v1.projects.mappers import (
    get_attachment_input_dto,
    get_project_form_dto,
)
from capstone_catalog.backend.app.api.v1.projects.schemas import (
    DeleteProjectResponse,
    ErrorResponse,
    ListProjectsResponse,
    ProjectResponse,
    UpdateProjectResponse,
)
from capstone_catalog.backend.app.application.projects.dto import (
    CreateProjectInputDTO,
    DeleteProjectInputDTO,
    GetProjectInputDTO,
    ListProjectsInputDTO,
    ProjectFormDTO,
    UpdateProjectInputDTO,
)
from capstone_catalog.backend.app.application.projects.use_cases import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)

project_form_dep = Annotated[ProjectFormDTO, Depends(get_project_form_dto)]
create_project_dep = Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
update_project_dep = Annotated[UpdateProjectUseCase, Depends(get_update_project_use_case)]
delete_project_dep = Annotated[DeleteProjectUseCase, Depends(get_delete_project_use_case)]
get_project_dep = Annotated[GetProjectUseCase, Depends(get_get_project_use_case)]
list_projects_dep = Annotated[ListProjectsUseCase, Depends(get_list_projects_use_case)]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
        use_case: create_project_dep,
        form: project_form_dep,
        file: Optional[UploadFile] = File(None),
):
    attachment = await get_attachment_input_dto(file)
    project_dto = await use_case.execute(CreateProjectInputDTO(form=form, attachment=attachment))
    return ProjectResponse.model_validate(project_dto)


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
        use_case: list_projects_dep,
        search: str = "",
        domain: str = "",
        passout_year: str = "",
):
    catalog = await use_case.execute(
        ListProjectsInputDTO(search=search, domain=domain, passout_year=passout_year)
    )
    return ListProjectsResponse.model_validate(catalog)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
        use_case: get_project_dep,
        project_id: str,
):
    project_dto = await use_case.execute(GetProjectInputDTO(project_id=project_id))
    return ProjectResponse.model_validate(project_dto)


@router.put("/{project_id}", response_model=UpdateProjectResponse)
async def update_project(
        use_case: update_project_dep,
        project_id: str,
        form: project_form_dep,
        file: Optional[UploadFile] = File(None),
):
    attachment = await get_attachment_input_dto(file)
    result = await use_case.execute(
        UpdateProjectInputDTO(project_id=project_id, form=form, attachment=attachment)
    )
    return UpdateProjectResponse.model_validate(result)


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
        use_case: delete_project_dep,
        project_id: str,
):
    result = await use_case.execute(DeleteProjectInputDTO(project_id=project_id))
    return DeleteProjectResponse.model_validate(result)
