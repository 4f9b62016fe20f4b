"""Project API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.models.project import ProjectStatus
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.services.project_service import ProjectService
from backend.app.schemas.project import ProjectCreateRequest, ProjectResponse, ProjectStatusRequest
from backend.app.schemas.common import MessageResponse

router = APIRouter()


async def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    """Dependency to get project service"""
    return ProjectService(ProjectRepository(db), SkillRepository(db))


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreateRequest,
    project_service: ProjectService = Depends(get_project_service)
):
    """
    Create a project with its skill requirements

    **Validation:**
    - Name is required (400)
    - Every required skill must exist (400)
    - Status defaults to Planning

    The project and its requirements are stored together or not at all.
    """
    project = await project_service.create_project(
        name=project_data.name,
        description=project_data.description,
        start_date=project_data.start_date,
        end_date=project_data.end_date,
        requirements=project_data.requirement_pairs(),
        status=project_data.status
    )
    return ProjectResponse.from_project(project)


@router.get("", response_model=List[ProjectResponse])
async def list_projects(
    status: Optional[ProjectStatus] = Query(None, description="Filter by status"),
    project_service: ProjectService = Depends(get_project_service)
):
    """List projects with their requirements, newest first"""
    projects = await project_service.list_projects(status=status)
    return [ProjectResponse.from_project(project) for project in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    project_service: ProjectService = Depends(get_project_service)
):
    project = await project_service.get_project(project_id)
    return ProjectResponse.from_project(project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    project_data: ProjectCreateRequest,
    project_service: ProjectService = Depends(get_project_service)
):
    """
    Overwrite project details

    When ``requirements`` is supplied the whole set is replaced in one
    transaction; when omitted the current set is kept.
    """
    project = await project_service.update_project(
        project_id,
        name=project_data.name,
        description=project_data.description,
        start_date=project_data.start_date,
        end_date=project_data.end_date,
        requirements=project_data.requirement_pairs(),
        status=project_data.status
    )
    return ProjectResponse.from_project(project)


@router.patch("/{project_id}/status", response_model=ProjectResponse)
async def update_project_status(
    project_id: UUID,
    status_data: ProjectStatusRequest,
    project_service: ProjectService = Depends(get_project_service)
):
    project = await project_service.update_status(project_id, status_data.status)
    return ProjectResponse.from_project(project)


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: UUID,
    project_service: ProjectService = Depends(get_project_service)
):
    """Delete a project with its requirements and assignments"""
    await project_service.delete_project(project_id)
    return MessageResponse(message="Project deleted")
