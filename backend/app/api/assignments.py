"""Assignment API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.repositories.assignment_repository import AssignmentRepository
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.services.assignment_service import AssignmentService
from backend.app.schemas.assignment import (
    AssignmentCreateRequest, AssignmentUpdateRequest, AssignmentResponse
)
from backend.app.schemas.common import MessageResponse

router = APIRouter()


async def get_assignment_service(db: AsyncSession = Depends(get_db)) -> AssignmentService:
    """Dependency to get assignment service"""
    return AssignmentService(
        AssignmentRepository(db),
        ProjectRepository(db),
        PersonRepository(db)
    )


@router.get("", response_model=List[AssignmentResponse])
async def list_assignments(
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    """List every assignment with project and person names, earliest start first"""
    assignments = await assignment_service.list_assignments()
    return [AssignmentResponse.from_assignment(a) for a in assignments]


@router.post("", response_model=AssignmentResponse, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment_data: AssignmentCreateRequest,
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    """
    Assign a person to a project

    **Validation:**
    - Project, person, start date and end date are required (400)
    - End date cannot precede start date (400)
    - Project and person must exist (404)
    - Overlapping assignments are allowed

    New assignments start Active.
    """
    assignment = await assignment_service.create_assignment(
        project_id=assignment_data.project_id,
        person_id=assignment_data.person_id,
        start_date=assignment_data.start_date,
        end_date=assignment_data.end_date,
        role=assignment_data.role
    )
    return AssignmentResponse.from_assignment(assignment)


@router.get("/{assignment_id}", response_model=AssignmentResponse)
async def get_assignment(
    assignment_id: UUID,
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    assignment = await assignment_service.get_assignment(assignment_id)
    return AssignmentResponse.from_assignment(assignment)


@router.put("/{assignment_id}", response_model=AssignmentResponse)
async def update_assignment(
    assignment_id: UUID,
    assignment_data: AssignmentUpdateRequest,
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    """
    Overwrite an assignment

    Start and end dates are required. Role is replaced (omit to clear it);
    status is kept when omitted.
    """
    assignment = await assignment_service.update_assignment(
        assignment_id,
        start_date=assignment_data.start_date,
        end_date=assignment_data.end_date,
        role=assignment_data.role,
        status=assignment_data.status
    )
    return AssignmentResponse.from_assignment(assignment)


@router.post("/{assignment_id}/toggle-status", response_model=AssignmentResponse)
async def toggle_assignment_status(
    assignment_id: UUID,
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    """Flip an assignment between Active and Completed"""
    assignment = await assignment_service.toggle_status(assignment_id)
    return AssignmentResponse.from_assignment(assignment)


@router.delete("/{assignment_id}", response_model=MessageResponse)
async def delete_assignment(
    assignment_id: UUID,
    assignment_service: AssignmentService = Depends(get_assignment_service)
):
    """Delete an assignment; succeeds whether or not it existed"""
    await assignment_service.delete_assignment(assignment_id)
    return MessageResponse(message="Assignment deleted")
