"""Project matching API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.services.matching_service import MatchingService
from backend.app.schemas.match import MatchResponse
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def get_matching_service(db: AsyncSession = Depends(get_db)) -> MatchingService:
    """Dependency to get matching service"""
    return MatchingService(ProjectRepository(db), PersonRepository(db))


@router.get("/{project_id}", response_model=List[MatchResponse])
async def match_project(
    project_id: UUID,
    matching_service: MatchingService = Depends(get_matching_service)
):
    """
    Rank personnel who meet every requirement of a project

    **Matching rules:**
    - A person must hold every required skill at or above the required level
    - Score is the total number of levels by which they exceed the requirements
    - Results are ordered by score, best first; ties keep registration order
    - A project with no requirements matches nobody

    **Errors:**
    - 404 if the project does not exist
    """
    results = await matching_service.match_project(project_id)
    logger.info(f"Returning {len(results)} matches for project {project_id}")
    return [MatchResponse.from_result(result) for result in results]
