"""Personnel search API endpoint"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.models.person import ExperienceLevel
from backend.app.models.skill import ProficiencyLevel
from backend.app.repositories.person_repository import PersonRepository
from backend.app.services.search_service import SearchService
from backend.app.schemas.person import PersonSearchResult

router = APIRouter()


async def get_search_service(db: AsyncSession = Depends(get_db)) -> SearchService:
    """Dependency to get search service"""
    return SearchService(PersonRepository(db))


@router.get("", response_model=List[PersonSearchResult])
async def search_personnel(
    experience_level: Optional[ExperienceLevel] = Query(None, description="Exact experience tier"),
    skill: Optional[str] = Query(None, description="Case-insensitive partial skill name"),
    min_proficiency: Optional[ProficiencyLevel] = Query(
        None, description="Minimum level in the matched skill; ignored without skill"
    ),
    search_service: SearchService = Depends(get_search_service)
):
    """
    Search personnel by experience tier and skill

    Each result carries a skills summary such as ``"React (Expert), SQL (Beginner)"``.
    """
    personnel = await search_service.search_personnel(
        experience_level=experience_level,
        skill=skill,
        min_proficiency=min_proficiency
    )
    return [PersonSearchResult.from_person(person) for person in personnel]
