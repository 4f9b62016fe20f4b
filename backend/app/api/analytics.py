"""Dashboard analytics API endpoint"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.repositories.analytics_repository import AnalyticsRepository
from backend.app.repositories.assignment_repository import AssignmentRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.services.analytics_service import AnalyticsService
from backend.app.schemas.analytics import AnalyticsResponse

router = APIRouter()


async def get_analytics_service(db: AsyncSession = Depends(get_db)) -> AnalyticsService:
    """Dependency to get analytics service"""
    return AnalyticsService(
        AnalyticsRepository(db),
        PersonRepository(db),
        SkillRepository(db),
        ProjectRepository(db),
        AssignmentRepository(db)
    )


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    skill_category: Optional[str] = Query(None, description="Top skills category; 'All' for every category"),
    pop_filter: Optional[str] = Query(None, description="'Market Ready' to restrict the experience distribution"),
    analytics_service: AnalyticsService = Depends(get_analytics_service)
):
    """
    Dashboard summary

    **Includes:**
    - Counts of personnel, skills, projects and active projects
    - Most held skills, optionally within one category
    - Experience distribution, optionally only Market Ready personnel
      (those meeting at least one requirement of an Active project)
    - Skill categories
    - Personnel with the most skills and their active assignment counts
    """
    return await analytics_service.get_dashboard(
        skill_category=skill_category,
        pop_filter=pop_filter
    )
