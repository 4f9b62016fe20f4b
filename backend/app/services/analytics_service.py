"""Dashboard analytics service"""

from typing import Any, Dict, List, Optional

from backend.app.repositories.analytics_repository import AnalyticsRepository
from backend.app.repositories.assignment_repository import AssignmentRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.models.person import ExperienceLevel
from backend.app.models.project import ProjectStatus
from backend.app.core.config import settings
from backend.app.core.logging import get_logger
from matching.proficiency import ProficiencyScale

logger = get_logger(__name__)

ALL_CATEGORIES = "All"
MARKET_READY = "Market Ready"


class AnalyticsService:
    """Service computing the dashboard summary"""

    def __init__(
        self,
        analytics_repository: AnalyticsRepository,
        person_repository: PersonRepository,
        skill_repository: SkillRepository,
        project_repository: ProjectRepository,
        assignment_repository: AssignmentRepository,
        top_n: int = settings.ANALYTICS_TOP_N
    ):
        self.analytics_repo = analytics_repository
        self.person_repo = person_repository
        self.skill_repo = skill_repository
        self.project_repo = project_repository
        self.assignment_repo = assignment_repository
        self.top_n = top_n

    async def get_dashboard(
        self,
        skill_category: Optional[str] = None,
        pop_filter: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Build the dashboard analytics payload

        Args:
            skill_category: Restrict top skills to a category; ``"All"`` or
                None means every category
            pop_filter: ``"Market Ready"`` restricts the experience
                distribution to people qualified for an Active project

        Returns:
            Dictionary with counts, top skills, experience levels,
            categories and top personnel
        """
        category = None if not skill_category or skill_category == ALL_CATEGORIES else skill_category

        counts = {
            'personnel': await self.person_repo.count(),
            'skills': await self.skill_repo.count(),
            'projects': await self.project_repo.count(),
            'active_projects': await self.project_repo.count(status=ProjectStatus.ACTIVE),
        }

        top_skills = [
            {'name': name, 'count': count}
            for name, count in await self.analytics_repo.top_skills(self.top_n, category)
        ]

        if pop_filter == MARKET_READY:
            distribution = await self._market_ready_distribution()
        else:
            distribution = await self.analytics_repo.experience_distribution()

        experience_levels = [
            {'experience_level': level.value, 'count': distribution.get(level, 0)}
            for level in ExperienceLevel
        ]

        logger.info(f"Built dashboard analytics (category={category}, pop_filter={pop_filter})")
        return {
            'counts': counts,
            'top_skills': top_skills,
            'experience_levels': experience_levels,
            'categories': await self.analytics_repo.skill_categories(),
            'top_personnel': await self._top_personnel(),
        }

    async def _market_ready_distribution(self) -> Dict[ExperienceLevel, int]:
        """
        Count people by tier who hold at least one skill an Active project
        requires, at or above the required level
        """
        ready: Dict[Any, ExperienceLevel] = {}
        for person_id, experience_level, attained, required in (
            await self.analytics_repo.active_requirement_coverage()
        ):
            if ProficiencyScale.meets_or_exceeds(attained, required):
                ready[person_id] = experience_level

        distribution: Dict[ExperienceLevel, int] = {}
        for level in ready.values():
            distribution[level] = distribution.get(level, 0) + 1
        return distribution

    async def _top_personnel(self) -> List[Dict[str, Any]]:
        """People with the most skills, with their count of Active assignments"""
        personnel = await self.analytics_repo.personnel_with_skills()
        active = await self.assignment_repo.count_active_by_person()

        ranked = sorted(personnel, key=lambda person: len(person.skills), reverse=True)[:self.top_n]
        return [
            {
                'id': person.id,
                'name': person.name,
                'role': person.role,
                'total_skills': len(person.skills),
                'skill_names': sorted(ps.skill.name for ps in person.skills),
                'active_projects': active.get(person.id, 0),
            }
            for person in ranked
        ]
