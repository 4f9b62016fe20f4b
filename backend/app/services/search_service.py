"""Advanced personnel search"""

from typing import List, Optional

from backend.app.repositories.person_repository import PersonRepository
from backend.app.models.person import Person, ExperienceLevel
from backend.app.models.skill import ProficiencyLevel
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class SearchService:
    """Service for filtering personnel by experience tier and skill level"""

    def __init__(self, person_repository: PersonRepository):
        self.person_repo = person_repository

    async def search_personnel(
        self,
        experience_level: Optional[ExperienceLevel] = None,
        skill: Optional[str] = None,
        min_proficiency: Optional[ProficiencyLevel] = None
    ) -> List[Person]:
        """
        Search personnel

        Args:
            experience_level: Exact experience tier
            skill: Case-insensitive partial skill name
            min_proficiency: Floor for the matched skill's level; only
                applied together with ``skill``

        Returns:
            Matching personnel ordered by name
        """
        skill = skill.strip() if skill and skill.strip() else None

        if min_proficiency and not skill:
            logger.info("Ignoring minimum proficiency without a skill filter")
            min_proficiency = None

        logger.info(
            f"Searching personnel: experience={experience_level}, skill={skill}, "
            f"min_proficiency={min_proficiency}"
        )
        return await self.person_repo.search(
            experience_level=experience_level,
            skill=skill,
            min_proficiency=min_proficiency
        )
