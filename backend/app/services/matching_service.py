"""Matching service: loads projections from storage and ranks candidates"""

from typing import List, Optional
from uuid import UUID

from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.models.person import Person
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import NotFoundException
from matching.engine import MatchEngine, MatchResult
from matching.profiles import CandidateProfile, RequirementSet

logger = get_logger(__name__)


class MatchingService:
    """Service for matching personnel to project requirements"""

    def __init__(
        self,
        project_repository: ProjectRepository,
        person_repository: PersonRepository,
        match_engine: Optional[MatchEngine] = None
    ):
        """
        Initialize matching service

        Args:
            project_repository: Project repository
            person_repository: Person repository
            match_engine: Optional match engine (creates default if None)
        """
        self.project_repo = project_repository
        self.person_repo = person_repository
        self.match_engine = match_engine or MatchEngine()

    async def load_requirements(self, project_id: UUID) -> RequirementSet:
        rows = await self.project_repo.get_requirement_rows(project_id)
        return RequirementSet.from_rows(project_id, rows)

    async def load_population(self) -> List[CandidateProfile]:
        """Build a profile for every person, in population order"""
        personnel = await self.person_repo.list_population()
        return [self.to_profile(person) for person in personnel]

    @staticmethod
    def to_profile(person: Person) -> CandidateProfile:
        return CandidateProfile.build(
            id=person.id,
            name=person.name,
            role=person.role,
            email=person.email,
            skill_rows=[(ps.skill_id, ps.proficiency_level) for ps in person.skills]
        )

    async def match_project(self, project_id: UUID) -> List[MatchResult]:
        """
        Find every person who meets all of a project's requirements

        Args:
            project_id: Project UUID

        Returns:
            Ranked match results; empty when the project has no requirements

        Raises:
            NotFoundException: If the project does not exist
        """
        logger.info(f"Matching personnel for project {project_id}")

        if not await self.project_repo.exists(project_id):
            raise NotFoundException(f"Project not found: {project_id}")

        requirements = await self.load_requirements(project_id)
        if requirements.is_empty():
            return []

        population = await self.load_population()
        return self.match_engine.match(requirements, population)
