"""Personnel service for business logic operations"""

from typing import Any, List, Optional
from uuid import UUID

from backend.app.repositories.person_repository import PersonRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.models.person import Person, ExperienceLevel
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import (
    ConflictException,
    MissingFieldException,
    NotFoundException,
)
from matching.proficiency import ProficiencyScale

logger = get_logger(__name__)


class PersonService:
    """Service for personnel records and their skills"""

    def __init__(self, person_repository: PersonRepository, skill_repository: SkillRepository):
        """
        Initialize person service

        Args:
            person_repository: Person repository
            skill_repository: Skill repository
        """
        self.person_repo = person_repository
        self.skill_repo = skill_repository

    async def create_person(
        self,
        name: Optional[str],
        email: Optional[str],
        role: Optional[str] = None,
        experience_level: Optional[ExperienceLevel] = None
    ) -> Person:
        """
        Create a person

        Args:
            name: Full name
            email: Unique contact email
            role: Job title
            experience_level: Experience tier, Junior when omitted

        Returns:
            Created person

        Raises:
            MissingFieldException: If name or email is absent
            ConflictException: If the email is already registered
        """
        self._require_identity(name, email)
        clean_email = email.strip().lower()

        if await self.person_repo.get_by_email(clean_email):
            raise ConflictException("Email already registered", details={"email": clean_email})

        logger.info(f"Creating person: {name.strip()}")
        return await self.person_repo.create({
            'name': name.strip(),
            'email': clean_email,
            'role': role.strip() if role and role.strip() else None,
            'experience_level': experience_level or ExperienceLevel.JUNIOR,
        })

    async def get_person(self, person_id: UUID) -> Person:
        person = await self.person_repo.get_by_id(person_id)
        if not person:
            raise NotFoundException(f"Person not found: {person_id}")
        return person

    async def list_personnel(self) -> List[Person]:
        return await self.person_repo.list_all()

    async def update_person(
        self,
        person_id: UUID,
        name: Optional[str],
        email: Optional[str],
        role: Optional[str] = None,
        experience_level: Optional[ExperienceLevel] = None
    ) -> Person:
        """
        Overwrite a person's details

        Raises:
            MissingFieldException: If name or email is absent
            NotFoundException: If the person does not exist
            ConflictException: If the email belongs to someone else
        """
        self._require_identity(name, email)
        clean_email = email.strip().lower()

        owner = await self.person_repo.get_by_email(clean_email)
        if owner and owner.id != person_id:
            raise ConflictException("Email already registered", details={"email": clean_email})

        updates = {
            'name': name.strip(),
            'email': clean_email,
            'role': role.strip() if role and role.strip() else None,
        }
        if experience_level is not None:
            updates['experience_level'] = experience_level

        person = await self.person_repo.update(person_id, updates)
        if not person:
            raise NotFoundException(f"Person not found: {person_id}")
        return person

    async def delete_person(self, person_id: UUID) -> bool:
        return await self.person_repo.delete(person_id)

    async def assign_skill(self, person_id: UUID, skill_id: UUID, proficiency_level: Any) -> Person:
        """
        Record a person's level in a skill, replacing any previous level

        Args:
            person_id: Person UUID
            skill_id: Skill UUID
            proficiency_level: Attained level

        Returns:
            The person with refreshed skills

        Raises:
            NotFoundException: If the person or skill does not exist
            InvalidLevelException: If the level is not on the proficiency scale
        """
        level = ProficiencyScale.parse(proficiency_level)

        if not await self.person_repo.get_by_id(person_id):
            raise NotFoundException(f"Person not found: {person_id}")
        if not await self.skill_repo.get_by_id(skill_id):
            raise NotFoundException(f"Skill not found: {skill_id}")

        await self.person_repo.upsert_skill(person_id, skill_id, level)
        return await self.person_repo.get_by_id(person_id)

    @staticmethod
    def _require_identity(name: Optional[str], email: Optional[str]) -> None:
        missing = []
        if not name or not name.strip():
            missing.append("name")
        if not email or not email.strip():
            missing.append("email")
        if missing:
            raise MissingFieldException(missing)
