"""Personnel repository for database operations"""

from typing import List, Optional, Dict, Any
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.app.models.person import Person, PersonSkill, ExperienceLevel
from backend.app.models.skill import Skill, ProficiencyLevel
from backend.app.core.database import storage_operation
from backend.app.core.logging import get_logger
from matching.proficiency import ProficiencyScale

logger = get_logger(__name__)


class PersonRepository:
    """Repository for personnel database operations"""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository

        Args:
            session: Database session
        """
        self.session = session

    def _with_skills(self):
        return selectinload(Person.skills).selectinload(PersonSkill.skill)

    @storage_operation("create person")
    async def create(self, person_data: Dict[str, Any]) -> Person:
        """
        Create a new person

        Args:
            person_data: Dictionary with person data

        Returns:
            Created person with skills loaded
        """
        person = Person(**person_data)
        self.session.add(person)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Created person: {person.id}")
        return await self.get_by_id(person.id)

    @storage_operation("get person")
    async def get_by_id(self, person_id: UUID) -> Optional[Person]:
        """
        Get person by ID with skills loaded

        Args:
            person_id: Person UUID

        Returns:
            Person if found, None otherwise
        """
        stmt = (
            select(Person)
            .where(Person.id == person_id)
            .options(self._with_skills())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        person = result.scalar_one_or_none()

        if person:
            logger.debug(f"Found person: {person_id}")
        else:
            logger.debug(f"Person not found: {person_id}")

        return person

    @storage_operation("get person by email")
    async def get_by_email(self, email: str) -> Optional[Person]:
        result = await self.session.execute(select(Person).where(Person.email == email))
        return result.scalar_one_or_none()

    @storage_operation("list personnel")
    async def list_all(self) -> List[Person]:
        """List all personnel with skills, newest first"""
        stmt = (
            select(Person)
            .options(self._with_skills())
            .order_by(Person.created_at.desc(), Person.name.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        personnel = list(result.scalars().all())

        logger.debug(f"Listed {len(personnel)} personnel")
        return personnel

    @storage_operation("load candidate population")
    async def list_population(self) -> List[Person]:
        """
        Load every person with their skills in population order

        Population order is creation time ascending, then id, and is the
        tie-break order used when ranking matches.
        """
        stmt = (
            select(Person)
            .options(selectinload(Person.skills))
            .order_by(Person.created_at.asc(), Person.id.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @storage_operation("update person")
    async def update(self, person_id: UUID, update_data: Dict[str, Any]) -> Optional[Person]:
        """
        Update person

        Args:
            person_id: Person UUID
            update_data: Dictionary with fields to update

        Returns:
            Updated person if found, None otherwise
        """
        person = await self.get_by_id(person_id)
        if not person:
            return None

        for key, value in update_data.items():
            if hasattr(person, key):
                setattr(person, key, value)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Updated person: {person_id}")
        return await self.get_by_id(person_id)

    @storage_operation("delete person")
    async def delete(self, person_id: UUID) -> bool:
        """
        Delete person; skills and assignments cascade

        Returns:
            True if deleted, False if not found
        """
        person = await self.get_by_id(person_id)
        if not person:
            return False

        try:
            await self.session.delete(person)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Deleted person: {person_id}")
        return True

    @storage_operation("assign skill")
    async def upsert_skill(
        self,
        person_id: UUID,
        skill_id: UUID,
        level: ProficiencyLevel
    ) -> PersonSkill:
        """
        Set a person's level in a skill, overwriting any existing level

        Args:
            person_id: Person UUID
            skill_id: Skill UUID
            level: Attained proficiency level

        Returns:
            The stored person skill
        """
        result = await self.session.execute(
            select(PersonSkill).where(
                PersonSkill.person_id == person_id,
                PersonSkill.skill_id == skill_id
            )
        )
        person_skill = result.scalar_one_or_none()

        if person_skill:
            person_skill.proficiency_level = level
        else:
            person_skill = PersonSkill(person_id=person_id, skill_id=skill_id, proficiency_level=level)
            self.session.add(person_skill)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(person_skill)

        logger.info(f"Set skill {skill_id} to {level.value} for person {person_id}")
        return person_skill

    @storage_operation("search personnel")
    async def search(
        self,
        experience_level: Optional[ExperienceLevel] = None,
        skill: Optional[str] = None,
        min_proficiency: Optional[ProficiencyLevel] = None
    ) -> List[Person]:
        """
        Search personnel by experience tier and skill

        Args:
            experience_level: Exact experience tier
            skill: Case-insensitive substring of a skill name
            min_proficiency: Lowest acceptable level for the matched skill;
                ignored unless ``skill`` is given

        Returns:
            Matching personnel with skills loaded, ordered by name
        """
        stmt = select(Person).options(self._with_skills())

        if experience_level:
            stmt = stmt.where(Person.experience_level == experience_level)

        if skill:
            skill_holders = (
                select(PersonSkill.person_id)
                .join(Skill, Skill.id == PersonSkill.skill_id)
                .where(Skill.name.ilike(f"%{skill}%"))
            )
            if min_proficiency:
                skill_holders = skill_holders.where(
                    PersonSkill.proficiency_level.in_(
                        ProficiencyScale.levels_at_or_above(min_proficiency)
                    )
                )
            stmt = stmt.where(Person.id.in_(skill_holders))

        stmt = stmt.order_by(Person.name.asc(), Person.created_at.asc()).execution_options(
            populate_existing=True
        )

        result = await self.session.execute(stmt)
        personnel = list(result.scalars().all())

        logger.info(f"Search returned {len(personnel)} personnel")
        return personnel

    @storage_operation("count personnel")
    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Person))
        return result.scalar() or 0
