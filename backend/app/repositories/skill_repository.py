"""Skill repository for database operations"""

from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.models.skill import Skill
from backend.app.models.person import PersonSkill
from backend.app.core.database import storage_operation
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class SkillRepository:
    """Repository for skill catalog operations"""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository

        Args:
            session: Database session
        """
        self.session = session

    @storage_operation("create skill")
    async def create(self, skill_data: Dict[str, Any]) -> Skill:
        skill = Skill(**skill_data)
        self.session.add(skill)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(skill)

        logger.info(f"Created skill: {skill.id}")
        return skill

    @storage_operation("get skill")
    async def get_by_id(self, skill_id: UUID) -> Optional[Skill]:
        result = await self.session.execute(select(Skill).where(Skill.id == skill_id))
        return result.scalar_one_or_none()

    @storage_operation("get skill by name")
    async def get_by_name(self, name: str) -> Optional[Skill]:
        result = await self.session.execute(
            select(Skill).where(func.lower(Skill.name) == name.lower())
        )
        return result.scalar_one_or_none()

    @storage_operation("list skills")
    async def list_with_personnel_count(self) -> List[Tuple[Skill, int]]:
        """
        List all skills alphabetically with the number of people holding each

        Returns:
            List of ``(skill, personnel_count)`` tuples
        """
        stmt = (
            select(Skill, func.count(PersonSkill.person_id))
            .outerjoin(PersonSkill, PersonSkill.skill_id == Skill.id)
            .group_by(Skill.id)
            .order_by(Skill.name.asc())
        )
        result = await self.session.execute(stmt)
        return [(skill, count) for skill, count in result.all()]

    @storage_operation("find skills")
    async def get_existing_ids(self, skill_ids: List[UUID]) -> set:
        """Return the subset of ``skill_ids`` that exist"""
        if not skill_ids:
            return set()
        result = await self.session.execute(select(Skill.id).where(Skill.id.in_(skill_ids)))
        return set(result.scalars().all())

    @storage_operation("update skill")
    async def update(self, skill_id: UUID, update_data: Dict[str, Any]) -> Optional[Skill]:
        skill = await self.get_by_id(skill_id)
        if not skill:
            return None

        for key, value in update_data.items():
            if hasattr(skill, key):
                setattr(skill, key, value)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(skill)

        logger.info(f"Updated skill: {skill_id}")
        return skill

    @storage_operation("delete skill")
    async def delete(self, skill_id: UUID) -> bool:
        """
        Delete skill; person skills and project requirements cascade

        Returns:
            True if deleted, False if not found
        """
        skill = await self.get_by_id(skill_id)
        if not skill:
            return False

        try:
            await self.session.delete(skill)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Deleted skill: {skill_id}")
        return True

    @storage_operation("count skills")
    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Skill))
        return result.scalar() or 0
