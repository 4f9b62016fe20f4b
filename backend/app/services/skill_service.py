"""Skill catalog service"""

from typing import List, Optional, Tuple
from uuid import UUID

from backend.app.repositories.skill_repository import SkillRepository
from backend.app.models.skill import Skill
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import ConflictException, NotFoundException, ValidationException

logger = get_logger(__name__)


class SkillService:
    """Service for skill catalog business logic"""

    def __init__(self, skill_repository: SkillRepository):
        self.skill_repo = skill_repository

    async def create_skill(
        self,
        name: str,
        category: Optional[str] = None,
        description: Optional[str] = None
    ) -> Skill:
        """
        Create a catalog skill

        Raises:
            ValidationException: If the name is blank
            ConflictException: If a skill with the same name exists
        """
        clean_name = self._clean_name(name)

        if await self.skill_repo.get_by_name(clean_name):
            raise ConflictException("Skill already exists", details={"name": clean_name})

        skill = await self.skill_repo.create({
            'name': clean_name,
            'category': self._clean_optional(category),
            'description': self._clean_optional(description),
        })
        logger.info(f"Created skill {skill.name}")
        return skill

    async def list_skills(self) -> List[Tuple[Skill, int]]:
        """All skills by name with the number of people holding each"""
        return await self.skill_repo.list_with_personnel_count()

    async def get_skill(self, skill_id: UUID) -> Skill:
        skill = await self.skill_repo.get_by_id(skill_id)
        if not skill:
            raise NotFoundException(f"Skill not found: {skill_id}")
        return skill

    async def update_skill(
        self,
        skill_id: UUID,
        name: str,
        category: Optional[str] = None,
        description: Optional[str] = None
    ) -> Skill:
        """
        Rename or recategorise a skill; its identity is unchanged

        Raises:
            NotFoundException: If the skill does not exist
            ConflictException: If another skill already uses the name
        """
        clean_name = self._clean_name(name)

        existing = await self.skill_repo.get_by_name(clean_name)
        if existing and existing.id != skill_id:
            raise ConflictException("Skill already exists", details={"name": clean_name})

        skill = await self.skill_repo.update(skill_id, {
            'name': clean_name,
            'category': self._clean_optional(category),
            'description': self._clean_optional(description),
        })
        if not skill:
            raise NotFoundException(f"Skill not found: {skill_id}")
        return skill

    async def delete_skill(self, skill_id: UUID) -> bool:
        return await self.skill_repo.delete(skill_id)

    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        if not name or not name.strip():
            raise ValidationException("Skill name is required")
        return name.strip()

    @staticmethod
    def _clean_optional(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None
