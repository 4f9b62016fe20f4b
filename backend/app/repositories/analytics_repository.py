"""Read-only aggregate queries backing the dashboard"""

from typing import Dict, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.app.models.person import Person, PersonSkill, ExperienceLevel
from backend.app.models.project import Project, ProjectRequirement, ProjectStatus
from backend.app.models.skill import Skill, ProficiencyLevel
from backend.app.core.database import storage_operation


class AnalyticsRepository:
    """Repository for dashboard aggregate queries"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @storage_operation("top skills")
    async def top_skills(self, limit: int, category: Optional[str] = None) -> List[Tuple[str, int]]:
        """
        Skills held by the most people

        Args:
            limit: Number of skills to return
            category: Restrict to one skill category

        Returns:
            ``(skill_name, holder_count)`` pairs, most held first
        """
        holders = func.count(PersonSkill.person_id).label("holders")
        stmt = (
            select(Skill.name, holders)
            .join(PersonSkill, PersonSkill.skill_id == Skill.id)
        )
        if category:
            stmt = stmt.where(Skill.category == category)

        stmt = stmt.group_by(Skill.id, Skill.name).order_by(holders.desc(), Skill.name.asc()).limit(limit)

        result = await self.session.execute(stmt)
        return [(name, count) for name, count in result.all()]

    @storage_operation("experience distribution")
    async def experience_distribution(self) -> Dict[ExperienceLevel, int]:
        stmt = (
            select(Person.experience_level, func.count(Person.id))
            .group_by(Person.experience_level)
        )
        result = await self.session.execute(stmt)
        return {level: count for level, count in result.all()}

    @storage_operation("active requirement coverage")
    async def active_requirement_coverage(
        self
    ) -> List[Tuple[UUID, ExperienceLevel, ProficiencyLevel, ProficiencyLevel]]:
        """
        Pair every person skill with each Active project requirement on the same skill

        Returns:
            ``(person_id, experience_level, attained_level, required_level)`` rows
        """
        stmt = (
            select(
                Person.id,
                Person.experience_level,
                PersonSkill.proficiency_level,
                ProjectRequirement.min_proficiency_level,
            )
            .join(PersonSkill, PersonSkill.person_id == Person.id)
            .join(ProjectRequirement, ProjectRequirement.skill_id == PersonSkill.skill_id)
            .join(Project, Project.id == ProjectRequirement.project_id)
            .where(Project.status == ProjectStatus.ACTIVE)
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    @storage_operation("skill categories")
    async def skill_categories(self) -> List[str]:
        stmt = (
            select(Skill.category)
            .where(Skill.category.is_not(None))
            .distinct()
            .order_by(Skill.category.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    @storage_operation("personnel with skills")
    async def personnel_with_skills(self) -> List[Person]:
        stmt = (
            select(Person)
            .options(selectinload(Person.skills).selectinload(PersonSkill.skill))
            .order_by(Person.name.asc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
