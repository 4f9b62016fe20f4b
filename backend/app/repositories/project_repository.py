"""Project repository for database operations"""

from typing import List, Optional, Dict, Any, Tuple
from uuid import UUID
from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.app.models.project import Project, ProjectRequirement, ProjectStatus
from backend.app.models.skill import ProficiencyLevel
from backend.app.core.database import storage_operation
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class ProjectRepository:
    """Repository for project-related database operations"""

    def __init__(self, db: AsyncSession):
        """
        Initialize project repository

        Args:
            db: Database session
        """
        self.db = db

    @staticmethod
    def _build_requirements(
        project_id: UUID,
        requirements: List[Tuple[UUID, ProficiencyLevel]]
    ) -> List[ProjectRequirement]:
        return [
            ProjectRequirement(
                project_id=project_id,
                skill_id=skill_id,
                min_proficiency_level=level,
                position=position
            )
            for position, (skill_id, level) in enumerate(requirements)
        ]

    @storage_operation("create project")
    async def create(
        self,
        project_data: Dict[str, Any],
        requirements: Optional[List[Tuple[UUID, ProficiencyLevel]]] = None
    ) -> Project:
        """
        Create a project and its initial requirements in one transaction

        Args:
            project_data: Project data dictionary
            requirements: ``(skill_id, min_level)`` pairs in display order

        Returns:
            Created project with requirements loaded
        """
        try:
            project = Project(**project_data)
            self.db.add(project)
            await self.db.flush()

            if requirements:
                self.db.add_all(self._build_requirements(project.id, requirements))

            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Created project: {project.id} with {len(requirements or [])} requirements")
        return await self.get_by_id(project.id)

    @storage_operation("get project")
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """
        Get project by ID

        Args:
            project_id: Project UUID

        Returns:
            Project with requirements and their skills loaded, None if not found
        """
        stmt = (
            select(Project)
            .where(Project.id == project_id)
            .options(selectinload(Project.requirements).selectinload(ProjectRequirement.skill))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    @storage_operation("check project")
    async def exists(self, project_id: UUID) -> bool:
        result = await self.db.execute(select(Project.id).where(Project.id == project_id))
        return result.scalar_one_or_none() is not None

    @storage_operation("list projects")
    async def get_all(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        """
        Get all projects, newest first

        Args:
            status: Filter by project status

        Returns:
            List of projects with requirements loaded
        """
        stmt = select(Project).options(
            selectinload(Project.requirements).selectinload(ProjectRequirement.skill)
        )

        if status:
            stmt = stmt.where(Project.status == status)

        stmt = stmt.order_by(Project.created_at.desc(), Project.name.asc()).execution_options(
            populate_existing=True
        )

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    @storage_operation("load requirements")
    async def get_requirement_rows(self, project_id: UUID) -> List[Tuple[UUID, ProficiencyLevel]]:
        """
        Get a project's requirements as ``(skill_id, min_level)`` rows

        Args:
            project_id: Project UUID

        Returns:
            Requirement rows in display order
        """
        stmt = (
            select(ProjectRequirement.skill_id, ProjectRequirement.min_proficiency_level)
            .where(ProjectRequirement.project_id == project_id)
            .order_by(ProjectRequirement.position.asc())
        )
        result = await self.db.execute(stmt)
        return [(skill_id, level) for skill_id, level in result.all()]

    @storage_operation("update project")
    async def update(
        self,
        project_id: UUID,
        updates: Dict[str, Any],
        requirements: Optional[List[Tuple[UUID, ProficiencyLevel]]] = None
    ) -> Optional[Project]:
        """
        Update project fields and optionally replace its requirement set

        The field update, the removal of the old requirements and the insert
        of the new ones either all land or none do.

        Args:
            project_id: Project UUID
            updates: Fields to update
            requirements: Replacement requirements; None leaves them untouched

        Returns:
            Updated project if found, None otherwise
        """
        if not await self.exists(project_id):
            return None

        try:
            if updates:
                await self.db.execute(
                    update(Project).where(Project.id == project_id).values(**updates)
                )

            if requirements is not None:
                await self.db.execute(
                    delete(ProjectRequirement).where(ProjectRequirement.project_id == project_id)
                )
                self.db.add_all(self._build_requirements(project_id, requirements))

            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Updated project: {project_id}")
        return await self.get_by_id(project_id)

    @storage_operation("delete project")
    async def delete(self, project_id: UUID) -> bool:
        """
        Hard delete project; requirements and assignments cascade

        Returns:
            True if project was found and deleted, False otherwise
        """
        try:
            await self.db.execute(
                delete(ProjectRequirement).where(ProjectRequirement.project_id == project_id)
            )
            result = await self.db.execute(delete(Project).where(Project.id == project_id))
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        success = result.rowcount > 0
        if success:
            logger.info(f"Deleted project: {project_id}")
        return success

    @storage_operation("count projects")
    async def count(self, status: Optional[ProjectStatus] = None) -> int:
        stmt = select(func.count(Project.id))
        if status:
            stmt = stmt.where(Project.status == status)
        result = await self.db.execute(stmt)
        return result.scalar() or 0
