"""Project service for business logic operations"""

from datetime import date
from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.models.project import Project, ProjectStatus
from backend.app.models.skill import ProficiencyLevel
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import NotFoundException, ValidationException
from matching.proficiency import ProficiencyScale

logger = get_logger(__name__)


class ProjectService:
    """Service for project records and their skill requirements"""

    def __init__(self, project_repository: ProjectRepository, skill_repository: SkillRepository):
        """
        Initialize project service

        Args:
            project_repository: Project repository
            skill_repository: Skill repository
        """
        self.project_repo = project_repository
        self.skill_repo = skill_repository

    async def create_project(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        requirements: Optional[Sequence[Tuple[UUID, Any]]] = None,
        status: Optional[ProjectStatus] = None
    ) -> Project:
        """
        Create a project together with its initial requirements

        Args:
            name: Project name
            description: Free text description
            start_date: Planned start
            end_date: Planned end
            requirements: ``(skill_id, min_level)`` pairs
            status: Initial status, Planning when omitted

        Returns:
            Created project

        Raises:
            ValidationException: If the name is blank, the dates are inverted
                or a required skill does not exist
            InvalidLevelException: If a requirement level is not on the scale
        """
        if not name or not name.strip():
            raise ValidationException("Project name is required")
        self._validate_dates(start_date, end_date)
        clean_requirements = await self._prepare_requirements(requirements or [])

        logger.info(f"Creating project: {name.strip()}")
        return await self.project_repo.create(
            {
                'name': name.strip(),
                'description': description.strip() if description else None,
                'start_date': start_date,
                'end_date': end_date,
                'status': status or ProjectStatus.PLANNING,
            },
            clean_requirements
        )

    async def get_project(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if not project:
            raise NotFoundException(f"Project not found: {project_id}")
        return project

    async def list_projects(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        return await self.project_repo.get_all(status=status)

    async def update_project(
        self,
        project_id: UUID,
        name: Optional[str],
        description: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        requirements: Optional[Sequence[Tuple[UUID, Any]]] = None,
        status: Optional[ProjectStatus] = None
    ) -> Project:
        """
        Overwrite project details, replacing requirements when given

        ``requirements=None`` leaves the current set untouched; an empty list
        clears it.

        Raises:
            NotFoundException: If the project does not exist
            ValidationException: If the name is blank, the dates are inverted
                or a required skill does not exist
        """
        if not name or not name.strip():
            raise ValidationException("Project name is required")
        self._validate_dates(start_date, end_date)

        clean_requirements = None
        if requirements is not None:
            clean_requirements = await self._prepare_requirements(requirements)

        updates = {
            'name': name.strip(),
            'description': description.strip() if description else None,
            'start_date': start_date,
            'end_date': end_date,
        }
        if status is not None:
            updates['status'] = status

        project = await self.project_repo.update(project_id, updates, clean_requirements)
        if not project:
            raise NotFoundException(f"Project not found: {project_id}")

        logger.info(f"Successfully updated project: {project_id}")
        return project

    async def update_status(self, project_id: UUID, status: ProjectStatus) -> Project:
        project = await self.project_repo.update(project_id, {'status': status})
        if not project:
            raise NotFoundException(f"Project not found: {project_id}")
        return project

    async def delete_project(self, project_id: UUID) -> bool:
        return await self.project_repo.delete(project_id)

    async def _prepare_requirements(
        self,
        requirements: Sequence[Tuple[UUID, Any]]
    ) -> List[Tuple[UUID, ProficiencyLevel]]:
        """Validate levels and skill references, keeping the given order"""
        clean = [(skill_id, ProficiencyScale.parse(level)) for skill_id, level in requirements]

        skill_ids = [skill_id for skill_id, _ in clean]
        known = await self.skill_repo.get_existing_ids(skill_ids)
        unknown = [str(skill_id) for skill_id in skill_ids if skill_id not in known]
        if unknown:
            raise ValidationException("Unknown skills in requirements", details={"skill_ids": unknown})

        return clean

    @staticmethod
    def _validate_dates(start_date: Optional[date], end_date: Optional[date]) -> None:
        if start_date and end_date and end_date < start_date:
            raise ValidationException("End date cannot be before start date")
