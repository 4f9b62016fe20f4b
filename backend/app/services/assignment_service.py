"""Assignment ledger: person-to-project allocations and their status lifecycle"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from backend.app.repositories.assignment_repository import AssignmentRepository
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.models.assignment import Assignment, AssignmentStatus
from backend.app.core.logging import get_logger
from backend.app.core.exceptions import (
    MissingFieldException,
    NotFoundException,
    ValidationException,
)

logger = get_logger(__name__)


class AssignmentService:
    """
    Service for time-boxed assignments of personnel to projects

    Assignments start Active and move between Active and Completed only
    through an explicit update or toggle. Overlapping assignments for the
    same person are allowed.
    """

    def __init__(
        self,
        assignment_repository: AssignmentRepository,
        project_repository: ProjectRepository,
        person_repository: PersonRepository
    ):
        """
        Initialize assignment service

        Args:
            assignment_repository: Assignment repository
            project_repository: Project repository
            person_repository: Person repository
        """
        self.assignment_repo = assignment_repository
        self.project_repo = project_repository
        self.person_repo = person_repository

    async def create_assignment(
        self,
        project_id: Optional[UUID],
        person_id: Optional[UUID],
        start_date: Optional[date],
        end_date: Optional[date],
        role: Optional[str] = None
    ) -> Assignment:
        """
        Create an Active assignment

        Args:
            project_id: Project UUID
            person_id: Person UUID
            start_date: First day of the assignment
            end_date: Last day of the assignment
            role: Optional role label on the project

        Returns:
            Created assignment

        Raises:
            MissingFieldException: If project, person, start or end is absent
            ValidationException: If the end date precedes the start date
            NotFoundException: If the project or person does not exist
        """
        missing = [
            name for name, value in (
                ("project_id", project_id),
                ("person_id", person_id),
                ("start_date", start_date),
                ("end_date", end_date),
            )
            if value is None
        ]
        if missing:
            raise MissingFieldException(missing)

        self._validate_dates(start_date, end_date)

        if not await self.project_repo.exists(project_id):
            raise NotFoundException(f"Project not found: {project_id}")
        if not await self.person_repo.get_by_id(person_id):
            raise NotFoundException(f"Person not found: {person_id}")

        logger.info(f"Assigning person {person_id} to project {project_id}")

        assignment = await self.assignment_repo.create({
            'project_id': project_id,
            'person_id': person_id,
            'start_date': start_date,
            'end_date': end_date,
            'role': role,
            'status': AssignmentStatus.ACTIVE,
        })
        return assignment

    async def get_assignment(self, assignment_id: UUID) -> Assignment:
        assignment = await self.assignment_repo.get_by_id(assignment_id)
        if not assignment:
            raise NotFoundException(f"Assignment not found: {assignment_id}")
        return assignment

    async def list_assignments(self) -> List[Assignment]:
        """All assignments with project and person loaded, by start date ascending"""
        return await self.assignment_repo.list_all()

    async def update_assignment(
        self,
        assignment_id: UUID,
        start_date: Optional[date],
        end_date: Optional[date],
        role: Optional[str] = None,
        status: Optional[AssignmentStatus] = None
    ) -> Assignment:
        """
        Overwrite an assignment's mutable fields

        ``role`` is always written, so omitting it clears it. ``status`` keeps
        its current value when omitted.

        Raises:
            NotFoundException: If the assignment does not exist
            MissingFieldException: If start or end date is absent
            ValidationException: If the end date precedes the start date
        """
        existing = await self.assignment_repo.get_by_id(assignment_id)
        if not existing:
            raise NotFoundException(f"Assignment not found: {assignment_id}")

        missing = [
            name for name, value in (("start_date", start_date), ("end_date", end_date))
            if value is None
        ]
        if missing:
            raise MissingFieldException(missing)

        self._validate_dates(start_date, end_date)

        updates = {
            'start_date': start_date,
            'end_date': end_date,
            'role': role,
            'status': status if status is not None else existing.status,
        }

        logger.info(f"Updating assignment: {assignment_id}")
        return await self.assignment_repo.update(assignment_id, updates)

    async def toggle_status(self, assignment_id: UUID) -> Assignment:
        """
        Flip an assignment between Active and Completed

        Goes through ``update_assignment`` with every other field unchanged.
        """
        assignment = await self.get_assignment(assignment_id)
        new_status = AssignmentStatus(assignment.status).toggled()

        logger.info(f"Marking assignment {assignment_id} as {new_status.value}")
        return await self.update_assignment(
            assignment_id,
            start_date=assignment.start_date,
            end_date=assignment.end_date,
            role=assignment.role,
            status=new_status
        )

    async def delete_assignment(self, assignment_id: UUID) -> bool:
        """
        Delete an assignment

        Deleting an id that does not exist is not an error.

        Returns:
            True if a row was removed
        """
        deleted = await self.assignment_repo.delete(assignment_id)
        if not deleted:
            logger.info(f"Assignment already absent: {assignment_id}")
        return deleted

    @staticmethod
    def _validate_dates(start_date: date, end_date: date) -> None:
        if end_date < start_date:
            raise ValidationException(
                "End date cannot be before start date",
                details={"start_date": str(start_date), "end_date": str(end_date)}
            )
