"""Assignment repository for database operations"""

from typing import Dict, List, Optional, Any
from uuid import UUID
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from backend.app.models.assignment import Assignment, AssignmentStatus
from backend.app.core.database import storage_operation
from backend.app.core.logging import get_logger

logger = get_logger(__name__)


class AssignmentRepository:
    """Repository for project assignment database operations"""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository

        Args:
            session: Database session
        """
        self.session = session

    def _enriched(self):
        return select(Assignment).options(
            joinedload(Assignment.project),
            joinedload(Assignment.person)
        )

    @storage_operation("create assignment")
    async def create(self, assignment_data: Dict[str, Any]) -> Assignment:
        """
        Create a new assignment

        Args:
            assignment_data: Dictionary with assignment data

        Returns:
            Created assignment with project and person loaded
        """
        assignment = Assignment(**assignment_data)
        self.session.add(assignment)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Created assignment: {assignment.id}")
        return await self.get_by_id(assignment.id)

    @storage_operation("get assignment")
    async def get_by_id(self, assignment_id: UUID) -> Optional[Assignment]:
        """
        Get assignment by ID

        Args:
            assignment_id: Assignment UUID

        Returns:
            Assignment with project and person loaded, None if not found
        """
        stmt = (
            self._enriched()
            .where(Assignment.id == assignment_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.unique().scalar_one_or_none()

    @storage_operation("list assignments")
    async def list_all(self) -> List[Assignment]:
        """List all assignments ordered by start date ascending"""
        stmt = self._enriched().order_by(
            Assignment.start_date.asc(),
            Assignment.created_at.asc(),
            Assignment.id.asc()
        )
        result = await self.session.execute(stmt)
        assignments = list(result.unique().scalars().all())

        logger.debug(f"Listed {len(assignments)} assignments")
        return assignments

    @storage_operation("update assignment")
    async def update(self, assignment_id: UUID, update_data: Dict[str, Any]) -> Optional[Assignment]:
        """
        Overwrite assignment fields

        Args:
            assignment_id: Assignment UUID
            update_data: Fields to write

        Returns:
            Updated assignment if found, None otherwise
        """
        assignment = await self.get_by_id(assignment_id)
        if not assignment:
            return None

        for key, value in update_data.items():
            if hasattr(assignment, key):
                setattr(assignment, key, value)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Updated assignment: {assignment_id}")
        return await self.get_by_id(assignment_id)

    @storage_operation("delete assignment")
    async def delete(self, assignment_id: UUID) -> bool:
        """
        Delete assignment

        Returns:
            True if a row was removed, False if none existed
        """
        try:
            result = await self.session.execute(
                delete(Assignment).where(Assignment.id == assignment_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted assignment: {assignment_id}")
        return deleted

    @storage_operation("count active assignments")
    async def count_active_by_person(self) -> Dict[UUID, int]:
        """Number of Active assignments per person"""
        stmt = (
            select(Assignment.person_id, func.count(Assignment.id))
            .where(Assignment.status == AssignmentStatus.ACTIVE)
            .group_by(Assignment.person_id)
        )
        result = await self.session.execute(stmt)
        return {person_id: count for person_id, count in result.all()}
