"""Assignment model"""

from sqlalchemy import Column, String, Date, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_type
import uuid
import enum


class AssignmentStatus(str, enum.Enum):
    """Assignment lifecycle status"""
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def toggled(self) -> "AssignmentStatus":
        if self is AssignmentStatus.ACTIVE:
            return AssignmentStatus.COMPLETED
        return AssignmentStatus.ACTIVE


class Assignment(Base, TimestampMixin):
    """Time-boxed allocation of a person to a project"""

    __tablename__ = "project_assignments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    project_id = Column(
        UUID(as_uuid=True), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    person_id = Column(
        UUID(as_uuid=True), ForeignKey("personnel.id", ondelete="CASCADE"), nullable=False, index=True
    )
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    role = Column(String(100), nullable=True)
    status = Column(
        enum_type(AssignmentStatus, "assignmentstatus"),
        nullable=False,
        default=AssignmentStatus.ACTIVE,
        index=True,
    )

    # Relationships
    project = relationship("Project", back_populates="assignments")
    person = relationship("Person", back_populates="assignments")

    def __repr__(self):
        return (
            f"<Assignment(id={self.id}, project_id={self.project_id}, "
            f"person_id={self.person_id}, status={self.status})>"
        )
