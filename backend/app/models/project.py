"""Project models"""

from sqlalchemy import Column, String, Text, Date, Integer, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_type
from backend.app.models.skill import ProficiencyLevel
import uuid
import enum


class ProjectStatus(str, enum.Enum):
    """Project status enumeration"""
    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"


class Project(Base, TimestampMixin):
    """Client project that personnel are matched and assigned to"""

    __tablename__ = "projects"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    status = Column(
        enum_type(ProjectStatus, "projectstatus"),
        nullable=False,
        default=ProjectStatus.PLANNING,
        index=True,
    )

    # Relationships
    requirements = relationship(
        "ProjectRequirement",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectRequirement.position",
    )
    assignments = relationship(
        "Assignment", back_populates="project", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Project(id={self.id}, name={self.name}, status={self.status})>"


class ProjectRequirement(Base):
    """Minimum proficiency a project needs in one skill"""

    __tablename__ = "project_requirements"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    project_id = Column(
        UUID(as_uuid=True), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id = Column(
        UUID(as_uuid=True), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    min_proficiency_level = Column(enum_type(ProficiencyLevel, "proficiencylevel"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    project = relationship("Project", back_populates="requirements")
    skill = relationship("Skill", back_populates="requirements")

    def __repr__(self):
        return (
            f"<ProjectRequirement(project_id={self.project_id}, skill_id={self.skill_id}, "
            f"min_level={self.min_proficiency_level})>"
        )
