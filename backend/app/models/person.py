"""Personnel models"""

from sqlalchemy import Column, String, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_type
from backend.app.models.skill import ProficiencyLevel
import uuid
import enum


class ExperienceLevel(str, enum.Enum):
    """Experience tier enumeration"""
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"


class Person(Base, TimestampMixin):
    """Agency personnel member"""

    __tablename__ = "personnel"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(String(100), nullable=True)
    experience_level = Column(
        enum_type(ExperienceLevel, "experiencelevel"),
        nullable=False,
        default=ExperienceLevel.JUNIOR,
        index=True,
    )

    # Relationships
    skills = relationship(
        "PersonSkill", back_populates="person", cascade="all, delete-orphan", passive_deletes=True
    )
    assignments = relationship(
        "Assignment", back_populates="person", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Person(id={self.id}, name={self.name}, email={self.email})>"


class PersonSkill(Base, TimestampMixin):
    """Attained proficiency of one person in one skill"""

    __tablename__ = "personnel_skills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    person_id = Column(
        UUID(as_uuid=True), ForeignKey("personnel.id", ondelete="CASCADE"), nullable=False, index=True
    )
    skill_id = Column(
        UUID(as_uuid=True), ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    proficiency_level = Column(enum_type(ProficiencyLevel, "proficiencylevel"), nullable=False)

    # Relationships
    person = relationship("Person", back_populates="skills")
    skill = relationship("Skill", back_populates="person_skills")

    __table_args__ = (
        UniqueConstraint("person_id", "skill_id", name="uq_person_skill"),
    )

    def __repr__(self):
        return (
            f"<PersonSkill(person_id={self.person_id}, skill_id={self.skill_id}, "
            f"level={self.proficiency_level})>"
        )
