"""Skill model"""

from sqlalchemy import Column, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin
import uuid
import enum


class ProficiencyLevel(str, enum.Enum):
    """Proficiency level enumeration, declared lowest first"""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class Skill(Base, TimestampMixin):
    """Skill catalog entry"""

    __tablename__ = "skills"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False, index=True)
    category = Column(String(100), nullable=True, index=True)
    description = Column(Text, nullable=True)

    # Relationships
    person_skills = relationship(
        "PersonSkill", back_populates="skill", cascade="all, delete-orphan", passive_deletes=True
    )
    requirements = relationship(
        "ProjectRequirement", back_populates="skill", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Skill(id={self.id}, name={self.name}, category={self.category})>"
