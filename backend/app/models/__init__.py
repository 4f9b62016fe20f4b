"""Database models"""

from backend.app.models.base import TimestampMixin
from backend.app.models.skill import Skill, ProficiencyLevel
from backend.app.models.person import Person, PersonSkill, ExperienceLevel
from backend.app.models.project import Project, ProjectRequirement, ProjectStatus
from backend.app.models.assignment import Assignment, AssignmentStatus

__all__ = [
    "TimestampMixin",
    "Skill",
    "ProficiencyLevel",
    "Person",
    "PersonSkill",
    "ExperienceLevel",
    "Project",
    "ProjectRequirement",
    "ProjectStatus",
    "Assignment",
    "AssignmentStatus",
]
