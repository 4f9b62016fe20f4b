"""Data access layer"""

from backend.app.repositories.skill_repository import SkillRepository
from backend.app.repositories.person_repository import PersonRepository
from backend.app.repositories.project_repository import ProjectRepository
from backend.app.repositories.assignment_repository import AssignmentRepository
from backend.app.repositories.analytics_repository import AnalyticsRepository

__all__ = [
    'SkillRepository',
    'PersonRepository',
    'ProjectRepository',
    'AssignmentRepository',
    'AnalyticsRepository',
]
