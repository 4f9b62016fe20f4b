"""Business logic services"""

from backend.app.services.skill_service import SkillService
from backend.app.services.person_service import PersonService
from backend.app.services.project_service import ProjectService
from backend.app.services.matching_service import MatchingService
from backend.app.services.assignment_service import AssignmentService
from backend.app.services.search_service import SearchService
from backend.app.services.analytics_service import AnalyticsService

__all__ = [
    'SkillService',
    'PersonService',
    'ProjectService',
    'MatchingService',
    'AssignmentService',
    'SearchService',
    'AnalyticsService',
]
