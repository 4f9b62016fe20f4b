"""Personnel matching module"""

from matching.proficiency import ProficiencyScale, Ordering
from matching.profiles import Requirement, RequirementSet, CandidateProfile
from matching.engine import MatchEngine, MatchResult

__all__ = [
    'ProficiencyScale',
    'Ordering',
    'Requirement',
    'RequirementSet',
    'CandidateProfile',
    'MatchEngine',
    'MatchResult',
]
