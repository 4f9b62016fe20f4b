"""Match engine for personnel-to-project matching"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from matching.profiles import CandidateProfile, RequirementSet
from matching.proficiency import ProficiencyScale

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """A candidate who satisfies every requirement, with their surplus score"""
    candidate: CandidateProfile
    match_score: int
    is_eligible: bool = True

    def to_dict(self) -> Dict[str, Any]:
        data = self.candidate.to_dict()
        data["match_score"] = self.match_score
        return data


class MatchEngine:
    """
    Match engine ranking candidates against a project's requirements

    Every candidate is checked independently: a candidate must hold each
    required skill at or above the required level. Survivors are scored by
    the total amount they exceed the bar and ranked best-first. An empty
    requirement set matches nobody.
    """

    def __init__(self, scale: type = ProficiencyScale):
        """
        Initialize match engine

        Args:
            scale: Proficiency scale used for every level comparison
        """
        self.scale = scale

    def evaluate(self, candidate: CandidateProfile, requirements: RequirementSet) -> Optional[int]:
        """
        Check one candidate against a requirement set

        Args:
            candidate: Candidate profile
            requirements: Project requirements

        Returns:
            Match score if every requirement is met, None otherwise
        """
        score = 0
        for requirement in requirements:
            attained = candidate.level_for(requirement.skill_id)
            if attained is None:
                return None
            if not self.scale.meets_or_exceeds(attained, requirement.min_level):
                return None
            score += self.scale.surplus(attained, requirement.min_level)
        return score

    def match(
        self,
        requirements: RequirementSet,
        candidates: Iterable[CandidateProfile]
    ) -> List[MatchResult]:
        """
        Rank all fully qualifying candidates

        Args:
            requirements: Project requirements
            candidates: Full candidate population, in population order

        Returns:
            Match results sorted by score descending, ties in population order
        """
        if requirements.is_empty():
            logger.info(f"Project {requirements.project_id} has no requirements; no candidates match")
            return []

        results = []
        evaluated = 0
        for candidate in candidates:
            evaluated += 1
            score = self.evaluate(candidate, requirements)
            if score is not None:
                results.append(MatchResult(candidate=candidate, match_score=score))

        # sorted() is stable, so equal scores keep population order
        ranked = sorted(results, key=lambda result: result.match_score, reverse=True)

        logger.info(
            f"Matched {len(ranked)} of {evaluated} candidates "
            f"against {len(requirements)} requirements for project {requirements.project_id}"
        )
        return ranked
