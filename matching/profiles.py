"""Requirement and candidate projections consumed by the match engine"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from backend.app.models.skill import ProficiencyLevel
from matching.proficiency import ProficiencyScale


@dataclass(frozen=True)
class Requirement:
    """Minimum level a project needs in one skill"""
    skill_id: Any
    min_level: ProficiencyLevel


@dataclass
class RequirementSet:
    """Ordered requirements of one project"""
    project_id: Any
    requirements: List[Requirement] = field(default_factory=list)

    @classmethod
    def from_rows(cls, project_id: Any, rows: Iterable[Tuple[Any, Any]]) -> "RequirementSet":
        """
        Build a requirement set from ``(skill_id, min_level)`` rows

        Levels are validated against the proficiency scale. Duplicate skills
        are kept as given.
        """
        requirements = [
            Requirement(skill_id=skill_id, min_level=ProficiencyScale.parse(level))
            for skill_id, level in rows
        ]
        return cls(project_id=project_id, requirements=requirements)

    def is_empty(self) -> bool:
        return not self.requirements

    def as_mapping(self) -> Dict[Any, ProficiencyLevel]:
        return {req.skill_id: req.min_level for req in self.requirements}

    def __iter__(self) -> Iterator[Requirement]:
        return iter(self.requirements)

    def __len__(self) -> int:
        return len(self.requirements)


@dataclass
class CandidateProfile:
    """A person's identity plus the skill levels they have attained"""
    id: Any
    name: str
    role: Optional[str] = None
    email: Optional[str] = None
    skills: Dict[Any, ProficiencyLevel] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        id: Any,
        name: str,
        role: Optional[str] = None,
        email: Optional[str] = None,
        skill_rows: Iterable[Tuple[Any, Any]] = ()
    ) -> "CandidateProfile":
        """
        Build a profile from ``(skill_id, level)`` rows

        A later row for the same skill overwrites an earlier one.
        """
        skills: Dict[Any, ProficiencyLevel] = {}
        for skill_id, level in skill_rows:
            skills[skill_id] = ProficiencyScale.parse(level)
        return cls(id=id, name=name, role=role, email=email, skills=skills)

    def level_for(self, skill_id: Any) -> Optional[ProficiencyLevel]:
        return self.skills.get(skill_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "email": self.email,
        }
