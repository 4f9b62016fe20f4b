"""Analytics schemas"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from uuid import UUID


class CountsResponse(BaseModel):
    personnel: int
    skills: int
    projects: int
    active_projects: int


class SkillCountResponse(BaseModel):
    name: str
    count: int


class ExperienceCountResponse(BaseModel):
    experience_level: str
    count: int


class TopPersonResponse(BaseModel):
    id: UUID
    name: str
    role: Optional[str]
    total_skills: int
    skill_names: List[str]
    active_projects: int


class AnalyticsResponse(BaseModel):
    """Dashboard analytics summary"""
    counts: CountsResponse
    top_skills: List[SkillCountResponse]
    experience_levels: List[ExperienceCountResponse]
    categories: List[str]
    top_personnel: List[TopPersonResponse]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "counts": {"personnel": 12, "skills": 20, "projects": 5, "active_projects": 2},
                "top_skills": [{"name": "React", "count": 6}],
                "experience_levels": [
                    {"experience_level": "Junior", "count": 4},
                    {"experience_level": "Mid-Level", "count": 5},
                    {"experience_level": "Senior", "count": 3}
                ],
                "categories": ["Backend", "Frontend"],
                "top_personnel": [
                    {
                        "id": "456e7890-e89b-12d3-a456-426614174001",
                        "name": "Ada Lovelace",
                        "role": "Frontend Engineer",
                        "total_skills": 6,
                        "skill_names": ["React", "SQL"],
                        "active_projects": 1
                    }
                ]
            }
        }
    )
