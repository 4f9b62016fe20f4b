"""Personnel schemas for API requests and responses"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator, ConfigDict
from uuid import UUID

from backend.app.models.person import ExperienceLevel
from backend.app.models.skill import ProficiencyLevel


class PersonCreateRequest(BaseModel):
    """Request schema for creating or updating a person

    Name and email are checked by the service so that a missing value is
    reported as a missing field rather than a schema error.
    """
    name: Optional[str] = Field(None, max_length=255, description="Full name")
    email: Optional[str] = Field(None, max_length=255, description="Unique email address")
    role: Optional[str] = Field(None, max_length=100, description="Job title")
    experience_level: Optional[ExperienceLevel] = Field(None, description="Experience tier")

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        if v is not None and v.strip() and '@' not in v:
            raise ValueError('Email address must contain @')
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@agency.io",
                "role": "Frontend Engineer",
                "experience_level": "Senior"
            }
        }
    )


class PersonSkillRequest(BaseModel):
    """Request schema for recording a person's level in a skill"""
    skill_id: UUID = Field(..., description="Skill UUID")
    proficiency_level: ProficiencyLevel = Field(..., description="Attained proficiency level")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "skill_id": "123e4567-e89b-12d3-a456-426614174000",
                "proficiency_level": "Advanced"
            }
        }
    )


class PersonSkillResponse(BaseModel):
    """A skill held by a person"""
    skill_id: UUID
    name: str
    category: Optional[str]
    proficiency_level: ProficiencyLevel

    @classmethod
    def from_person_skill(cls, person_skill):
        return cls(
            skill_id=person_skill.skill_id,
            name=person_skill.skill.name,
            category=person_skill.skill.category,
            proficiency_level=person_skill.proficiency_level
        )


class PersonResponse(BaseModel):
    """Response schema for person details"""
    id: UUID
    name: str
    email: str
    role: Optional[str]
    experience_level: ExperienceLevel
    skills: List[PersonSkillResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_person(cls, person):
        """Create PersonResponse from Person model"""
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            role=person.role,
            experience_level=person.experience_level,
            skills=[
                PersonSkillResponse.from_person_skill(ps)
                for ps in sorted(person.skills, key=lambda ps: ps.skill.name)
            ],
            created_at=person.created_at,
            updated_at=person.updated_at
        )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "456e7890-e89b-12d3-a456-426614174001",
                "name": "Ada Lovelace",
                "email": "ada@agency.io",
                "role": "Frontend Engineer",
                "experience_level": "Senior",
                "skills": [
                    {
                        "skill_id": "123e4567-e89b-12d3-a456-426614174000",
                        "name": "React",
                        "category": "Frontend",
                        "proficiency_level": "Expert"
                    }
                ],
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z"
            }
        }
    )


def summarize_skills(person) -> str:
    """Render a person's skills as ``"React (Expert), SQL (Beginner)"``"""
    return ", ".join(
        f"{ps.skill.name} ({ps.proficiency_level.value})"
        for ps in sorted(person.skills, key=lambda ps: ps.skill.name)
    )


class PersonSearchResult(BaseModel):
    """Search hit with a one-line skills summary"""
    id: UUID
    name: str
    email: str
    role: Optional[str]
    experience_level: ExperienceLevel
    skills: str

    @classmethod
    def from_person(cls, person):
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            role=person.role,
            experience_level=person.experience_level,
            skills=summarize_skills(person)
        )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "456e7890-e89b-12d3-a456-426614174001",
                "name": "Ada Lovelace",
                "email": "ada@agency.io",
                "role": "Frontend Engineer",
                "experience_level": "Senior",
                "skills": "React (Expert), SQL (Beginner)"
            }
        }
    )
