"""Skill schemas for API requests and responses"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from uuid import UUID


class SkillCreateRequest(BaseModel):
    """Request schema for creating or updating a skill"""
    name: str = Field(..., min_length=1, max_length=100, description="Unique skill name")
    category: Optional[str] = Field(None, max_length=100, description="Skill category")
    description: Optional[str] = Field(None, description="Skill description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "React",
                "category": "Frontend",
                "description": "Component-based UI library"
            }
        }
    )


class SkillResponse(BaseModel):
    """Response schema for a catalog skill"""
    id: UUID
    name: str
    category: Optional[str]
    description: Optional[str]
    personnel_count: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_skill(cls, skill, personnel_count: Optional[int] = None):
        """Create SkillResponse from Skill model"""
        return cls(
            id=skill.id,
            name=skill.name,
            category=skill.category,
            description=skill.description,
            personnel_count=personnel_count,
            created_at=skill.created_at
        )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "React",
                "category": "Frontend",
                "description": "Component-based UI library",
                "personnel_count": 4,
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    )
