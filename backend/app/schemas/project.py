"""Project schemas for API requests and responses"""

from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator, ConfigDict
from uuid import UUID

from backend.app.models.project import ProjectStatus
from backend.app.models.skill import ProficiencyLevel


class RequirementRequest(BaseModel):
    """One skill requirement of a project"""
    skill_id: UUID = Field(..., description="Required skill UUID")
    min_proficiency_level: ProficiencyLevel = Field(..., description="Minimum acceptable level")


class ProjectCreateRequest(BaseModel):
    """Request schema for creating or updating a project

    On update, omitting ``requirements`` keeps the current set and an empty
    list clears it.
    """
    name: Optional[str] = Field(None, max_length=255, description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    start_date: Optional[date] = Field(None, description="Planned start date")
    end_date: Optional[date] = Field(None, description="Planned end date")
    status: Optional[ProjectStatus] = Field(None, description="Project status")
    requirements: Optional[List[RequirementRequest]] = Field(None, description="Skill requirements")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        if v is not None:
            return v.strip() if v.strip() else None
        return v

    def requirement_pairs(self):
        if self.requirements is None:
            return None
        return [(req.skill_id, req.min_proficiency_level) for req in self.requirements]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Checkout Redesign",
                "description": "Rebuild the checkout flow",
                "start_date": "2024-03-01",
                "end_date": "2024-06-30",
                "requirements": [
                    {
                        "skill_id": "123e4567-e89b-12d3-a456-426614174000",
                        "min_proficiency_level": "Advanced"
                    }
                ]
            }
        }
    )


class ProjectStatusRequest(BaseModel):
    """Request schema for changing a project's status"""
    status: ProjectStatus = Field(..., description="New project status")

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": "Active"}}
    )


class RequirementResponse(BaseModel):
    skill_id: UUID
    skill_name: str
    min_proficiency_level: ProficiencyLevel

    @classmethod
    def from_requirement(cls, requirement):
        return cls(
            skill_id=requirement.skill_id,
            skill_name=requirement.skill.name,
            min_proficiency_level=requirement.min_proficiency_level
        )


class ProjectResponse(BaseModel):
    """Response schema for project details"""
    id: UUID
    name: str
    description: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    status: ProjectStatus
    requirements: List[RequirementResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project):
        """Create ProjectResponse from Project model"""
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            start_date=project.start_date,
            end_date=project.end_date,
            status=project.status,
            requirements=[RequirementResponse.from_requirement(req) for req in project.requirements],
            created_at=project.created_at,
            updated_at=project.updated_at
        )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "789e0123-e89b-12d3-a456-426614174002",
                "name": "Checkout Redesign",
                "description": "Rebuild the checkout flow",
                "start_date": "2024-03-01",
                "end_date": "2024-06-30",
                "status": "Planning",
                "requirements": [
                    {
                        "skill_id": "123e4567-e89b-12d3-a456-426614174000",
                        "skill_name": "React",
                        "min_proficiency_level": "Advanced"
                    }
                ],
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z"
            }
        }
    )
