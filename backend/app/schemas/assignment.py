"""Assignment schemas for API requests and responses"""

from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, ConfigDict
from uuid import UUID

from backend.app.models.assignment import AssignmentStatus


class AssignmentCreateRequest(BaseModel):
    """Request schema for creating an assignment

    Every field except ``role`` is required; absent values are reported by
    the service as missing fields.
    """
    project_id: Optional[UUID] = Field(None, description="Project UUID")
    person_id: Optional[UUID] = Field(None, description="Person UUID")
    start_date: Optional[date] = Field(None, description="First day of the assignment")
    end_date: Optional[date] = Field(None, description="Last day of the assignment")
    role: Optional[str] = Field(None, max_length=100, description="Role on the project")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "project_id": "789e0123-e89b-12d3-a456-426614174002",
                "person_id": "456e7890-e89b-12d3-a456-426614174001",
                "start_date": "2024-03-01",
                "end_date": "2024-04-30",
                "role": "Tech Lead"
            }
        }
    )


class AssignmentUpdateRequest(BaseModel):
    """Request schema for overwriting an assignment"""
    start_date: Optional[date] = Field(None, description="First day of the assignment")
    end_date: Optional[date] = Field(None, description="Last day of the assignment")
    role: Optional[str] = Field(None, max_length=100, description="Role on the project")
    status: Optional[AssignmentStatus] = Field(None, description="Assignment status; kept when omitted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "start_date": "2024-03-01",
                "end_date": "2024-05-31",
                "role": "Tech Lead",
                "status": "Completed"
            }
        }
    )


class AssignmentResponse(BaseModel):
    """Response schema for an assignment with project and person names"""
    id: UUID
    project_id: UUID
    project_name: str
    person_id: UUID
    person_name: str
    start_date: date
    end_date: date
    role: Optional[str]
    status: AssignmentStatus
    created_at: datetime

    @classmethod
    def from_assignment(cls, assignment):
        """Create AssignmentResponse from Assignment model"""
        return cls(
            id=assignment.id,
            project_id=assignment.project_id,
            project_name=assignment.project.name,
            person_id=assignment.person_id,
            person_name=assignment.person.name,
            start_date=assignment.start_date,
            end_date=assignment.end_date,
            role=assignment.role,
            status=assignment.status,
            created_at=assignment.created_at
        )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "abc12345-e89b-12d3-a456-426614174003",
                "project_id": "789e0123-e89b-12d3-a456-426614174002",
                "project_name": "Checkout Redesign",
                "person_id": "456e7890-e89b-12d3-a456-426614174001",
                "person_name": "Ada Lovelace",
                "start_date": "2024-03-01",
                "end_date": "2024-04-30",
                "role": "Tech Lead",
                "status": "Active",
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    )
