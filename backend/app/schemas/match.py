"""Match schemas"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from uuid import UUID


class MatchResponse(BaseModel):
    """A fully qualified candidate for a project"""
    id: UUID
    name: str
    role: Optional[str]
    email: Optional[str]
    match_score: int

    @classmethod
    def from_result(cls, result):
        """Create MatchResponse from a MatchResult"""
        return cls(**result.to_dict())

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "456e7890-e89b-12d3-a456-426614174001",
                "name": "Ada Lovelace",
                "role": "Frontend Engineer",
                "email": "ada@agency.io",
                "match_score": 2
            }
        }
    )
