"""Shared response schemas"""

from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"message": "Assignment deleted"}
        }
    )
