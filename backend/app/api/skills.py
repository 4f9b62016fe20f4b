"""Skill catalog API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.services.skill_service import SkillService
from backend.app.schemas.skill import SkillCreateRequest, SkillResponse
from backend.app.schemas.common import MessageResponse

router = APIRouter()


async def get_skill_service(db: AsyncSession = Depends(get_db)) -> SkillService:
    """Dependency to get skill service"""
    return SkillService(SkillRepository(db))


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_data: SkillCreateRequest,
    skill_service: SkillService = Depends(get_skill_service)
):
    """Add a skill to the catalog; 409 if the name is taken"""
    skill = await skill_service.create_skill(
        name=skill_data.name,
        category=skill_data.category,
        description=skill_data.description
    )
    return SkillResponse.from_skill(skill, personnel_count=0)


@router.get("", response_model=List[SkillResponse])
async def list_skills(skill_service: SkillService = Depends(get_skill_service)):
    """List skills by name with the number of people holding each"""
    rows = await skill_service.list_skills()
    return [SkillResponse.from_skill(skill, personnel_count=count) for skill, count in rows]


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(
    skill_id: UUID,
    skill_service: SkillService = Depends(get_skill_service)
):
    skill = await skill_service.get_skill(skill_id)
    return SkillResponse.from_skill(skill)


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: UUID,
    skill_data: SkillCreateRequest,
    skill_service: SkillService = Depends(get_skill_service)
):
    skill = await skill_service.update_skill(
        skill_id,
        name=skill_data.name,
        category=skill_data.category,
        description=skill_data.description
    )
    return SkillResponse.from_skill(skill)


@router.delete("/{skill_id}", response_model=MessageResponse)
async def delete_skill(
    skill_id: UUID,
    skill_service: SkillService = Depends(get_skill_service)
):
    """Delete a skill along with every holding and requirement that references it"""
    await skill_service.delete_skill(skill_id)
    return MessageResponse(message="Skill deleted")
