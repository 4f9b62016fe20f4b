"""Personnel API endpoints"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.repositories.person_repository import PersonRepository
from backend.app.repositories.skill_repository import SkillRepository
from backend.app.services.person_service import PersonService
from backend.app.schemas.person import PersonCreateRequest, PersonResponse, PersonSkillRequest
from backend.app.schemas.common import MessageResponse
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def get_person_service(db: AsyncSession = Depends(get_db)) -> PersonService:
    """Dependency to get person service"""
    return PersonService(PersonRepository(db), SkillRepository(db))


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    person_data: PersonCreateRequest,
    person_service: PersonService = Depends(get_person_service)
):
    """
    Register a person

    **Validation:**
    - Name and email are required (400)
    - Email must be unique (409)
    - Experience level defaults to Junior
    """
    person = await person_service.create_person(
        name=person_data.name,
        email=person_data.email,
        role=person_data.role,
        experience_level=person_data.experience_level
    )
    return PersonResponse.from_person(person)


@router.get("", response_model=List[PersonResponse])
async def list_personnel(person_service: PersonService = Depends(get_person_service)):
    """List personnel with their skills, newest first"""
    personnel = await person_service.list_personnel()
    return [PersonResponse.from_person(person) for person in personnel]


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: UUID,
    person_service: PersonService = Depends(get_person_service)
):
    person = await person_service.get_person(person_id)
    return PersonResponse.from_person(person)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: UUID,
    person_data: PersonCreateRequest,
    person_service: PersonService = Depends(get_person_service)
):
    person = await person_service.update_person(
        person_id,
        name=person_data.name,
        email=person_data.email,
        role=person_data.role,
        experience_level=person_data.experience_level
    )
    return PersonResponse.from_person(person)


@router.delete("/{person_id}", response_model=MessageResponse)
async def delete_person(
    person_id: UUID,
    person_service: PersonService = Depends(get_person_service)
):
    """Delete a person with their skills and assignments"""
    await person_service.delete_person(person_id)
    return MessageResponse(message="Person deleted")


@router.post("/{person_id}/skills", response_model=PersonResponse)
async def assign_skill(
    person_id: UUID,
    skill_data: PersonSkillRequest,
    person_service: PersonService = Depends(get_person_service)
):
    """Record a person's level in a skill, replacing any earlier level"""
    logger.info(f"Setting skill {skill_data.skill_id} for person {person_id}")
    person = await person_service.assign_skill(
        person_id,
        skill_data.skill_id,
        skill_data.proficiency_level
    )
    return PersonResponse.from_person(person)
