"""Pytest configuration and shared fixtures"""

import pytest
from typing import AsyncGenerator, Dict, Optional
from datetime import date
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import Base, create_engine, create_session_factory, get_db
from backend.app.models import (
    Skill, Person, Project, Assignment,
    ProficiencyLevel, ExperienceLevel, ProjectStatus
)
from backend.app.repositories import (
    SkillRepository, PersonRepository, ProjectRepository, AssignmentRepository
)


@pytest.fixture
async def test_engine(tmp_path):
    """Create a file-backed SQLite engine with a fresh schema for one test"""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test_skillmatch.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create test session factory"""
    return create_session_factory(test_engine)


@pytest.fixture
async def db_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session"""
    async with test_session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session_factory):
    """Application wired to the test database with rate limiting off"""
    from backend.app.main import create_app

    app = create_app(rate_limit_per_minute=0)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the application in-process"""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as http:
        yield http


async def create_test_skill(
    db_session: AsyncSession,
    name: str,
    category: Optional[str] = None
) -> Skill:
    """Create a catalog skill"""
    return await SkillRepository(db_session).create({'name': name, 'category': category})


async def create_test_person(
    db_session: AsyncSession,
    name: str,
    skills: Optional[Dict[Skill, ProficiencyLevel]] = None,
    experience_level: ExperienceLevel = ExperienceLevel.JUNIOR,
    role: Optional[str] = None
) -> Person:
    """Create a person holding the given skills"""
    repo = PersonRepository(db_session)
    slug = name.lower().replace(" ", ".")
    person = await repo.create({
        'name': name,
        'email': f"{slug}@agency.test",
        'role': role,
        'experience_level': experience_level,
    })
    for skill, level in (skills or {}).items():
        await repo.upsert_skill(person.id, skill.id, level)
    return await repo.get_by_id(person.id)


async def create_test_project(
    db_session: AsyncSession,
    name: str,
    requirements: Optional[Dict[Skill, ProficiencyLevel]] = None,
    status: ProjectStatus = ProjectStatus.PLANNING
) -> Project:
    """Create a project requiring the given skill levels"""
    return await ProjectRepository(db_session).create(
        {'name': name, 'status': status},
        [(skill.id, level) for skill, level in (requirements or {}).items()]
    )


async def create_test_assignment(
    db_session: AsyncSession,
    project: Project,
    person: Person,
    start_date: date = date(2024, 3, 1),
    end_date: date = date(2024, 4, 30),
    **extra
) -> Assignment:
    """Create an assignment, Active unless a status is given"""
    data = {
        'project_id': project.id,
        'person_id': person.id,
        'start_date': start_date,
        'end_date': end_date,
    }
    data.update(extra)
    return await AssignmentRepository(db_session).create(data)


API = "/api/v1"


async def post_skill(client: AsyncClient, name: str, category: Optional[str] = None) -> dict:
    """Create a skill through the API"""
    response = await client.post(f"{API}/skills", json={"name": name, "category": category})
    assert response.status_code == 201
    return response.json()


async def post_person(
    client: AsyncClient,
    name: str,
    experience_level: Optional[str] = None,
    **skills: str
) -> dict:
    """Create a person through the API; keyword arguments map skill ids to levels"""
    payload = {"name": name, "email": f"{name.lower()}@agency.io", "role": "Engineer"}
    if experience_level:
        payload["experience_level"] = experience_level
    response = await client.post(f"{API}/personnel", json=payload)
    assert response.status_code == 201
    person = response.json()

    for skill_id, level in skills.items():
        response = await client.post(
            f"{API}/personnel/{person['id']}/skills",
            json={"skill_id": skill_id, "proficiency_level": level}
        )
        assert response.status_code == 200
        person = response.json()
    return person
