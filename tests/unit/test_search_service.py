"""Unit tests for personnel search"""

import pytest

from backend.app.models.person import ExperienceLevel
from backend.app.models.skill import ProficiencyLevel
from backend.app.repositories import PersonRepository
from backend.app.services.search_service import SearchService
from backend.app.schemas.person import PersonSearchResult
from tests.conftest import create_test_skill, create_test_person


@pytest.fixture
def search_service(db_session):
    return SearchService(PersonRepository(db_session))


@pytest.fixture
async def roster(db_session):
    react = await create_test_skill(db_session, "React")
    native = await create_test_skill(db_session, "React Native")
    sql = await create_test_skill(db_session, "SQL")

    return {
        "ada": await create_test_person(
            db_session, "Ada", {react: ProficiencyLevel.EXPERT, sql: ProficiencyLevel.BEGINNER},
            experience_level=ExperienceLevel.SENIOR
        ),
        "ben": await create_test_person(
            db_session, "Ben", {react: ProficiencyLevel.INTERMEDIATE},
            experience_level=ExperienceLevel.MID_LEVEL
        ),
        "cat": await create_test_person(
            db_session, "Cat", {native: ProficiencyLevel.ADVANCED},
            experience_level=ExperienceLevel.JUNIOR
        ),
        "dan": await create_test_person(
            db_session, "Dan", {sql: ProficiencyLevel.EXPERT},
            experience_level=ExperienceLevel.SENIOR
        ),
    }


class TestSearchService:
    """Tests for SearchService"""

    async def test_no_filters_returns_everyone_by_name(self, search_service, roster):
        results = await search_service.search_personnel()
        assert [p.name for p in results] == ["Ada", "Ben", "Cat", "Dan"]

    async def test_skill_substring_is_case_insensitive(self, search_service, roster):
        results = await search_service.search_personnel(skill="react")
        assert [p.name for p in results] == ["Ada", "Ben", "Cat"]

    async def test_skill_with_minimum_proficiency(self, search_service, roster):
        results = await search_service.search_personnel(
            skill="react", min_proficiency=ProficiencyLevel.ADVANCED
        )
        assert [p.name for p in results] == ["Ada", "Cat"]

    async def test_minimum_proficiency_ignored_without_skill(self, search_service, roster):
        results = await search_service.search_personnel(min_proficiency=ProficiencyLevel.EXPERT)
        assert len(results) == 4

    async def test_experience_level_filter(self, search_service, roster):
        results = await search_service.search_personnel(experience_level=ExperienceLevel.SENIOR)
        assert [p.name for p in results] == ["Ada", "Dan"]

    async def test_combined_filters(self, search_service, roster):
        results = await search_service.search_personnel(
            experience_level=ExperienceLevel.SENIOR,
            skill="SQL",
            min_proficiency=ProficiencyLevel.INTERMEDIATE
        )
        assert [p.name for p in results] == ["Dan"]

    async def test_skills_summary(self, search_service, roster):
        results = await search_service.search_personnel(skill="sql")
        summaries = {p.name: PersonSearchResult.from_person(p).skills for p in results}

        assert summaries == {
            "Ada": "React (Expert), SQL (Beginner)",
            "Dan": "SQL (Expert)",
        }
