"""Unit tests for the assignment ledger"""

import pytest
from datetime import date
from uuid import uuid4

from backend.app.models.assignment import AssignmentStatus
from backend.app.repositories import AssignmentRepository, ProjectRepository, PersonRepository
from backend.app.services.assignment_service import AssignmentService
from backend.app.core.exceptions import (
    MissingFieldException,
    NotFoundException,
    ValidationException,
)
from tests.conftest import create_test_person, create_test_project


@pytest.fixture
def assignment_service(db_session):
    return AssignmentService(
        AssignmentRepository(db_session),
        ProjectRepository(db_session),
        PersonRepository(db_session)
    )


@pytest.fixture
async def project(db_session):
    return await create_test_project(db_session, "Checkout Redesign")


@pytest.fixture
async def person(db_session):
    return await create_test_person(db_session, "Ada Lovelace")


class TestAssignmentService:
    """Tests for AssignmentService"""

    async def test_create_defaults_to_active(self, assignment_service, project, person):
        assignment = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30), role="Tech Lead"
        )

        assert assignment.status == AssignmentStatus.ACTIVE
        assert assignment.role == "Tech Lead"
        assert assignment.project.name == "Checkout Redesign"
        assert assignment.person.name == "Ada Lovelace"

    async def test_create_then_list_round_trip(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30)
        )

        listed = await assignment_service.list_assignments()

        assert len(listed) == 1
        entry = listed[0]
        assert entry.id == created.id
        assert entry.start_date == date(2024, 3, 1)
        assert entry.end_date == date(2024, 4, 30)
        assert entry.role is None
        assert entry.status == AssignmentStatus.ACTIVE

    async def test_role_is_stored_as_given(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30), role="  Tech Lead "
        )
        assert (await assignment_service.get_assignment(created.id)).role == "  Tech Lead "

        await assignment_service.update_assignment(
            created.id, date(2024, 3, 1), date(2024, 4, 30), role=""
        )

        assert (await assignment_service.get_assignment(created.id)).role == ""

    async def test_missing_fields_are_reported(self, assignment_service, project):
        with pytest.raises(MissingFieldException) as exc_info:
            await assignment_service.create_assignment(project.id, None, date(2024, 3, 1), None)

        assert exc_info.value.fields == ["person_id", "end_date"]
        assert exc_info.value.status_code == 400

    async def test_unknown_project_or_person(self, assignment_service, project, person):
        with pytest.raises(NotFoundException):
            await assignment_service.create_assignment(
                uuid4(), person.id, date(2024, 3, 1), date(2024, 4, 30)
            )
        with pytest.raises(NotFoundException):
            await assignment_service.create_assignment(
                project.id, uuid4(), date(2024, 3, 1), date(2024, 4, 30)
            )

    async def test_end_before_start_rejected(self, assignment_service, project, person):
        with pytest.raises(ValidationException):
            await assignment_service.create_assignment(
                project.id, person.id, date(2024, 4, 30), date(2024, 3, 1)
            )

    async def test_overlapping_assignments_allowed(self, assignment_service, project, person):
        for _ in range(2):
            await assignment_service.create_assignment(
                project.id, person.id, date(2024, 3, 1), date(2024, 4, 30)
            )

        assert len(await assignment_service.list_assignments()) == 2

    async def test_list_ordered_by_start_date(self, assignment_service, project, person):
        await assignment_service.create_assignment(project.id, person.id, date(2024, 6, 1), date(2024, 6, 30))
        await assignment_service.create_assignment(project.id, person.id, date(2024, 1, 1), date(2024, 1, 31))

        listed = await assignment_service.list_assignments()

        assert [a.start_date for a in listed] == [date(2024, 1, 1), date(2024, 6, 1)]

    async def test_update_overwrites_and_keeps_status(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30), role="Tech Lead"
        )

        updated = await assignment_service.update_assignment(
            created.id, date(2024, 3, 15), date(2024, 5, 31)
        )

        assert updated.start_date == date(2024, 3, 15)
        assert updated.end_date == date(2024, 5, 31)
        assert updated.role is None
        assert updated.status == AssignmentStatus.ACTIVE

    async def test_update_unknown_id(self, assignment_service):
        with pytest.raises(NotFoundException):
            await assignment_service.update_assignment(uuid4(), date(2024, 3, 1), date(2024, 4, 30))

    async def test_update_requires_dates(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30)
        )

        with pytest.raises(MissingFieldException):
            await assignment_service.update_assignment(created.id, None, date(2024, 4, 30))

    async def test_toggle_twice_restores_everything(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30), role="Reviewer"
        )

        completed = await assignment_service.toggle_status(created.id)
        assert completed.status == AssignmentStatus.COMPLETED

        restored = await assignment_service.toggle_status(created.id)
        assert restored.status == AssignmentStatus.ACTIVE
        assert restored.start_date == created.start_date
        assert restored.end_date == created.end_date
        assert restored.role == "Reviewer"

    async def test_delete_is_idempotent(self, assignment_service, project, person):
        created = await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30)
        )

        assert await assignment_service.delete_assignment(created.id) is True
        assert await assignment_service.delete_assignment(created.id) is False
        assert await assignment_service.delete_assignment(uuid4()) is False

        with pytest.raises(NotFoundException):
            await assignment_service.get_assignment(created.id)

    async def test_assignments_cascade_with_project(self, db_session, assignment_service, project, person):
        await assignment_service.create_assignment(
            project.id, person.id, date(2024, 3, 1), date(2024, 4, 30)
        )

        await ProjectRepository(db_session).delete(project.id)

        assert await assignment_service.list_assignments() == []
