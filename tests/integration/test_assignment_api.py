"""Integration tests for assignment, search and analytics endpoints"""

import pytest
from uuid import uuid4

from tests.conftest import API, post_skill, post_person


@pytest.fixture
async def staffing(client):
    person = await post_person(client, "Ada")
    project = (await client.post(f"{API}/projects", json={"name": "Storefront"})).json()
    return person, project


class TestAssignmentAPI:
    """Integration tests for assignment endpoints"""

    async def test_create_and_list(self, client, staffing):
        person, project = staffing

        response = await client.post(f"{API}/assignments", json={
            "project_id": project["id"],
            "person_id": person["id"],
            "start_date": "2024-03-01",
            "end_date": "2024-04-30",
            "role": "Tech Lead"
        })
        assert response.status_code == 201
        created = response.json()
        assert created["status"] == "Active"

        listed = (await client.get(f"{API}/assignments")).json()

        assert len(listed) == 1
        entry = listed[0]
        assert entry["project_name"] == "Storefront"
        assert entry["person_name"] == "Ada"
        assert (entry["start_date"], entry["end_date"], entry["role"], entry["status"]) == (
            "2024-03-01", "2024-04-30", "Tech Lead", "Active"
        )

    async def test_missing_fields(self, client, staffing):
        person, _ = staffing

        response = await client.post(f"{API}/assignments", json={"person_id": person["id"]})

        assert response.status_code == 400
        assert response.json()["details"]["missing_fields"] == ["project_id", "start_date", "end_date"]

    async def test_update_unknown(self, client):
        response = await client.put(f"{API}/assignments/{uuid4()}", json={
            "start_date": "2024-03-01", "end_date": "2024-04-30"
        })

        assert response.status_code == 404

    async def test_toggle_and_update(self, client, staffing):
        person, project = staffing
        created = (await client.post(f"{API}/assignments", json={
            "project_id": project["id"],
            "person_id": person["id"],
            "start_date": "2024-03-01",
            "end_date": "2024-04-30"
        })).json()

        toggled = (await client.post(f"{API}/assignments/{created['id']}/toggle-status")).json()
        assert toggled["status"] == "Completed"

        response = await client.put(f"{API}/assignments/{created['id']}", json={
            "start_date": "2024-03-01", "end_date": "2024-05-31", "role": "Reviewer"
        })
        assert response.status_code == 200
        updated = response.json()
        assert updated["status"] == "Completed"
        assert updated["end_date"] == "2024-05-31"
        assert updated["role"] == "Reviewer"

    async def test_delete_regardless_of_existence(self, client, staffing):
        person, project = staffing
        created = (await client.post(f"{API}/assignments", json={
            "project_id": project["id"],
            "person_id": person["id"],
            "start_date": "2024-03-01",
            "end_date": "2024-04-30"
        })).json()

        first = await client.delete(f"{API}/assignments/{created['id']}")
        second = await client.delete(f"{API}/assignments/{created['id']}")

        assert first.status_code == second.status_code == 200
        assert first.json() == {"message": "Assignment deleted"}
        assert (await client.get(f"{API}/assignments/{created['id']}")).status_code == 404


class TestSearchAndAnalyticsAPI:
    """Integration tests for search and analytics"""

    async def test_search_summary(self, client):
        react = await post_skill(client, "React")
        sql = await post_skill(client, "SQL")
        await post_person(client, "Ada", "Senior", **{react["id"]: "Expert", sql["id"]: "Beginner"})
        await post_person(client, "Ben", **{react["id"]: "Intermediate"})

        response = await client.get(
            f"{API}/search", params={"skill": "REACT", "min_proficiency": "Advanced"}
        )

        assert response.status_code == 200
        results = response.json()
        assert [(r["name"], r["skills"]) for r in results] == [("Ada", "React (Expert), SQL (Beginner)")]

    async def test_search_rejects_unknown_level(self, client):
        response = await client.get(f"{API}/search", params={"min_proficiency": "Guru"})
        assert response.status_code == 422

    async def test_analytics(self, client):
        react = await post_skill(client, "React", category="Frontend")
        await post_person(client, "Ada", "Senior", **{react["id"]: "Expert"})

        response = await client.get(f"{API}/analytics", params={"skill_category": "All"})

        assert response.status_code == 200
        body = response.json()
        assert body["counts"]["personnel"] == 1
        assert body["top_skills"] == [{"name": "React", "count": 1}]
        assert body["categories"] == ["Frontend"]
        assert body["top_personnel"][0]["name"] == "Ada"


class TestApplication:
    """Infrastructure endpoints and middleware"""

    async def test_health_and_root(self, client):
        assert (await client.get("/health")).json() == {"status": "healthy"}
        assert (await client.get("/")).json()["status"] == "running"

    async def test_request_id_echoed(self, client):
        response = await client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    async def test_rate_limit(self):
        from httpx import ASGITransport, AsyncClient
        from backend.app.main import create_app

        app = create_app(rate_limit_per_minute=2)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
            statuses = [(await http.get(f"{API}/openapi.json")).status_code for _ in range(3)]

        assert statuses == [200, 200, 429]
