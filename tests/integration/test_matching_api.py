"""Integration tests for matching, projects, skills and personnel endpoints"""

from uuid import uuid4

from tests.conftest import API, post_skill, post_person


class TestMatchingAPI:
    """Integration tests for the match endpoint"""

    async def test_match_project(self, client):
        react = await post_skill(client, "React")
        response = await client.post(f"{API}/projects", json={
            "name": "Storefront",
            "requirements": [{"skill_id": react["id"], "min_proficiency_level": "Intermediate"}]
        })
        assert response.status_code == 201
        project = response.json()
        assert project["status"] == "Planning"
        assert project["requirements"][0]["skill_name"] == "React"

        x = await post_person(client, "Xavier", **{react["id"]: "Advanced"})
        await post_person(client, "Yara", **{react["id"]: "Beginner"})
        await post_person(client, "Zane")

        response = await client.get(f"{API}/match/{project['id']}")

        assert response.status_code == 200
        assert response.json() == [{
            "id": x["id"],
            "name": "Xavier",
            "role": "Engineer",
            "email": "xavier@agency.io",
            "match_score": 1,
        }]

    async def test_match_without_requirements_is_empty(self, client):
        await post_person(client, "Ada")
        project = (await client.post(f"{API}/projects", json={"name": "Discovery"})).json()

        response = await client.get(f"{API}/match/{project['id']}")

        assert response.status_code == 200
        assert response.json() == []

    async def test_match_unknown_project(self, client):
        response = await client.get(f"{API}/match/{uuid4()}")

        assert response.status_code == 404
        body = response.json()
        assert "not found" in body["error"].lower()
        assert "request_id" in body

    async def test_requirement_replacement_changes_matches(self, client):
        react = await post_skill(client, "React")
        sql = await post_skill(client, "SQL")
        ada = await post_person(client, "Ada", **{sql["id"]: "Expert"})
        project = (await client.post(f"{API}/projects", json={
            "name": "Storefront",
            "requirements": [{"skill_id": react["id"], "min_proficiency_level": "Beginner"}]
        })).json()

        assert (await client.get(f"{API}/match/{project['id']}")).json() == []

        response = await client.put(f"{API}/projects/{project['id']}", json={
            "name": "Storefront",
            "requirements": [{"skill_id": sql["id"], "min_proficiency_level": "Advanced"}]
        })
        assert response.status_code == 200

        matches = (await client.get(f"{API}/match/{project['id']}")).json()
        assert [(m["id"], m["match_score"]) for m in matches] == [(ada["id"], 1)]


class TestCatalogAPI:
    """Integration tests for skills, personnel and projects"""

    async def test_duplicate_skill_conflicts(self, client):
        await post_skill(client, "React")

        response = await client.post(f"{API}/skills", json={"name": "React"})

        assert response.status_code == 409

    async def test_skill_list_has_personnel_count(self, client):
        react = await post_skill(client, "React")
        await post_skill(client, "Go")
        await post_person(client, "Ada", **{react["id"]: "Expert"})

        skills = (await client.get(f"{API}/skills")).json()

        assert [(s["name"], s["personnel_count"]) for s in skills] == [("Go", 0), ("React", 1)]

    async def test_person_requires_name_and_email(self, client):
        response = await client.post(f"{API}/personnel", json={"role": "Engineer"})

        assert response.status_code == 400
        assert response.json()["details"]["missing_fields"] == ["name", "email"]

    async def test_person_defaults_and_skill_upsert(self, client):
        react = await post_skill(client, "React")
        person = await post_person(client, "Ada", **{react["id"]: "Beginner"})
        assert person["experience_level"] == "Junior"

        response = await client.post(
            f"{API}/personnel/{person['id']}/skills",
            json={"skill_id": react["id"], "proficiency_level": "Expert"}
        )

        skills = response.json()["skills"]
        assert [(s["name"], s["proficiency_level"]) for s in skills] == [("React", "Expert")]

    async def test_invalid_level_is_rejected(self, client):
        react = await post_skill(client, "React")
        person = await post_person(client, "Ada")

        response = await client.post(
            f"{API}/personnel/{person['id']}/skills",
            json={"skill_id": react["id"], "proficiency_level": "Wizard"}
        )

        assert response.status_code == 422

    async def test_project_with_unknown_skill(self, client):
        response = await client.post(f"{API}/projects", json={
            "name": "Storefront",
            "requirements": [{"skill_id": str(uuid4()), "min_proficiency_level": "Expert"}]
        })

        assert response.status_code == 400
        assert (await client.get(f"{API}/projects")).json() == []

    async def test_project_status_patch(self, client):
        project = (await client.post(f"{API}/projects", json={"name": "Storefront"})).json()

        response = await client.patch(f"{API}/projects/{project['id']}/status", json={"status": "Active"})

        assert response.status_code == 200
        assert response.json()["status"] == "Active"
        active = (await client.get(f"{API}/projects", params={"status": "Active"})).json()
        assert [p["id"] for p in active] == [project["id"]]

    async def test_delete_person_and_project(self, client):
        person = await post_person(client, "Ada")
        project = (await client.post(f"{API}/projects", json={"name": "Storefront"})).json()

        assert (await client.delete(f"{API}/personnel/{person['id']}")).status_code == 200
        assert (await client.delete(f"{API}/projects/{project['id']}")).status_code == 200
        assert (await client.get(f"{API}/personnel/{person['id']}")).status_code == 404
        assert (await client.get(f"{API}/projects/{project['id']}")).status_code == 404
