"""
Mini Study Notes Backend — Users API Integration Tests
=======================================================

What:  Tests for the /api/v1/users endpoints and GET /health.
How:   Uses HTTPX AsyncClient against the FastAPI app, with the repository
       dependency pointed at an in-memory store.

What we test:
    ✅ Success answers: empty 200 for writes, JSON for reads
    ✅ Plain-text 400/404 bodies, including the empty ones
    ✅ camelCase wire names on notes and users
    ✅ Route ordering (/all vs /{username})
    ✅ Request ID header and health check
"""

import pytest

BASE = "/api/v1/users"


async def _create_user(client, username="alice", email="alice@example.com"):
    response = await client.post(f"{BASE}/{username}/{email}")
    assert response.status_code == 200
    return response


class TestUserEndpoints:
    """Tests for user-level endpoints."""

    @pytest.mark.asyncio
    async def test_count_starts_at_zero(self, test_client):
        response = await test_client.get(BASE)
        assert response.status_code == 200
        assert response.json() == 0

    @pytest.mark.asyncio
    async def test_count_with_trailing_slash(self, test_client):
        await _create_user(test_client)
        response = await test_client.get(f"{BASE}/")
        assert response.status_code == 200
        assert response.json() == 1

    @pytest.mark.asyncio
    async def test_create_user_returns_empty_200(self, test_client):
        response = await _create_user(test_client)
        assert response.text == ""

        count = await test_client.get(BASE)
        assert count.json() == 1

    @pytest.mark.asyncio
    async def test_get_user_returns_aggregate(self, test_client):
        await _create_user(test_client)

        response = await test_client.get(f"{BASE}/alice")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["subjects"] == []
        assert "creationDate" in data
        assert "id" in data

    @pytest.mark.asyncio
    async def test_get_missing_user_is_empty_404(self, test_client):
        response = await test_client.get(f"{BASE}/ghost")
        assert response.status_code == 404
        assert response.text == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username, email, message",
        [
            ("alice", "alice@example.com", "Username and Email already taken."),
            ("alice", "new@example.com", "Username already taken."),
            ("bob", "alice@example.com", "Email already taken."),
        ],
    )
    async def test_duplicate_user_is_plain_text_400(self, test_client, username, email, message):
        await _create_user(test_client)

        response = await test_client.post(f"{BASE}/{username}/{email}")

        assert response.status_code == 400
        assert response.text == message
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_delete_user(self, test_client):
        await _create_user(test_client)

        response = await test_client.delete(f"{BASE}/alice")

        assert response.status_code == 200
        assert response.text == ""
        assert (await test_client.get(f"{BASE}/alice")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_user_is_404_with_reason(self, test_client):
        response = await test_client.delete(f"{BASE}/ghost")
        assert response.status_code == 404
        assert response.text == "Username ghost does not exist"

    @pytest.mark.asyncio
    async def test_delete_all_is_not_a_username(self, test_client):
        await _create_user(test_client)
        await _create_user(test_client, "bob", "bob@example.com")

        response = await test_client.delete(f"{BASE}/all")

        assert response.status_code == 200
        assert (await test_client.get(BASE)).json() == 0


class TestSubjectEndpoints:
    """Tests for subject endpoints."""

    @pytest.mark.asyncio
    async def test_create_and_list_subjects(self, test_client):
        await _create_user(test_client)

        first = await test_client.post(f"{BASE}/alice/subjects/Math")
        second = await test_client.post(f"{BASE}/alice/subjects/Physics")
        response = await test_client.get(f"{BASE}/alice/subjects")

        assert first.status_code == second.status_code == 200
        assert first.text == ""
        assert response.status_code == 200
        subjects = response.json()
        assert [s["name"] for s in subjects] == ["Math", "Physics"]
        assert all(s["notes"] == [] for s in subjects)
        assert subjects[0]["id"] != subjects[1]["id"]

    @pytest.mark.asyncio
    async def test_duplicate_subject(self, test_client):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")

        response = await test_client.post(f"{BASE}/alice/subjects/Math")

        assert response.status_code == 400
        assert response.text == "Subject name already exists."

    @pytest.mark.asyncio
    async def test_subject_for_missing_user_is_400(self, test_client):
        response = await test_client.post(f"{BASE}/ghost/subjects/Math")
        assert response.status_code == 400
        assert response.text == "Username does not exist."

    @pytest.mark.asyncio
    async def test_list_subjects_of_missing_user_is_empty_400(self, test_client):
        response = await test_client.get(f"{BASE}/ghost/subjects")
        assert response.status_code == 400
        assert response.text == ""

    @pytest.mark.asyncio
    async def test_delete_subject(self, test_client):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")

        response = await test_client.delete(f"{BASE}/alice/subjects/Math")
        again = await test_client.delete(f"{BASE}/alice/subjects/Math")

        assert response.status_code == 200
        assert again.status_code == 400
        assert again.text == "Subject does not exist."
        assert (await test_client.get(f"{BASE}/alice/subjects")).json() == []

    @pytest.mark.asyncio
    async def test_rename_subject(self, test_client):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")

        response = await test_client.put(f"{BASE}/alice/subjects/Math/Algebra")

        assert response.status_code == 200
        subjects = (await test_client.get(f"{BASE}/alice/subjects")).json()
        assert [s["name"] for s in subjects] == ["Algebra"]

    @pytest.mark.asyncio
    async def test_rename_onto_existing_subject(self, test_client):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")
        await test_client.post(f"{BASE}/alice/subjects/Physics")

        response = await test_client.put(f"{BASE}/alice/subjects/Math/Physics")

        assert response.status_code == 400
        assert response.text == "New subject name already exists."


class TestStudyNoteEndpoints:
    """Tests for study note endpoints."""

    @pytest.mark.asyncio
    async def test_add_and_list_notes(self, test_client, sample_note_body):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")

        created = await test_client.post(
            f"{BASE}/alice/subjects/Math/notes", json=sample_note_body
        )
        favourite = await test_client.post(
            f"{BASE}/alice/subjects/Math/notes",
            json={"content": "e^(i*pi) = -1", "colour": "red", "isFavourite": True},
        )
        response = await test_client.get(f"{BASE}/alice/subjects/Math/notes")

        assert created.status_code == favourite.status_code == 200
        assert created.text == ""
        notes = response.json()
        assert [n["content"] for n in notes] == [sample_note_body["content"], "e^(i*pi) = -1"]
        assert notes[0]["colour"] == "yellow"
        assert notes[0]["isFavourite"] is False
        assert notes[1]["isFavourite"] is True
        assert "creationDate" in notes[0]

    @pytest.mark.asyncio
    async def test_note_appears_in_user_document(self, test_client, sample_note_body):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")
        await test_client.post(f"{BASE}/alice/subjects/Math/notes", json=sample_note_body)

        user = (await test_client.get(f"{BASE}/alice")).json()

        assert user["subjects"][0]["notes"][0]["content"] == sample_note_body["content"]

    @pytest.mark.asyncio
    async def test_note_for_missing_user(self, test_client, sample_note_body):
        response = await test_client.post(
            f"{BASE}/ghost/subjects/Math/notes", json=sample_note_body
        )
        assert response.status_code == 400
        assert response.text == "Username does not exist"

    @pytest.mark.asyncio
    async def test_note_for_missing_subject(self, test_client, sample_note_body):
        await _create_user(test_client)

        response = await test_client.post(
            f"{BASE}/alice/subjects/Math/notes", json=sample_note_body
        )

        assert response.status_code == 400
        assert response.text == "Username does not have a subject with the name 'Math'"

    @pytest.mark.asyncio
    async def test_list_notes_of_missing_subject_is_empty_400(self, test_client):
        await _create_user(test_client)

        response = await test_client.get(f"{BASE}/alice/subjects/Math/notes")

        assert response.status_code == 400
        assert response.text == ""

    @pytest.mark.asyncio
    async def test_note_without_content_is_422(self, test_client):
        await _create_user(test_client)
        await test_client.post(f"{BASE}/alice/subjects/Math")

        response = await test_client.post(
            f"{BASE}/alice/subjects/Math/notes", json={"colour": "blue"}
        )

        assert response.status_code == 422


class TestCrossCutting:
    """Request IDs and health."""

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get(BASE)
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get(BASE, headers={"X-Request-ID": "trace-123"})
        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_health_check(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage_backend"] == "sql"
        assert data["database"] == "connected"
        assert data["uptime_seconds"] >= 0
