"""End-to-end tests for calendars, academic events, dashboard and insights."""

import pytest

from tests.harness import create_app_fixture

# E2E fixture - in-memory persistence behind the real app
app_client = create_app_fixture()


def _login_as(app_client, email: str, role: str = "faculty", name: str = "Dr. Test"):
    """Register a profile on a fresh client and return the logged-in client."""
    client = app_client()
    response = client.post(
        "/api/auth/register",
        json={"full_name": name, "email": email, "password": "secret-pw", "role": role},
    )
    assert response.status_code == 201
    return client


EVENT = {"title": "Semester exams", "start_date": "2025-11-03", "category": "Exam"}


class TestAcademicEvents:
    """Only superadmins manage the shared academic calendar."""

    @pytest.mark.parametrize("role", ["faculty", "hod", "dean"])
    def test_non_superadmin_cannot_create(self, app_client, role):
        client = _login_as(app_client, f"{role}@acadly.edu", role=role)

        response = client.post("/api/academic-events", json=EVENT)

        assert response.status_code == 403
        assert client.get("/api/academic-events").json() == []

    def test_superadmin_event_notifies_everyone_else(self, app_client):
        # Arrange
        faculty = _login_as(app_client, "faculty@acadly.edu")
        dean = _login_as(app_client, "dean@acadly.edu", role="dean")
        admin = _login_as(app_client, "admin@acadly.edu", role="superadmin")

        # Act
        response = admin.post("/api/academic-events", json=EVENT)

        # Assert
        assert response.status_code == 201
        for client in (faculty, dean):
            assert client.get("/api/notifications/unread-count").json() == {"count": 1}
        assert admin.get("/api/notifications/unread-count").json() == {"count": 0}

        # Filters
        assert len(faculty.get("/api/academic-events?month=2025-11").json()) == 1
        assert faculty.get("/api/academic-events?month=2025-12").json() == []
        assert len(faculty.get("/api/academic-events?search=EXAM").json()) == 1

        # Mark everything read
        faculty.patch("/api/notifications/read-all")
        assert faculty.get("/api/notifications/unread-count").json() == {"count": 0}

    def test_bad_month_filter_is_400(self, app_client):
        client = _login_as(app_client, "faculty@acadly.edu")

        response = client.get("/api/academic-events?month=November")

        assert response.status_code == 400
        assert response.json()["detail"] == "month: expected format YYYY-MM"


class TestFacultyCalendar:
    """Personal calendars are private to their owner."""

    def test_upload_without_image_is_400(self, app_client):
        client = _login_as(app_client, "faculty@acadly.edu")

        response = client.post("/api/faculty-calendar/upload", json={})

        assert response.status_code == 400

    def test_personal_event_shows_on_dashboard(self, app_client):
        # Arrange
        client = _login_as(app_client, "faculty@acadly.edu")
        other = _login_as(app_client, "other@acadly.edu")

        # Act
        created = client.post(
            "/api/faculty-events",
            json={"title": "Viva", "event_date": "2999-01-15"},
        )

        # Assert
        assert created.status_code == 201
        assert len(client.get("/api/faculty-calendar").json()["events"]) == 1
        assert other.get("/api/faculty-calendar").json()["events"] == []
        stats = client.get("/api/dashboard/stats").json()
        assert [e["title"] for e in stats["upcoming_events"]] == ["Viva"]

        # Someone else's delete is a silent no-op
        event_id = created.json()["id"]
        assert other.delete(f"/api/faculty-events/{event_id}").status_code == 200
        assert len(client.get("/api/faculty-calendar").json()["events"]) == 1


class TestInsights:
    """Insights are for deans and superadmins."""

    def test_faculty_gets_403(self, app_client):
        client = _login_as(app_client, "faculty@acadly.edu")

        assert client.get("/api/ai/insights").status_code == 403

    def test_dean_gets_fallback_without_api_key(self, app_client):
        dean = _login_as(app_client, "dean@acadly.edu", role="dean", name="Dr. Dean")

        response = dean.get("/api/ai/insights")

        assert response.status_code == 200
        body = response.json()
        assert body["available"] is False
        assert body["fallback"]["stats"]["total_users"] == 1


class TestLeaderboard:
    def test_leaderboard_ranks_by_points(self, app_client):
        quiet = _login_as(app_client, "quiet@acadly.edu", name="Dr. Quiet")
        active = _login_as(app_client, "active@acadly.edu", name="Dr. Active")
        active.post(
            "/api/queries",
            json={
                "title": "Printer toner",
                "description": "Department printer is out of toner.",
                "type": "Infrastructure",
            },
        )

        ranking = quiet.get("/api/leaderboard").json()

        assert [e["full_name"] for e in ranking] == ["Dr. Active", "Dr. Quiet"]
