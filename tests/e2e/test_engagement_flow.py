"""End-to-end tests for recommendations, upvotes, comments and queries."""

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


def _points(client) -> int:
    return client.get("/api/auth/me").json()["points"]


class TestRecommendationFlow:
    """Points move with recommendations, upvotes and comments."""

    def test_recommend_upvote_and_toggle_back(self, app_client):
        # Arrange
        alice = _login_as(app_client, "alice@acadly.edu", name="Dr. Alice")
        bob = _login_as(app_client, "bob@acadly.edu", name="Dr. Bob")

        # Act - Alice recommends
        created = alice.post(
            "/api/recommendations",
            json={
                "title": "NPTEL course on ML",
                "category": "Course",
                "description": "Free twelve week course with certification.",
            },
        )
        rec_id = created.json()["id"]

        # Assert
        assert created.status_code == 201
        assert _points(alice) == 5

        # Act - Bob upvotes
        first = bob.post(f"/api/recommendations/{rec_id}/upvote")
        assert first.json() == {"upvoted": True}
        assert _points(alice) == 6

        listing = bob.get("/api/recommendations").json()
        assert listing[0]["upvote_count"] == 1
        assert listing[0]["has_upvoted"] is True

        # Act - Bob toggles off
        second = bob.post(f"/api/recommendations/{rec_id}/upvote")
        assert second.json() == {"upvoted": False}
        assert _points(alice) == 5

        # Alice was told about the upvote
        notifications = alice.get("/api/notifications").json()
        assert [n["title"] for n in notifications] == ["New Upvote"]

    def test_comment_awards_points_and_shows_on_detail(self, app_client):
        # Arrange
        alice = _login_as(app_client, "alice@acadly.edu", name="Dr. Alice")
        bob = _login_as(app_client, "bob@acadly.edu", name="Dr. Bob")
        rec_id = alice.post(
            "/api/recommendations",
            json={
                "title": "Grammarly",
                "category": "Tool",
                "description": "Catches most issues in grant proposals.",
            },
        ).json()["id"]

        # Act
        comment = bob.post(
            f"/api/recommendations/{rec_id}/comments",
            json={"content": "Works well with Overleaf too."},
        )

        # Assert
        assert comment.status_code == 201
        assert _points(bob) == 3
        detail = alice.get(f"/api/recommendations/{rec_id}").json()
        assert detail["comments"][0]["author_name"] == "Dr. Bob"
        assert alice.get("/api/notifications/unread-count").json() == {"count": 1}

    def test_unknown_recommendation_is_404(self, app_client):
        alice = _login_as(app_client, "alice@acadly.edu")

        response = alice.get("/api/recommendations/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json()["detail"] == "Recommendation not found"

    def test_invalid_rating_is_400(self, app_client):
        alice = _login_as(app_client, "alice@acadly.edu")

        response = alice.post(
            "/api/recommendations",
            json={
                "title": "Too good",
                "category": "Book",
                "description": "Rated beyond the scale on purpose.",
                "rating": 6,
            },
        )

        assert response.status_code == 400
        assert "rating" in response.json()["detail"]


class TestQueryFlow:
    """Queries are raised by faculty and answered by HOD and above."""

    def test_missing_description_is_400(self, app_client):
        faculty = _login_as(app_client, "faculty@acadly.edu")

        response = faculty.post(
            "/api/queries", json={"title": "Broken chairs", "type": "Infrastructure"}
        )

        assert response.status_code == 400
        assert "description" in response.json()["detail"]
        assert faculty.get("/api/queries").json() == []
        assert faculty.get("/api/auth/me").json()["points"] == 0

    def test_hod_resolves_and_faculty_is_notified(self, app_client):
        # Arrange
        faculty = _login_as(app_client, "faculty@acadly.edu", name="Prof. Faculty")
        hod = _login_as(app_client, "hod@acadly.edu", role="hod", name="Dr. HOD")
        query_id = faculty.post(
            "/api/queries",
            json={
                "title": "Broken chairs",
                "description": "Room 12 has six broken chairs.",
                "type": "Infrastructure",
            },
        ).json()["id"]
        assert _points(faculty) == 3

        # Act
        response = hod.patch(
            f"/api/queries/{query_id}/respond",
            json={"response": "Replacements ordered.", "status": "resolved"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "resolved"
        assert faculty.get("/api/notifications/unread-count").json() == {"count": 1}
        notification = faculty.get("/api/notifications").json()[0]
        assert notification["message"] == (
            'Your query "Broken chairs" has been resolved by Dr. HOD'
        )

        # Mark it read
        read = faculty.patch(f"/api/notifications/{notification['id']}/read")
        assert read.status_code == 200
        assert faculty.get("/api/notifications/unread-count").json() == {"count": 0}

    def test_faculty_cannot_respond(self, app_client):
        # Arrange
        author = _login_as(app_client, "author@acadly.edu")
        other = _login_as(app_client, "other@acadly.edu")
        query_id = author.post(
            "/api/queries",
            json={
                "title": "Exam duty",
                "description": "Can duties be swapped this term?",
                "type": "Administrative",
            },
        ).json()["id"]

        # Act
        response = other.patch(
            f"/api/queries/{query_id}/respond",
            json={"response": "Sure.", "status": "resolved"},
        )

        # Assert
        assert response.status_code == 403
        assert response.json()["detail"] == "Insufficient permissions"
        assert author.get("/api/queries").json()[0]["status"] == "open"
