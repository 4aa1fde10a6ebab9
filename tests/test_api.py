"""
HTTP-level tests: routes, status codes and error bodies.
"""

import pytest

from tests.factories import add_student


@pytest.fixture
def student_123(app, client):
    return add_student(app.state.database, student_id=123)


def post_schedule(client, **overrides):
    body = {
        "student_id": 123,
        "day": "2024-06-01",
        "start_time": "10:00:00",
        "end_time": "12:00:00",
        "state": "planned",
    }
    body.update(overrides)
    return client.post("/schedule", json=body)


class TestMeta:

    def test_root_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "message" in response.json()

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"


class TestStudentRoutes:

    def test_create_and_read_back(self, client):
        created = client.post("/students", json={"name": "Ada Lovelace", "email": "ada@example.com"})
        assert created.status_code == 200
        student_id = created.json()["id"]

        fetched = client.get(f"/students/{student_id}")

        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Ada Lovelace"
        assert fetched.json()["email"] == "ada@example.com"

    def test_invalid_body_is_400(self, client):
        response = client.post("/students", json={"name": "Ada Lovelace", "email": "not-an-email"})
        assert response.status_code == 400
        assert "email" in response.json()["error"]

    def test_missing_name_is_400(self, client):
        response = client.post("/students", json={"email": "ada@example.com"})
        assert response.status_code == 400

    def test_duplicate_email_is_500(self, client):
        client.post("/students", json={"name": "Ada Lovelace", "email": "ada@example.com"})
        response = client.post("/students", json={"name": "Other", "email": "ada@example.com"})
        assert response.status_code == 500
        assert "error" in response.json()

    def test_get_missing_is_404(self, client):
        response = client.get("/students/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Student 999 not found"}

    def test_partial_update(self, client):
        student_id = client.post("/students", json={"name": "Ada Lovelace", "email": "ada@example.com"}).json()["id"]

        response = client.put(f"/students/{student_id}", json={"name": "Ada King"})

        assert response.status_code == 200
        assert response.json()["name"] == "Ada King"
        assert response.json()["email"] == "ada@example.com"

    def test_update_missing_is_404(self, client):
        response = client.put("/students/999", json={"name": "Nobody"})
        assert response.status_code == 404

    def test_delete(self, client):
        student_id = client.post("/students", json={"name": "Ada Lovelace", "email": "ada@example.com"}).json()["id"]

        response = client.delete(f"/students/{student_id}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get(f"/students/{student_id}").status_code == 404

    def test_delete_keeps_their_schedules(self, client, student_123):
        assert post_schedule(client).status_code == 200

        response = client.delete("/students/123")

        assert response.status_code == 200
        assert client.get("/students/123").status_code == 404
        assert [s["student_id"] for s in client.get("/schedule/2024-06-01").json()] == [123]


class TestScheduleRoutes:

    def test_create_schedule(self, client, student_123):
        response = post_schedule(client)

        assert response.status_code == 200
        body = response.json()
        assert body["student_id"] == 123
        assert body["day"] == "2024-06-01"
        assert body["start_time"] == "10:00:00"
        assert body["end_time"] == "12:00:00"
        assert body["state"] == "planned"

    def test_overlap_example(self, client, student_123):
        assert post_schedule(client).status_code == 200

        rejected = post_schedule(client, start_time="11:00:00", end_time="13:00:00")
        accepted = post_schedule(client, start_time="13:00:00", end_time="14:00:00")

        assert rejected.status_code == 409
        assert "error" in rejected.json()
        assert accepted.status_code == 200
        assert len(client.get("/schedule/2024-06-01").json()) == 2

    @pytest.mark.parametrize("field,value", [
        ("day", "01/06/2024"),
        ("day", "2024-06-01 10:00"),
        ("day", "2024-6-1"),
        ("start_time", "10:00"),
        ("start_time", "10:0:0"),
        ("end_time", "noon"),
    ])
    def test_bad_formats_are_400(self, client, student_123, field, value):
        response = post_schedule(client, **{field: value})

        assert response.status_code == 400
        assert field in response.json()["error"]

    def test_list_by_day(self, client, student_123):
        post_schedule(client)
        post_schedule(client, day="2024-06-02")

        response = client.get("/schedule/2024-06-01")

        assert response.status_code == 200
        assert [s["day"] for s in response.json()] == ["2024-06-01"]

    def test_list_empty_day(self, client):
        response = client.get("/schedule/2024-06-01")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_bad_date_is_400(self, client):
        response = client.get("/schedule/June-1")
        assert response.status_code == 400

    def test_list_unpadded_date_is_400(self, client):
        response = client.get("/schedule/2024-6-1")
        assert response.status_code == 400

    def test_create_for_unknown_student_is_404(self, client):
        response = post_schedule(client, student_id=999)
        assert response.status_code == 404
        assert response.json() == {"error": "Student 999 not found"}

    def test_update_schedule(self, client, student_123):
        schedule_id = post_schedule(client).json()["id"]

        response = client.put(f"/schedule/{schedule_id}", json={"state": "completed", "end_time": "12:30:00"})

        assert response.status_code == 200
        assert response.json()["state"] == "completed"
        assert response.json()["end_time"] == "12:30:00"
        assert response.json()["start_time"] == "10:00:00"

    def test_update_bad_time_is_400(self, client, student_123):
        schedule_id = post_schedule(client).json()["id"]
        response = client.put(f"/schedule/{schedule_id}", json={"start_time": "10h"})
        assert response.status_code == 400

    def test_update_missing_is_404(self, client):
        response = client.put("/schedule/999", json={"state": "cancelled"})
        assert response.status_code == 404

    def test_delete_schedule(self, client, student_123):
        schedule_id = post_schedule(client).json()["id"]

        response = client.delete(f"/schedule/{schedule_id}")

        assert response.status_code == 200
        assert client.get("/schedule/2024-06-01").json() == []

    def test_delete_missing_schedule_succeeds(self, client):
        response = client.delete("/schedule/999")
        assert response.status_code == 200
        assert response.json()["success"] is True
