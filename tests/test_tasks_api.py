"""Tests for the task endpoints."""

import json
from datetime import datetime

from .helpers import make_task

STANDUP = {"name": "Standup", "description": "Daily sync", "scheduledAt": "2024-01-02T09:00"}


class TestListTasks:
    def test_empty_store(self, client):
        response = client.get("/api/tasks")
        assert response.status_code == 200
        assert response.json() == []

    def test_returns_insertion_order(self, client, write_agenda):
        write_agenda([make_task(2, "2024-05-01T09:00"), make_task(1, "2024-01-01T09:00")])
        response = client.get("/api/tasks")
        assert [t["id"] for t in response.json()] == [2, 1]

    def test_stored_task_without_created_at_is_returned_as_stored(self, client, write_agenda):
        task = make_task(1, "2024-01-02T09:00")
        del task["createdAt"]
        write_agenda([task])

        first = client.get("/api/tasks").json()
        second = client.get("/api/tasks").json()
        assert first == second == [task]

    def test_corrupt_file_is_500(self, client, agenda_file):
        agenda_file.write_text("[oops", encoding="utf-8")
        response = client.get("/api/tasks")
        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}


class TestCreateTask:
    def test_create_on_empty_store(self, client):
        response = client.post("/api/tasks", json=STANDUP)
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Standup"
        assert data["description"] == "Daily sync"
        assert data["scheduledAt"] == "2024-01-02T09:00"
        assert data["createdAt"].endswith("Z")
        datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))

        listed = client.get("/api/tasks").json()
        assert len(listed) == 1
        assert listed[0] == data

    def test_ids_increase_from_previous_max(self, client, write_agenda):
        write_agenda([make_task(4, "2024-01-01T09:00")])
        ids = [client.post("/api/tasks", json=STANDUP).json()["id"] for _ in range(3)]
        assert ids == [5, 6, 7]

    def test_top_id_is_reissued_after_delete(self, client):
        client.post("/api/tasks", json=STANDUP)
        client.post("/api/tasks", json=STANDUP)
        client.delete("/api/tasks/2")
        assert client.post("/api/tasks", json=STANDUP).json()["id"] == 2

    def test_missing_or_empty_field_is_400(self, client, agenda_file):
        for field in ("name", "description", "scheduledAt"):
            missing = {k: v for k, v in STANDUP.items() if k != field}
            empty = dict(STANDUP, **{field: ""})
            for body in (missing, empty):
                response = client.post("/api/tasks", json=body)
                assert response.status_code == 400
                assert "error" in response.json()
        assert not agenda_file.exists()

    def test_non_object_body_is_400(self, client):
        response = client.post("/api/tasks", json=["Standup"])
        assert response.status_code == 400

    def test_invalid_body_leaves_file_untouched(self, client, write_agenda, agenda_file):
        write_agenda([make_task(1, "2024-01-01T09:00")])
        before = agenda_file.read_text(encoding="utf-8")
        client.post("/api/tasks", json={"name": "x"})
        assert agenda_file.read_text(encoding="utf-8") == before

    def test_any_present_value_is_accepted(self, client, agenda_file):
        response = client.post(
            "/api/tasks",
            json={"name": "Standup", "description": "Daily sync", "scheduledAt": 123},
        )
        assert response.status_code == 201
        assert response.json()["scheduledAt"] == 123
        stored = json.loads(agenda_file.read_text(encoding="utf-8"))["tasks"][0]
        assert stored["scheduledAt"] == 123

    def test_falsy_value_is_400(self, client):
        response = client.post("/api/tasks", json=dict(STANDUP, name=0))
        assert response.status_code == 400

    def test_save_failure_is_500(self, client, store, monkeypatch):
        monkeypatch.setattr(store, "save", lambda doc: False)
        response = client.post("/api/tasks", json=STANDUP)
        assert response.status_code == 500
        assert "error" in response.json()


class TestDeleteTask:
    def test_delete_existing(self, client, write_agenda, agenda_file):
        write_agenda([make_task(1, "2024-01-01T09:00"), make_task(2, "2024-01-01T10:00")])
        response = client.delete("/api/tasks/1")
        assert response.status_code == 200
        assert response.json() == {"message": "task removed"}
        stored = json.loads(agenda_file.read_text(encoding="utf-8"))["tasks"]
        assert [t["id"] for t in stored] == [2]

    def test_unknown_id_is_404_and_file_untouched(self, client, write_agenda, agenda_file):
        write_agenda([make_task(1, "2024-01-01T09:00")])
        before = agenda_file.read_text(encoding="utf-8")
        response = client.delete("/api/tasks/99")
        assert response.status_code == 404
        assert response.json() == {"error": "task not found"}
        assert agenda_file.read_text(encoding="utf-8") == before

    def test_id_taken_from_leading_digits(self, client, write_agenda):
        write_agenda([make_task(7, "2024-01-01T09:00")])
        assert client.delete("/api/tasks/7abc").status_code == 200

    def test_non_numeric_id_is_404(self, client, write_agenda):
        write_agenda([make_task(1, "2024-01-01T09:00")])
        assert client.delete("/api/tasks/abc").status_code == 404

    def test_save_failure_is_500(self, client, store, write_agenda, monkeypatch):
        write_agenda([make_task(1, "2024-01-01T09:00")])
        monkeypatch.setattr(store, "save", lambda doc: False)
        response = client.delete("/api/tasks/1")
        assert response.status_code == 500
        assert response.json() == {"error": "failed to remove task"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
