# tests/test_todos_api.py

from __future__ import annotations

from datetime import datetime

from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from app.db.models.todos import Todo
from app.db.models.users import User
from app.db.repositories.todos import TodoRepository


def _create(client, **body):
    return client.post("/api/todos", json=body)


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "OK"
    assert "timestamp" in data


def test_buy_milk_scenario(client, user):
    r = _create(client, title="Buy milk", user_id="u1")
    assert r.status_code == 201
    todo = r.json()["todo"]
    assert todo["is_completed"] is False
    assert todo["completed_at"] is None
    todo_id = todo["id"]

    r = client.put(f"/api/todos/{todo_id}", json={"is_completed": True})
    assert r.status_code == 200
    assert r.json()["todo"]["completed_at"] is not None

    r = client.delete(f"/api/todos/{todo_id}")
    assert r.status_code == 200
    assert r.json() == {"message": "Todo deleted successfully"}

    r = client.get(f"/api/todos/{todo_id}")
    assert r.status_code == 404
    assert r.json() == {"error": "Todo not found"}


def test_create_generates_distinct_ids(client, user):
    ids = {_create(client, title=f"t{i}", user_id="u1").json()["todo"]["id"] for i in range(5)}
    assert len(ids) == 5


def test_create_forces_is_completed_false(client, user):
    r = _create(client, title="Sneaky", user_id="u1", is_completed=True)
    assert r.status_code == 201
    assert r.json()["todo"]["is_completed"] is False
    assert r.json()["todo"]["completed_at"] is None


def test_create_with_optional_fields(client, user):
    r = _create(
        client,
        title="Report",
        user_id="u1",
        description="quarterly",
        due_date="2025-03-01T09:30:00Z",
    )
    assert r.status_code == 201
    todo = r.json()["todo"]
    assert todo["description"] == "quarterly"
    assert todo["due_date"].startswith("2025-03-01T09:30:00")
    assert todo["user_id"] == "u1"


def test_create_requires_title_and_user_id(client, user):
    for body in ({"user_id": "u1"}, {"title": "No owner"}, {"title": "   ", "user_id": "u1"}, {}):
        r = _create(client, **body)
        assert r.status_code == 400
        assert r.json() == {"error": "Title and user_id are required"}


def test_create_rejects_unknown_user(client):
    r = _create(client, title="Orphan", user_id="nobody")
    assert r.status_code == 400
    assert "error" in r.json()


def test_create_rejects_malformed_body(client, user):
    r = client.post("/api/todos", content=b"{not json", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()

    r = _create(client, title="x" * 256, user_id="u1")
    assert r.status_code == 400


def test_list_returns_all_todos(client, user):
    assert client.get("/api/todos").json() == {"todos": []}
    _create(client, title="a", user_id="u1")
    _create(client, title="b", user_id="u1")
    todos = client.get("/api/todos").json()["todos"]
    assert sorted(t["title"] for t in todos) == ["a", "b"]


def test_update_is_partial(client, user):
    todo = _create(client, title="Original", user_id="u1", description="keep me").json()["todo"]

    r = client.put(f"/api/todos/{todo['id']}", json={"title": "Renamed"})
    assert r.status_code == 200
    updated = r.json()["todo"]
    assert updated["title"] == "Renamed"
    assert updated["description"] == "keep me"
    assert updated["is_completed"] is False


def test_update_completion_round_trip(client, user):
    todo_id = _create(client, title="Toggle me", user_id="u1").json()["todo"]["id"]

    done = client.put(f"/api/todos/{todo_id}", json={"is_completed": True}).json()["todo"]
    assert done["is_completed"] is True
    assert done["completed_at"] is not None

    undone = client.put(f"/api/todos/{todo_id}", json={"is_completed": False}).json()["todo"]
    assert undone["is_completed"] is False
    assert undone["completed_at"] is None


def test_update_clears_due_date(client, user):
    todo_id = _create(client, title="Due", user_id="u1", due_date="2025-03-01T00:00:00Z").json()["todo"]["id"]
    r = client.put(f"/api/todos/{todo_id}", json={"due_date": None})
    assert r.status_code == 200
    assert r.json()["todo"]["due_date"] is None


def test_blank_due_date_is_treated_as_null(client, user):
    r = _create(client, title="No date", user_id="u1", due_date="")
    assert r.status_code == 201
    assert r.json()["todo"]["due_date"] is None

    todo_id = _create(client, title="Dated", user_id="u1", due_date="2025-03-01T00:00:00Z").json()["todo"]["id"]
    r = client.put(f"/api/todos/{todo_id}", json={"due_date": ""})
    assert r.status_code == 200
    assert r.json()["todo"]["due_date"] is None


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_every_update_refreshes_updated_at(client, user):
    created = _create(client, title="Stamp", user_id="u1").json()["todo"]

    r = client.put(f"/api/todos/{created['id']}", json={})
    assert r.status_code == 200
    first = r.json()["todo"]
    assert _ts(first["updated_at"]) > _ts(created["updated_at"])
    assert first["created_at"] == created["created_at"]

    second = client.put(f"/api/todos/{created['id']}", json={"title": "Stamp 2"}).json()["todo"]
    assert _ts(second["updated_at"]) > _ts(first["updated_at"])


def test_update_rejects_empty_title(client, user):
    todo_id = _create(client, title="Keep", user_id="u1").json()["todo"]["id"]
    r = client.put(f"/api/todos/{todo_id}", json={"title": None})
    assert r.status_code == 400
    assert client.get(f"/api/todos/{todo_id}").json()["todo"]["title"] == "Keep"


def test_unknown_ids_are_404(client):
    assert client.get("/api/todos/does-not-exist").status_code == 404
    assert client.put("/api/todos/does-not-exist", json={"title": "x"}).status_code == 404
    assert client.delete("/api/todos/does-not-exist").status_code == 404


def test_store_failure_is_500_without_details(client, monkeypatch):
    def boom(self):
        raise OperationalError("SELECT * FROM todos", {}, Exception("disk I/O error"))

    monkeypatch.setattr(TodoRepository, "list_all", boom)
    r = client.get("/api/todos")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch todos"}


def test_deleting_user_cascades_to_todos(client, user, session: Session):
    _create(client, title="owned", user_id="u1")
    assert len(session.exec(select(Todo)).all()) == 1

    session.delete(session.get(User, "u1"))
    session.commit()

    assert session.exec(select(Todo)).all() == []
    assert client.get("/api/todos").json() == {"todos": []}


def test_routing_errors_use_error_envelope(client):
    r = client.get("/api/todos/a/b")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}

    r = client.patch("/api/todos")
    assert r.status_code == 405
    assert r.json() == {"error": "Method Not Allowed"}
