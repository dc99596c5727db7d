# tests/test_api.py

import pytest
from fastapi.testclient import TestClient

from app.main import app

from .conftest import TEST_API_KEY


@pytest.fixture()
def client():
    with TestClient(app, headers={"x-api-key": TEST_API_KEY}) as test_client:
        yield test_client


@pytest.fixture()
def anonymous_client():
    with TestClient(app) as test_client:
        yield test_client


def _create_task(client, **overrides):
    payload = {"title": "Ship release", "workspace": "WORK"}
    payload.update(overrides)
    response = client.post("/api/tasks", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_health_is_public(anonymous_client):
    response = anonymous_client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert "timestamp" in body and "uptime" in body


def test_missing_api_key_is_rejected(anonymous_client):
    response = anonymous_client.get("/api/tasks")

    assert response.status_code == 401
    assert response.json()["detail"] == "API key is missing"


def test_wrong_api_key_is_rejected(anonymous_client):
    response = anonymous_client.get("/api/tasks", headers={"x-api-key": "nope"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid API key"


def test_create_task_uses_camel_case_and_defaults(client):
    task = _create_task(client, dueDate="2025-06-01", isRoutine=True)

    assert task["status"] == "BACKLOG"
    assert task["isRoutine"] is True
    assert task["channelId"] is None
    assert task["channel"] is None
    assert task["dueDate"].startswith("2025-06-01T00:00:00")
    assert {"id", "createdAt", "updatedAt", "description", "workspace"} <= task.keys()


def test_task_crud_and_filters(client):
    first = _create_task(client, title="work item")
    second = _create_task(client, title="home item", workspace="PERSONAL", status="TODAY")

    listed = client.get("/api/tasks").json()
    assert [t["id"] for t in listed] == [second["id"], first["id"]]

    personal = client.get("/api/tasks", params={"workspace": "PERSONAL", "status": "TODAY"}).json()
    assert [t["id"] for t in personal] == [second["id"]]

    patched = client.patch(f"/api/tasks/{first['id']}", json={"status": "IN_PROGRESS"})
    assert patched.status_code == 200
    assert patched.json()["status"] == "IN_PROGRESS"
    assert patched.json()["title"] == "work item"

    deleted = client.delete(f"/api/tasks/{first['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == first["id"]

    missing = client.get(f"/api/tasks/{first['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == f"Task with ID {first['id']} not found"


def test_validation_errors_map_to_400(client):
    assert client.post("/api/tasks", json={"workspace": "WORK"}).status_code == 400
    assert client.post("/api/tasks", json={"title": "x", "workspace": "OFFICE"}).status_code == 400
    assert client.get("/api/tasks", params={"status": "ARCHIVED"}).status_code == 400
    assert client.get("/api/tasks/not-a-number").status_code == 400


def test_subtask_endpoints(client):
    task = _create_task(client)

    created = client.post(f"/api/tasks/{task['id']}/subtasks", json={"title": "Write changelog"})
    assert created.status_code == 201
    subtask = created.json()
    assert subtask["position"] == 0
    assert subtask["status"] == "TODO"
    assert subtask["taskId"] == task["id"]
    assert subtask["task"]["id"] == task["id"]

    done = client.patch(f"/api/subtasks/{subtask['id']}", json={"status": "DONE"}).json()
    assert done["completedAt"] is not None

    todo = client.patch(f"/api/subtasks/{subtask['id']}", json={"status": "TODO"}).json()
    assert todo["completedAt"] is None

    moved = client.patch(f"/api/subtasks/{subtask['id']}/reorder", json={"position": 4}).json()
    assert moved["position"] == 4

    listed = client.get(f"/api/tasks/{task['id']}/subtasks").json()
    assert [s["id"] for s in listed] == [subtask["id"]]

    assert client.get("/api/tasks/999/subtasks").status_code == 404
    assert client.post("/api/tasks/999/subtasks", json={"title": "x"}).status_code == 404
    assert client.patch(f"/api/subtasks/{subtask['id']}/reorder", json={"position": -1}).status_code == 400

    assert client.delete(f"/api/subtasks/{subtask['id']}").status_code == 200
    assert client.get(f"/api/subtasks/{subtask['id']}").status_code == 404


def test_tag_endpoints_and_associations(client):
    task = _create_task(client)

    created = client.post("/api/tags", json={"name": "urgent", "color": "#F97316", "workspaces": ["WORK"]})
    assert created.status_code == 201
    tag = created.json()
    assert tag["workspaces"] == ["WORK"]

    duplicate = client.post("/api/tags", json={"name": "urgent", "color": "#000000", "workspaces": []})
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == 'Tag with name "urgent" already exists'

    assert client.post("/api/tags", json={"name": "bad", "color": "orange", "workspaces": []}).status_code == 400

    link = f"/api/tags/tasks/{task['id']}/tags/{tag['id']}"
    added = client.post(link)
    assert added.status_code == 204
    assert added.content == b""
    assert client.post(link).status_code == 409

    detail = client.get(f"/api/tags/{tag['id']}").json()
    assert [tt["taskId"] for tt in detail["taskTags"]] == [task["id"]]
    assert detail["taskTags"][0]["task"]["title"] == "Ship release"

    assert client.get("/api/tags", params={"workspace": "PERSONAL"}).json() == []
    assert [t["name"] for t in client.get("/api/tags", params={"workspace": "WORK"}).json()] == ["urgent"]

    renamed = client.patch(f"/api/tags/{tag['id']}", json={"name": "urgent", "workspaces": ["PERSONAL"]})
    assert renamed.status_code == 200
    assert renamed.json()["workspaces"] == ["PERSONAL"]

    assert client.delete(link).status_code == 204
    assert client.delete(link).status_code == 404

    assert client.delete(f"/api/tags/{tag['id']}").status_code == 200
    assert client.get(f"/api/tags/{tag['id']}").status_code == 404


def test_channel_endpoints(client):
    assert client.get("/api/channels").json() == []
    assert client.get("/api/channels/1").status_code == 404
