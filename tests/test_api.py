"""
HTTP-level tests for the REST API and its response envelope.
"""

import time

from fastapi.testclient import TestClient

from auth.jwt import create_token
from conftest import auth_header, register
from main import create_app
from database.store import InMemoryStore


class TestSystemRoutes:
    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["version"] == "1.0.0"
        assert "POST /api/register - register a user" in body["endpoints"]["auth"]

    def test_health_counts(self, client, alice_token):
        client.post("/api/projects", json={"name": "P1"}, headers=auth_header(alice_token))
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["data"] == {"users": 1, "projects": 1, "tasks": 0}
        assert "timestamp" in body

    def test_unknown_route_uses_envelope(self, client):
        resp = client.get("/api/nothing-here")
        assert resp.status_code == 404
        assert resp.json()["success"] is False

    def test_process_time_header(self, client):
        assert "x-process-time" in client.get("/api/health").headers

    def test_apps_do_not_share_state(self, client, alice_token):
        other = create_app(InMemoryStore())
        assert TestClient(other).get("/api/health").json()["data"]["users"] == 0

    def test_unhandled_error_is_generic_500(self):
        app = create_app(InMemoryStore())

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret internals")

        resp = TestClient(app, raise_server_exceptions=False).get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "message": "Internal server error"}


class TestRegisterAndLogin:
    def test_register(self, client):
        resp = register(client)
        assert resp.status_code == 201
        body = resp.json()
        assert body["success"] is True
        assert body["token"]
        assert body["user"] == {"id": 1, "username": "alice", "email": "a@x.com"}
        assert "password_hash" not in resp.text

    def test_duplicate_email(self, client):
        register(client)
        resp = register(client, username="alice2")
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_missing_field(self, client):
        resp = client.post("/api/register", json={"username": "alice", "email": "a@x.com"})
        assert resp.status_code == 400
        assert resp.json() == {
            "success": False,
            "message": "username, email and password are required",
        }

    def test_missing_body(self, client):
        resp = client.post("/api/register")
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_login(self, client):
        user_id = register(client).json()["user"]["id"]
        resp = client.post("/api/login", json={"email": "a@x.com", "password": "pw123"})
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user_id
        assert resp.json()["token"]

    def test_login_wrong_password(self, client):
        register(client)
        resp = client.post("/api/login", json={"email": "a@x.com", "password": "wrong"})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_login_unknown_email(self, client):
        resp = client.post("/api/login", json={"email": "no@x.com", "password": "pw123"})
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_login_missing_password(self, client):
        resp = client.post("/api/login", json={"email": "a@x.com"})
        assert resp.status_code == 400


class TestGate:
    def test_missing_token_is_401(self, client):
        resp = client.get("/api/projects")
        assert resp.status_code == 401
        assert resp.json()["success"] is False

    def test_invalid_token_is_403(self, client):
        resp = client.get("/api/projects", headers=auth_header("forged.token"))
        assert resp.status_code == 403
        assert resp.json()["success"] is False

    def test_expired_token_is_403(self, client, alice_token):
        stale = create_token(1, "a@x.com", now=time.time() - 24 * 3600 - 5)
        resp = client.get("/api/projects", headers=auth_header(stale))
        assert resp.status_code == 403

    def test_every_resource_route_is_guarded(self, client):
        calls = [
            ("get", "/api/projects"),
            ("post", "/api/projects"),
            ("get", "/api/projects/1/tasks"),
            ("post", "/api/projects/1/tasks"),
            ("put", "/api/tasks/1"),
            ("delete", "/api/tasks/1"),
        ]
        for method, path in calls:
            assert getattr(client, method)(path).status_code == 401, path


class TestProjects:
    def test_create_and_list(self, client, alice_token):
        headers = auth_header(alice_token)
        resp = client.post("/api/projects", json={"name": "P1"}, headers=headers)
        assert resp.status_code == 201
        project = resp.json()["data"]
        assert project["id"] == 1
        assert project["owner_user_id"] == 1
        assert project["description"] == ""

        resp = client.get("/api/projects", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["total"] == 1
        assert resp.json()["data"][0]["name"] == "P1"

    def test_name_required(self, client, alice_token):
        resp = client.post("/api/projects", json={}, headers=auth_header(alice_token))
        assert resp.status_code == 400

    def test_projects_are_private_to_owner(self, client, alice_token):
        bob_token = register(client, "bob", "b@x.com").json()["token"]
        client.post("/api/projects", json={"name": "Bob's"}, headers=auth_header(bob_token))
        client.post("/api/projects", json={"name": "Alice's"}, headers=auth_header(alice_token))

        alice_projects = client.get("/api/projects", headers=auth_header(alice_token)).json()
        assert [p["name"] for p in alice_projects["data"]] == ["Alice's"]
        assert alice_projects["total"] == 1


class TestTasks:
    def test_create_defaults(self, client, alice_token):
        resp = client.post(
            "/api/projects/1/tasks", json={"title": "T1"}, headers=auth_header(alice_token)
        )
        assert resp.status_code == 201
        task = resp.json()["data"]
        assert task["status"] == "todo"
        assert task["priority"] == "medium"
        assert task["assignee"] == "alice"
        assert task["project_id"] == 1

    def test_title_required(self, client, alice_token):
        resp = client.post("/api/projects/1/tasks", json={}, headers=auth_header(alice_token))
        assert resp.status_code == 400

    def test_non_integer_project_id(self, client, alice_token):
        resp = client.get("/api/projects/abc/tasks", headers=auth_header(alice_token))
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_invalid_status_is_400_and_unchanged(self, client, alice_token):
        headers = auth_header(alice_token)
        client.post("/api/projects/1/tasks", json={"title": "T1"}, headers=headers)
        resp = client.put("/api/tasks/1", json={"status": "archived"}, headers=headers)
        assert resp.status_code == 400
        tasks = client.get("/api/projects/1/tasks", headers=headers).json()["data"]
        assert tasks[0]["status"] == "todo"

    def test_update_missing_task(self, client, alice_token):
        resp = client.put("/api/tasks/99", json={"status": "done"}, headers=auth_header(alice_token))
        assert resp.status_code == 404

    def test_any_user_may_update_any_task(self, client, alice_token):
        client.post("/api/projects/1/tasks", json={"title": "T1"}, headers=auth_header(alice_token))
        bob_token = register(client, "bob", "b@x.com").json()["token"]
        resp = client.put(
            "/api/tasks/1", json={"status": "inprogress"}, headers=auth_header(bob_token)
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "inprogress"

    def test_default_assignee_falls_back_to_token_email(self, client):
        # token for a user that is not in this process's store
        token = create_token(42, "ghost@x.com")
        resp = client.post("/api/projects/1/tasks", json={"title": "T"}, headers=auth_header(token))
        assert resp.status_code == 201
        assert resp.json()["data"]["assignee"] == "ghost@x.com"


class TestEndToEnd:
    def test_full_flow(self, client):
        resp = register(client, "alice", "a@x.com", "pw123")
        assert resp.status_code == 201
        token = resp.json()["token"]
        user_id = resp.json()["user"]["id"]

        resp = client.post("/api/login", json={"email": "a@x.com", "password": "pw123"})
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user_id

        resp = client.post("/api/login", json={"email": "a@x.com", "password": "wrong"})
        assert resp.status_code == 400

        headers = auth_header(token)
        resp = client.post("/api/projects", json={"name": "P1"}, headers=headers)
        assert resp.status_code == 201
        assert resp.json()["data"]["id"] == 1

        resp = client.post("/api/projects/1/tasks", json={"title": "T1"}, headers=headers)
        assert resp.status_code == 201
        assert resp.json()["data"]["status"] == "todo"

        resp = client.put("/api/tasks/1", json={"status": "done"}, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "done"

        resp = client.delete("/api/tasks/1", headers=headers)
        assert resp.status_code == 200
        assert resp.json() == {"success": True, "message": "Task deleted"}

        resp = client.get("/api/projects/1/tasks", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["data"] == []
        assert resp.json()["total"] == 0

        resp = client.delete("/api/tasks/1", headers=headers)
        assert resp.status_code == 404
        assert resp.json()["success"] is False
