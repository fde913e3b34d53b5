"""
tests/test_users.py
"""
from __future__ import annotations


def test_list_users_hides_password_hash(client):
    data = client.get("/api/users").get_json()
    assert data["total"] == 3
    # 按最近登录倒序
    assert [u["id"] for u in data["users"]] == ["admin-1", "editor-1", "author-1"]
    assert all("passwordHash" not in u for u in data["users"])


def test_create_user_defaults(client):
    rv = client.post("/api/users", json={"name": "New Person", "email": "new@example.com"})
    assert rv.status_code == 201
    user = rv.get_json()["user"]
    assert user["role"] == "subscriber"
    assert user["status"] == "active"
    assert user["permissions"] == ["posts.read", "comments.create"]
    assert user["postsCount"] == 0
    assert "passwordHash" not in user


def test_create_user_validation(client):
    rv = client.post("/api/users", json={"name": "No Email"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Name and email are required"

    rv = client.post("/api/users", json={"name": "Bad", "email": "not-an-email"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Invalid email address"

    rv = client.post("/api/users", json={"name": "Dup", "email": "ADMIN@example.com"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Email already exists"

    rv = client.post("/api/users", json={"name": "R", "email": "r@example.com", "role": "owner"})
    assert rv.status_code == 400

    rv = client.post("/api/users", json={"name": "P", "email": "p@example.com", "password": "123"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Password must be at least 6 characters"


def test_role_change_updates_permissions(client):
    rv = client.put("/api/users/author-1", json={"role": "editor"})
    assert rv.status_code == 200
    user = rv.get_json()["user"]
    assert user["role"] == "editor"
    assert "categories.manage" in user["permissions"]


def test_get_update_delete(client):
    assert client.get("/api/users/editor-1").get_json()["user"]["name"] == "Sarah Editor"
    assert client.get("/api/users/missing").status_code == 404

    rv = client.put("/api/users/editor-1", json={"bio": "Updated bio"})
    assert rv.get_json()["user"]["bio"] == "Updated bio"
    assert client.put("/api/users/missing", json={"bio": "x"}).status_code == 404

    assert client.delete("/api/users/editor-1").status_code == 200
    assert client.get("/api/users/editor-1").status_code == 404
