"""
tests/test_categories.py
"""
from __future__ import annotations


def _categories(client) -> dict:
    rv = client.get("/api/categories")
    assert rv.status_code == 200
    return {c["slug"]: c for c in rv.get_json()["categories"]}


def test_list_is_sorted_and_counted(client):
    rv = client.get("/api/categories")
    data = rv.get_json()
    assert data["total"] == 4
    names = [c["name"] for c in data["categories"]]
    assert names == sorted(names)
    counts = {c["slug"]: c["postCount"] for c in data["categories"]}
    assert counts == {"general": 1, "business": 0, "technology": 0, "lifestyle": 0}


def test_create_generates_slug_and_default_color(client):
    rv = client.post("/api/categories", json={"name": "Test Category"})
    assert rv.status_code == 201
    category = rv.get_json()["category"]
    assert category["slug"] == "test-category"
    assert category["color"] == "#3B82F6"
    assert category["postCount"] == 0
    assert category["createdAt"] == category["updatedAt"]

    rv = client.get(f"/api/categories/{category['id']}")
    assert rv.get_json()["category"]["name"] == "Test Category"


def test_create_requires_name(client):
    rv = client.post("/api/categories", json={"description": "nameless"})
    assert rv.status_code == 400
    assert rv.get_json() == {"error": "Category name is required", "success": False}


def test_create_rejects_bad_color_and_duplicate_slug(client):
    rv = client.post("/api/categories", json={"name": "Colors", "color": "blue"})
    assert rv.status_code == 400

    rv = client.post("/api/categories", json={"name": "General"})
    assert rv.status_code == 400
    assert "already exists" in rv.get_json()["error"]


def test_publishing_a_post_bumps_post_count(client, make_post):
    category = client.post("/api/categories", json={"name": "Test Category"}).get_json()["category"]

    draft = make_post(title="Draft in category", categoryId=category["id"])
    assert draft["categoryName"] == "Test Category"
    assert _categories(client)["test-category"]["postCount"] == 0

    client.put(f"/api/posts/{draft['id']}", json={"status": "published"})
    assert _categories(client)["test-category"]["postCount"] == 1


def test_rename_regenerates_slug(client):
    rv = client.put("/api/categories/2", json={"name": "Business & Finance"})
    assert rv.status_code == 200
    category = rv.get_json()["category"]
    assert category["slug"] == "business-finance"
    assert category["updatedAt"] >= category["createdAt"]


def test_update_and_delete_missing_category(client):
    rv = client.put("/api/categories/nope", json={"name": "X"})
    assert rv.status_code == 404
    assert rv.get_json()["error"] == "Category not found"

    rv = client.delete("/api/categories/nope")
    assert rv.status_code == 404


def test_delete_category(client):
    rv = client.delete("/api/categories/4")
    assert rv.status_code == 200
    assert rv.get_json()["success"] is True
    assert "lifestyle" not in _categories(client)
    assert client.get("/api/categories/4").status_code == 404
