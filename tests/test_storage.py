"""
tests/test_storage.py
"""
from __future__ import annotations

import json

from blogdesk.storage import get_collection, get_settings_store, get_storage
from blogdesk.storage.local import LocalStorage


def test_collections_are_seeded_on_first_read(ctx):
    assert get_collection("posts").count() == 1
    assert get_collection("categories").count() == 4
    assert get_collection("comments").count() == 5
    assert get_collection("media_files").count() == 4
    assert get_collection("media_folders").count() == 3
    assert get_collection("users").count() == 3


def test_collection_crud(ctx):
    categories = get_collection("categories")
    record = {
        "id": "c-9", "name": "Travel", "slug": "travel", "description": None,
        "color": "#000000", "postCount": 0,
        "createdAt": "2024-01-15T10:00:00.000Z", "updatedAt": "2024-01-15T10:00:00.000Z",
    }
    categories.insert(record)
    assert categories.get("c-9")["name"] == "Travel"
    assert categories.get("c-9")["createdAt"] == "2024-01-15T10:00:00.000Z"

    record["name"] = "Trips"
    assert categories.put(record)["name"] == "Trips"
    assert categories.put({**record, "id": "missing"}) is None

    assert categories.delete("c-9") is True
    assert categories.delete("c-9") is False
    assert categories.get("c-9") is None


def test_json_fields_survive_storage(ctx):
    posts = get_collection("posts")
    post = posts.get("1")
    assert post["tags"] == ["welcome", "admin", "getting-started"]
    assert post["author"] == {"id": "admin-1", "name": "Admin User"}
    assert post["featuredImage"] is None


def test_settings_store_starts_empty(ctx):
    store = get_settings_store()
    assert store.load() is None
    store.save({"general": {"siteName": "X"}})
    assert store.load() == {"general": {"siteName": "X"}}


def test_local_snapshot_keys(local_app):
    with local_app.app_context():
        get_collection("posts").all()
        storage = get_storage().local_storage
        assert "blog_posts" in storage.keys()
        stored = json.loads(storage.get_item("blog_posts"))
        assert stored[0]["slug"] == "welcome-to-blog-admin"


def test_corrupt_local_value_falls_back_without_overwrite(local_app):
    with local_app.app_context():
        storage = get_storage().local_storage
        storage.set_item("blog_categories", "{not json")
        categories = get_collection("categories").all()
        assert len(categories) == 4
        assert storage.get_item("blog_categories") == "{not json"


def test_local_storage_file_persistence(tmp_path, local_app):
    path = tmp_path / "snapshot.json"
    with local_app.app_context():
        storage = LocalStorage(str(path))
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")
        assert LocalStorage(str(path)).keys() == ["b"]

        path.write_text("garbage", encoding="utf-8")
        assert LocalStorage(str(path)).get_item("b") is None

        storage.clear()
        assert storage.keys() == []
