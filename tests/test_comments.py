"""
tests/test_comments.py
"""
from __future__ import annotations


def _comment(client, comment_id: str) -> dict:
    return client.get(f"/api/comments/{comment_id}").get_json()["comment"]


def test_list_newest_first(client):
    data = client.get("/api/comments").get_json()
    assert data["total"] == 5
    assert [c["id"] for c in data["comments"]] == ["3", "1", "2", "4", "5"]


def test_filters_dispatch(client):
    pending = client.get("/api/comments?status=pending").get_json()
    assert pending["filter"] == {"status": "pending"}
    assert [c["id"] for c in pending["comments"]] == ["3"]

    assert client.get("/api/comments?status=all").get_json()["total"] == 5
    assert client.get("/api/comments?postId=1").get_json()["total"] == 5
    assert client.get("/api/comments?postId=2").get_json()["total"] == 0

    flagged = client.get("/api/comments?flagged=true").get_json()["comments"]
    assert [c["id"] for c in flagged] == ["5"]

    found = client.get("/api/comments?search=SARAH").get_json()["comments"]
    assert [c["id"] for c in found] == ["2"]


def test_stats(client):
    stats = client.get("/api/comments?stats=true").get_json()
    assert stats["success"] is True
    assert stats["total"] == 5
    assert stats["approved"] == 3
    assert stats["pending"] == 1
    assert stats["spam"] == 1
    assert stats["trash"] == 0
    assert stats["averagePerPost"] == 5.0


def test_create_comment(client):
    rv = client.post("/api/comments", json={
        "postId": "1",
        "author": {"name": "Reader", "email": "reader@example.com"},
        "content": "Nice post",
    })
    assert rv.status_code == 201
    comment = rv.get_json()["comment"]
    assert comment["status"] == "pending"
    assert comment["postTitle"] == "Welcome to Your Blog Admin"
    assert comment["author"]["isRegistered"] is False
    assert comment["likes"] == 0
    assert comment["flagged"] is False


def test_create_with_plain_author_name(client):
    rv = client.post("/api/comments", json={"postId": "1", "author": "Anon", "content": "Hi"})
    assert rv.status_code == 201
    assert rv.get_json()["comment"]["author"]["name"] == "Anon"


def test_create_requires_fields(client):
    rv = client.post("/api/comments", json={"postId": "1", "content": "no author"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "author is required"


def test_pending_comment_becomes_visible_when_approved(client):
    approved_ids = lambda: [c["id"] for c in client.get("/api/comments?status=approved").get_json()["comments"]]
    assert "3" not in approved_ids()

    rv = client.put("/api/comments/3", json={"status": "approved"})
    assert rv.status_code == 200
    assert "3" in approved_ids()


def test_edit_marks_comment_edited(client):
    comment = client.put("/api/comments/1", json={"content": "Edited text"}).get_json()["comment"]
    assert comment["isEdited"] is True
    assert comment["updatedAt"] > comment["createdAt"]


def test_update_missing_comment(client):
    rv = client.put("/api/comments/nope", json={"status": "approved"})
    assert rv.status_code == 404
    assert rv.get_json()["error"] == "Comment not found"


def test_like_and_dislike(client):
    assert client.post("/api/comments/1/like").get_json()["comment"]["likes"] == 9
    assert client.post("/api/comments/1/dislike").get_json()["comment"]["dislikes"] == 1
    assert client.post("/api/comments/nope/like").status_code == 404


def test_delete_comment(client):
    assert client.delete("/api/comments/2").status_code == 200
    assert client.get("/api/comments/2").status_code == 404
    assert client.delete("/api/comments/2").status_code == 404


def test_bulk_delete_skips_unknown_ids(client):
    rv = client.post("/api/comments/bulk", json={"action": "delete", "commentIds": ["1", "2", "unknown"]})
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["deleted"] == 2
    assert data["message"] == "2 comments deleted"
    assert client.get("/api/comments").get_json()["total"] == 3


def test_bulk_update_status(client):
    rv = client.post("/api/comments/bulk", json={
        "action": "updateStatus", "commentIds": ["3", "5"], "status": "trash",
    })
    assert rv.get_json()["updated"] == 2
    assert _comment(client, "3")["status"] == "trash"

    rv = client.post("/api/comments/bulk", json={"action": "updateStatus", "commentIds": ["3"]})
    assert rv.status_code == 400


def test_bulk_flag_and_unflag(client):
    rv = client.post("/api/comments/bulk", json={"action": "flag", "commentIds": ["1"]})
    assert rv.get_json()["flagged"] == 1
    assert _comment(client, "1")["flagReasons"] == ["inappropriate"]

    rv = client.post("/api/comments/bulk", json={"action": "unflag", "commentIds": ["1", "5"]})
    assert rv.get_json()["unflagged"] == 2
    assert client.get("/api/comments?flagged=true").get_json()["total"] == 0


def test_bulk_rejects_bad_requests(client):
    rv = client.post("/api/comments/bulk", json={"action": "delete"})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "Invalid request. Action and commentIds array required."

    rv = client.post("/api/comments/bulk", json={"action": "delete", "commentIds": "1"})
    assert rv.status_code == 400

    rv = client.post("/api/comments/bulk", json={"action": "nuke", "commentIds": ["1"]})
    assert rv.status_code == 400
    assert rv.get_json()["error"].startswith("Invalid action. Supported:")


def test_bulk_with_empty_id_list_counts_zero(client):
    rv = client.post("/api/comments/bulk", json={"action": "delete", "commentIds": []})
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["deleted"] == 0
    assert data["message"] == "0 comments deleted"
    assert client.get("/api/comments").get_json()["total"] == 5
