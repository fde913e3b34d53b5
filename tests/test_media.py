"""
tests/test_media.py
"""
from __future__ import annotations

import io

from PIL import Image


def _png_bytes(width: int = 4, height: int = 3) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color="red").save(buf, format="PNG")
    return buf.getvalue()


def _upload(client, content: bytes, filename: str, mimetype: str, **form):
    data = {"file": (io.BytesIO(content), filename, mimetype)}
    data.update(form)
    return client.post("/api/media/upload", data=data, content_type="multipart/form-data")


def test_list_files(client):
    data = client.get("/api/media").get_json()
    assert data["total"] == 4
    assert data["files"][0]["id"] == "1"


def test_filters(client):
    images = client.get("/api/media?type=image").get_json()
    assert images["total"] == 3
    assert images["filter"] == {"type": "image"}
    assert client.get("/api/media?type=pdf").get_json()["total"] == 1
    assert client.get("/api/media?folder=documents").get_json()["total"] == 1
    assert client.get("/api/media?search=collaboration").get_json()["total"] == 1
    assert client.get("/api/media?type=bogus").status_code == 400


def test_stats(client):
    stats = client.get("/api/media?stats=true").get_json()
    assert stats["totalFiles"] == 4
    assert stats["totalSize"] == 1024000 + 512000 + 768000 + 256000
    assert stats["byType"]["images"] == 3
    assert stats["byType"]["documents"] == 1
    assert {f["id"]: f["count"] for f in stats["byFolder"]} == {
        "uploads": 0, "blog-images": 3, "documents": 1,
    }


def test_upload_image_reads_dimensions(client):
    rv = _upload(client, _png_bytes(4, 3), "Red Dot.png", "image/png",
                 altText="A red dot", tags="red, dot ", folder="blog-images")
    assert rv.status_code == 201
    media = rv.get_json()["file"]
    assert media["originalName"] == "Red Dot.png"
    assert media["filename"].endswith("-red-dot.png")
    assert media["mimeType"] == "image/png"
    assert (media["width"], media["height"]) == (4, 3)
    assert media["url"].startswith("data:image/png;base64,")
    assert media["tags"] == ["red", "dot"]
    assert media["folder"] == "blog-images"

    assert client.get(f"/api/media/{media['id']}").get_json()["file"]["altText"] == "A red dot"


def test_upload_defaults_to_uploads_folder(client):
    rv = _upload(client, b"hello", "notes.txt", "text/plain")
    assert rv.status_code == 201
    media = rv.get_json()["file"]
    assert media["folder"] == "uploads"
    assert media["width"] is None


def test_upload_rejections(client):
    rv = client.post("/api/media/upload", data={}, content_type="multipart/form-data")
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "No file provided"

    rv = _upload(client, b"MZ", "tool.exe", "application/x-msdownload")
    assert rv.status_code == 415
    assert rv.get_json() == {"error": "File type not supported", "success": False}

    rv = _upload(client, b"hello", "notes.txt", "text/plain", folder="missing")
    assert rv.status_code == 400


def test_upload_too_large(client, app):
    app.config["MEDIA_MAX_UPLOAD_SIZE"] = 10
    rv = _upload(client, b"x" * 11, "big.txt", "text/plain")
    assert rv.status_code == 413
    assert rv.get_json()["error"] == "File size must be less than 10MB"


def test_update_metadata(client):
    rv = client.put("/api/media/1", json={"caption": "New caption", "tags": ["a", "b"], "size": 1})
    media = rv.get_json()["file"]
    assert media["caption"] == "New caption"
    assert media["tags"] == ["a", "b"]
    assert media["size"] == 1024000

    assert client.put("/api/media/missing", json={"caption": "x"}).status_code == 404


def test_delete_file(client):
    assert client.delete("/api/media/2").status_code == 200
    assert client.get("/api/media/2").status_code == 404


def test_folders(client):
    folders = client.get("/api/media/folders").get_json()["folders"]
    assert [f["id"] for f in folders] == ["blog-images", "documents", "uploads"]
    assert {f["id"]: f["mediaCount"] for f in folders}["blog-images"] == 3

    rv = client.post("/api/media/folders", json={"name": "Screenshots"})
    assert rv.status_code == 201
    folder = rv.get_json()["folder"]
    assert folder["slug"] == "screenshots"

    client.put("/api/media/3", json={"folder": folder["id"]})
    rv = client.delete(f"/api/media/folders/{folder['id']}")
    assert rv.status_code == 200
    assert rv.get_json()["moved"] == 1
    assert client.get("/api/media/3").get_json()["file"]["folder"] == "uploads"


def test_default_folders_cannot_be_deleted(client):
    rv = client.delete("/api/media/folders/uploads")
    assert rv.status_code == 400
    assert client.delete("/api/media/folders/missing").status_code == 404
    assert client.post("/api/media/folders", json={}).status_code == 400
