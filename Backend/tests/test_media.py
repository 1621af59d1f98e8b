# tests/test_media.py
"""CreativePort media uploads."""
import pytest

from devport.core.config import settings
from devport.core.exceptions import StorageError
from devport.services.media import is_allowed_type

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


async def upload(client, headers, name="photo.png", body=PNG_BYTES, content_type="image/png"):
    return await client.post("/api/media", files={"file": (name, body, content_type)}, headers=headers)


@pytest.mark.anyio
async def test_upload_is_recorded_and_served(client, owner_headers):
    response = await upload(client, owner_headers)
    assert response.status_code == 201
    media = response.json()
    assert media["originalName"] == "photo.png"
    assert media["mimeType"] == "image/png"
    assert media["size"] == len(PNG_BYTES)
    assert media["filename"].endswith(".png")
    assert media["url"] == f"/uploads/{media['filename']}"

    served = await client.get(media["url"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES


@pytest.mark.anyio
async def test_upload_extension_lowercased(client, owner_headers):
    media = (await upload(client, owner_headers, name="SHOT.JPG", content_type="image/jpeg")).json()
    assert media["filename"].endswith(".jpg")


@pytest.mark.anyio
@pytest.mark.parametrize("name,content_type", [
    ("notes.txt", "text/plain"),
    ("photo.png", "text/plain"),
    ("script.exe", "image/png"),
    ("no_extension", "image/png"),
])
async def test_disallowed_type_rejected(client, owner_headers, name, content_type):
    response = await upload(client, owner_headers, name=name, content_type=content_type)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid file type"}


@pytest.mark.anyio
async def test_missing_file_rejected(client, owner_headers):
    response = await client.post(
        "/api/media", files={"attachment": ("a.png", PNG_BYTES, "image/png")}, headers=owner_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"message": "No file uploaded"}


@pytest.mark.anyio
async def test_oversized_upload_rejected(client, owner_headers, monkeypatch):
    monkeypatch.setattr(settings.uploads, "max_upload_bytes", 16)
    before = set(settings.uploads.upload_dir.iterdir())

    response = await upload(client, owner_headers)
    assert response.status_code == 413

    assert set(settings.uploads.upload_dir.iterdir()) == before
    assert (await client.get("/api/media", headers=owner_headers)).json() == []


@pytest.mark.anyio
async def test_media_listing_is_per_user(client, owner_headers, stranger_headers):
    await upload(client, owner_headers)
    await upload(client, stranger_headers, name="theirs.gif", content_type="image/gif")

    mine = (await client.get("/api/media", headers=owner_headers)).json()
    assert [m["originalName"] for m in mine] == ["photo.png"]


@pytest.mark.anyio
async def test_delete_media_removes_file(client, owner_headers, stranger_headers):
    media = (await upload(client, owner_headers)).json()
    path = settings.uploads.upload_dir / media["filename"]
    assert path.exists()

    assert (await client.delete(f"/api/media/{media['id']}", headers=stranger_headers)).status_code == 403

    response = await client.delete(f"/api/media/{media['id']}", headers=owner_headers)
    assert response.status_code == 200
    assert not path.exists()
    assert (await client.delete(f"/api/media/{media['id']}", headers=owner_headers)).status_code == 404


@pytest.mark.anyio
async def test_upload_requires_identity(client):
    response = await client.post("/api/media", files={"file": ("photo.png", PNG_BYTES, "image/png")})
    assert response.status_code == 401


def test_allow_list_checks_extension_and_mime_type():
    assert is_allowed_type("clip.MOV", "video/quicktime") is False
    assert is_allowed_type("clip.mov", "video/mov") is True
    assert is_allowed_type("cv.pdf", "application/pdf") is True
    assert is_allowed_type("cv.pdf", None) is False


@pytest.mark.anyio
async def test_failed_record_insert_removes_file(client, owner_headers, portfolio_storage, monkeypatch):
    async def broken_create_media(user_id, data):
        raise StorageError("insert failed")

    monkeypatch.setattr(portfolio_storage, "create_media", broken_create_media)
    before = set(settings.uploads.upload_dir.iterdir())

    response = await upload(client, owner_headers)
    assert response.status_code == 500

    assert set(settings.uploads.upload_dir.iterdir()) == before
