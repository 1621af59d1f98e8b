# devport/services/media.py
"""
Media upload handling.

Uploads are streamed to the local upload directory under a random name
and served back statically from /uploads. There is no deduplication.
"""
import re
import secrets
from pathlib import Path
from typing import Optional

import aiofiles
from fastapi import UploadFile

from devport.core.config import settings
from devport.core.exceptions import PayloadTooLargeError, ValidationError
from devport.core.logging import log
from devport.models import MediaCreate

CHUNK_SIZE = 1024 * 1024


def is_allowed_type(filename: str, content_type: Optional[str]) -> bool:
    """Both the extension and the MIME type must match the allow-list."""
    allowed = re.compile(settings.uploads.allowed_types)
    ext = Path(filename).suffix.lower()
    return bool(ext and allowed.search(ext)) and bool(content_type and allowed.search(content_type))


async def save_upload(upload: Optional[UploadFile]) -> MediaCreate:
    if upload is None or not upload.filename:
        raise ValidationError("No file uploaded")

    if not is_allowed_type(upload.filename, upload.content_type):
        raise ValidationError("Invalid file type")

    upload_dir = settings.uploads.upload_dir
    upload_dir.mkdir(parents=True, exist_ok=True)

    limit = settings.uploads.max_upload_bytes
    filename = secrets.token_hex(16) + Path(upload.filename).suffix.lower()
    target = upload_dir / filename

    size = 0
    async with aiofiles.open(target, "wb") as out:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            size += len(chunk)
            if size > limit:
                break
            await out.write(chunk)

    if size > limit:
        target.unlink(missing_ok=True)
        log("MEDIA", f"Rejected {upload.filename}: over {limit} bytes")
        raise PayloadTooLargeError(limit)

    log("MEDIA", f"Stored {upload.filename} as {filename} ({size} bytes)")
    return MediaCreate(
        filename=filename,
        original_name=upload.filename,
        mime_type=upload.content_type,
        size=size,
        url=f"{settings.uploads.url_prefix}/{filename}",
    )


def remove_upload(filename: str) -> None:
    path = settings.uploads.upload_dir / Path(filename).name
    path.unlink(missing_ok=True)
