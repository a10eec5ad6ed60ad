"""
Upload service for place photos, from the client device or from a link.

Files are stored flat in UPLOAD_DIR under unique names; the file name is the
photo reference kept on places.
"""
from fastapi import UploadFile
from typing import List
from urllib.parse import urlparse
import httpx
import logging
import os
import uuid
from staybook.core.config import settings
from staybook.core.exceptions import DownloadFailed, InvalidUpload

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}


def _unique_filename(original_name: str, prefix: str = "") -> str:
    """Generate a unique file name, keeping a known image extension."""
    file_ext = os.path.splitext(original_name or "")[1].lower()
    if file_ext not in IMAGE_EXTENSIONS:
        file_ext = ".jpg"
    return f"{prefix}{uuid.uuid4().hex}{file_ext}"


def _write_file(file_name: str, content: bytes) -> str:
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    file_path = os.path.join(settings.UPLOAD_DIR, file_name)
    with open(file_path, "wb") as buffer:
        buffer.write(content)
    return file_path


def download_image(link: str) -> str:
    """Download an image from a URL into the upload directory and return its file name."""
    if urlparse(link).scheme not in ("http", "https"):
        raise InvalidUpload("Link must be an http(s) URL")

    chunks = []
    received = 0
    try:
        with httpx.stream("GET", link, timeout=settings.DOWNLOAD_TIMEOUT, follow_redirects=True) as response:
            response.raise_for_status()
            # Stop reading as soon as the body passes the upload limit
            for chunk in response.iter_bytes():
                received += len(chunk)
                if received > settings.MAX_UPLOAD_SIZE:
                    raise InvalidUpload("Downloaded image is too large")
                chunks.append(chunk)
    except httpx.HTTPError as e:
        logger.error(f"Image download failed for {link}: {e}")
        raise DownloadFailed() from e

    file_name = _unique_filename(urlparse(link).path, prefix="photo_")
    _write_file(file_name, b"".join(chunks))
    logger.info(f"Downloaded image to {file_name}")
    return file_name


async def save_uploads(files: List[UploadFile]) -> List[str]:
    """Validate and store uploaded photos, returning their file names."""
    if not files:
        raise InvalidUpload("No files uploaded")
    if len(files) > settings.MAX_UPLOAD_FILES:
        raise InvalidUpload(f"At most {settings.MAX_UPLOAD_FILES} files per upload")

    # Validate everything before writing anything
    contents = []
    for file in files:
        if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
            raise InvalidUpload(f"Invalid file type: {file.content_type}")
        content = await file.read()
        if len(content) > settings.MAX_UPLOAD_SIZE:
            raise InvalidUpload(f"File too large: {file.filename}")
        contents.append((file.filename, content))

    file_names = []
    for original_name, content in contents:
        file_name = _unique_filename(original_name)
        _write_file(file_name, content)
        file_names.append(file_name)

    return file_names
