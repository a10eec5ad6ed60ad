"""
Utility functions for the application.
"""
from urllib.parse import urlparse
import os
from staybook.core.config import settings

UPLOADS_PATH = "/uploads"


def get_file_url(file_name: str) -> str:
    """Convert a stored photo reference to its public URL."""
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}{UPLOADS_PATH}/{file_name}"


def photo_reference(value: str) -> str:
    """
    Normalize a photo given as a file name or a previously rendered URL.

    "http://localhost:4000/uploads/photo.jpg" -> "photo.jpg"
    """
    path = urlparse(value).path if "://" in value else value
    name = os.path.basename(path.rstrip("/"))
    if not name or name in (".", ".."):
        raise ValueError(f"Invalid photo reference: {value!r}")
    return name

