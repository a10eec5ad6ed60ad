"""
Pydantic schemas for photo uploads.
"""
from pydantic import BaseModel


class UploadByLink(BaseModel):
    """Schema for downloading a photo from a remote URL."""
    link: str
