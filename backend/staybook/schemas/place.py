"""
Pydantic schemas for Place entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime
from staybook.core.utils import get_file_url, photo_reference


class PlaceBase(BaseModel):
    """Base place schema."""
    title: str
    address: Optional[str] = None
    description: Optional[str] = None
    perks: List[str] = []
    extra_info: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    max_guests: Optional[int] = None
    price: Optional[int] = None


class PlaceCreate(PlaceBase):
    """Schema for place creation. The owner always comes from the session."""
    photos: List[str] = []

    @field_validator("photos")
    @classmethod
    def normalize_photos(cls, v):
        """Accept file names or rendered URLs, store file names."""
        return [photo_reference(photo) for photo in v]


class PlaceUpdate(BaseModel):
    """Schema for place update; only fields that are sent get applied."""
    id: int
    title: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    perks: Optional[List[str]] = None
    extra_info: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    max_guests: Optional[int] = None
    price: Optional[int] = None
    photos: Optional[List[str]] = None

    @field_validator("photos")
    @classmethod
    def normalize_photos(cls, v):
        if v is None:
            return v
        return [photo_reference(photo) for photo in v]


class PlaceResponse(PlaceBase):
    """Schema for place response with photos rendered as public URLs."""
    id: int
    owner_id: int
    photos: List[str] = []
    created_at: datetime
    updated_at: datetime

    @field_validator("perks", mode="before")
    @classmethod
    def default_perks(cls, v):
        return v if v is not None else []

    @field_validator("photos", mode="before")
    @classmethod
    def render_photos(cls, v):
        urls = []
        for photo in v or []:
            file_name = getattr(photo, "file_name", photo)
            urls.append(get_file_url(file_name))
        return urls

    class Config:
        from_attributes = True
