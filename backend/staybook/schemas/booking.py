"""
Pydantic schemas for Booking entity.
"""
from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime
from staybook.schemas.place import PlaceResponse


class BookingBase(BaseModel):
    """Base booking schema."""
    place_id: int
    check_in: date
    check_out: date
    number_of_guests: int = 1
    name: str
    phone: str
    price: Optional[int] = None


class BookingCreate(BookingBase):
    """Schema for booking creation. The booking user always comes from the session."""
    pass


class BookingResponse(BookingBase):
    """Schema for booking response."""
    id: int
    user_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class BookingDetailResponse(BookingResponse):
    """Schema for booking response with the booked place embedded."""
    place: PlaceResponse
