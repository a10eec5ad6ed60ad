"""
Booking routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from staybook.db.session import get_db
from staybook.schemas.booking import BookingCreate, BookingResponse, BookingDetailResponse
from staybook.core.exceptions import NotFound
from staybook.core.security import IdentityReference
from staybook.services import booking_service
from staybook.api.dependencies import get_current_identity

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_data: BookingCreate,
    identity: IdentityReference = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Book a place as the current user."""
    try:
        return booking_service.create_booking(db, identity, booking_data)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)


@router.get("", response_model=List[BookingDetailResponse])
async def list_bookings(
    identity: IdentityReference = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """List the current user's bookings with their places."""
    return booking_service.list_user_bookings(db, identity)
