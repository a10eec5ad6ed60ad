"""
Booking service; bookings are always attributed to the authenticated user.
"""
from sqlalchemy.orm import Session, joinedload
from typing import List
import logging
from staybook.models.booking import Booking
from staybook.schemas.booking import BookingCreate
from staybook.core.authorization import attribute_creation
from staybook.core.security import IdentityReference
from staybook.services.place_service import get_place

logger = logging.getLogger(__name__)


def create_booking(db: Session, identity: IdentityReference, booking_data: BookingCreate) -> Booking:
    """Create a booking for an existing place, raising NotFound otherwise."""
    get_place(db, booking_data.place_id)

    record = attribute_creation(identity, booking_data, field="user_id")
    booking = Booking(**record)
    db.add(booking)
    db.commit()
    db.refresh(booking)

    logger.info(f"User {identity.id} booked place {booking.place_id} (booking {booking.id})")
    return booking


def list_user_bookings(db: Session, identity: IdentityReference) -> List[Booking]:
    return db.query(Booking).options(
        joinedload(Booking.place)
    ).filter(
        Booking.user_id == identity.id
    ).order_by(Booking.check_in.asc(), Booking.id.asc()).all()
