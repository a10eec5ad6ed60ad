"""
Booking model for reservations of a place.
"""
from sqlalchemy import Column, String, Date, ForeignKey, Integer
from sqlalchemy.orm import relationship
from staybook.db.base import BaseModel


class Booking(BaseModel):
    """Reservation made by a user against a place."""
    __tablename__ = "bookings"

    # Always the authenticated user at creation time
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    number_of_guests = Column(Integer, nullable=False, default=1)
    name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=False)
    price = Column(Integer, nullable=True)

    # Relationships
    user = relationship("User", back_populates="bookings")
    place = relationship("Place", back_populates="bookings")
