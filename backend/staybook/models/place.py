"""
Place model for rental listings.
"""
from sqlalchemy import Column, String, Text, JSON, ForeignKey, Integer
from sqlalchemy.orm import relationship
from staybook.db.base import BaseModel


class Place(BaseModel):
    """Rental place listed by its owner."""
    __tablename__ = "places"

    # Set once at creation from the authenticated user, never updated
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    address = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    perks = Column(JSON, nullable=False, default=list)
    extra_info = Column(Text, nullable=True)
    check_in = Column(String(20), nullable=True)  # e.g. "14:00"
    check_out = Column(String(20), nullable=True)
    max_guests = Column(Integer, nullable=True)
    price = Column(Integer, nullable=True)  # per night

    # Relationships
    owner = relationship("User", back_populates="places")
    photos = relationship(
        "PlacePhoto",
        back_populates="place",
        cascade="all, delete-orphan",
        order_by="PlacePhoto.order_index"
    )
    bookings = relationship("Booking", back_populates="place", cascade="all, delete-orphan")


class PlacePhoto(BaseModel):
    """Ordered photo reference of a place."""
    __tablename__ = "place_photos"

    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    order_index = Column(Integer, default=0, nullable=False)

    # Relationships
    place = relationship("Place", back_populates="photos")
