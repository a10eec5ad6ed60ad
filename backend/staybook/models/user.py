"""
User model for authentication and ownership.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from staybook.db.base import BaseModel


class User(BaseModel):
    """Registered user; owner of places and author of bookings."""
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)

    # Relationships
    places = relationship("Place", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="user", cascade="all, delete-orphan")
