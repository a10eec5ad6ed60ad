"""Models package - Import all models for SQLAlchemy registration."""
from staybook.models.user import User
from staybook.models.place import Place, PlacePhoto
from staybook.models.booking import Booking

__all__ = [
    "User",
    "Place",
    "PlacePhoto",
    "Booking",
]
