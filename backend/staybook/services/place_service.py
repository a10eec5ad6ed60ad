"""
Place service for listing, creation and owner-only updates.
"""
from sqlalchemy.orm import Session
from typing import List
import logging
from staybook.models.place import Place, PlacePhoto
from staybook.schemas.place import PlaceCreate, PlaceUpdate
from staybook.core.authorization import attribute_creation, authorize_mutation
from staybook.core.exceptions import NotFound
from staybook.core.security import IdentityReference

logger = logging.getLogger(__name__)

# Columns a caller may never set through an update
PROTECTED_FIELDS = {"id", "owner_id", "created_at", "updated_at"}

# Columns that may not be cleared; a null for these is ignored
NON_NULLABLE_FIELDS = {"title", "perks"}


def _set_photos(place: Place, file_names: List[str]) -> None:
    """Replace the place's photos, keeping the given order."""
    place.photos = [
        PlacePhoto(file_name=file_name, order_index=idx)
        for idx, file_name in enumerate(file_names)
    ]


def get_place(db: Session, place_id: int) -> Place:
    place = db.query(Place).filter(Place.id == place_id).first()
    if not place:
        raise NotFound("Place not found")
    return place


def list_places(db: Session) -> List[Place]:
    return db.query(Place).order_by(Place.id.asc()).all()


def list_user_places(db: Session, identity: IdentityReference) -> List[Place]:
    return db.query(Place).filter(Place.owner_id == identity.id).order_by(Place.id.asc()).all()


def create_place(db: Session, identity: IdentityReference, place_data: PlaceCreate) -> Place:
    """Create a place owned by the authenticated user."""
    record = attribute_creation(identity, place_data, field="owner_id")
    photos = record.pop("photos", [])

    place = Place(**record)
    _set_photos(place, photos)
    db.add(place)
    db.commit()
    db.refresh(place)

    logger.info(f"User {identity.id} created place {place.id}")
    return place


def update_place(db: Session, identity: IdentityReference, place_data: PlaceUpdate) -> Place:
    """
    Apply the sent fields to a place after checking ownership.

    The ownership decision is taken before any field is touched, so a
    denied update leaves the place unchanged.
    """
    place = get_place(db, place_data.id)
    authorize_mutation(identity, place).ensure()

    changes = place_data.model_dump(exclude_unset=True)
    for field in PROTECTED_FIELDS:
        changes.pop(field, None)
    for field in NON_NULLABLE_FIELDS:
        if field in changes and changes[field] is None:
            changes.pop(field)
    photos = changes.pop("photos", None)

    for field, value in changes.items():
        setattr(place, field, value)
    if photos is not None:
        _set_photos(place, photos)

    db.commit()
    db.refresh(place)
    return place
