"""
Place routes. Creation and updates require a session; updates also require ownership.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from staybook.db.session import get_db
from staybook.schemas.place import PlaceCreate, PlaceUpdate, PlaceResponse
from staybook.core.exceptions import Forbidden, NotFound
from staybook.core.security import IdentityReference
from staybook.services import place_service
from staybook.api.dependencies import get_current_identity

router = APIRouter(tags=["places"])


@router.post("/places", response_model=PlaceResponse)
async def create_place(
    place_data: PlaceCreate,
    identity: IdentityReference = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Create a place owned by the current user."""
    return place_service.create_place(db, identity, place_data)


@router.get("/user-places", response_model=List[PlaceResponse])
async def list_user_places(
    identity: IdentityReference = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """List places owned by the current user."""
    return place_service.list_user_places(db, identity)


@router.get("/places", response_model=List[PlaceResponse])
async def list_places(db: Session = Depends(get_db)):
    """List all places."""
    return place_service.list_places(db)


@router.get("/places/{place_id}", response_model=PlaceResponse)
async def get_place(place_id: int, db: Session = Depends(get_db)):
    """Get a single place."""
    try:
        return place_service.get_place(db, place_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)


@router.put("/places")
async def update_place(
    place_data: PlaceUpdate,
    identity: IdentityReference = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """Update a place; only its owner may do so."""
    try:
        place_service.update_place(db, identity, place_data)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    except Forbidden as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.detail)
    return "ok"
