"""
Authentication routes for register, login, profile and logout.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from staybook.db.session import get_db
from staybook.schemas.user import UserCreate, UserLogin, UserResponse, LoginResponse
from staybook.core.config import settings
from staybook.core.exceptions import BadCredential, DuplicateEmail, NotFound
from staybook.core.security import IdentityReference, session_authenticator
from staybook.services.user_service import authenticate_user, get_user, register_user
from staybook.api.dependencies import get_optional_identity, set_session_cookie

router = APIRouter(tags=["auth"])

MASKED_LOGIN_ERROR = "Invalid email or password"


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    try:
        return register_user(db, user_data)
    except DuplicateEmail as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.detail
        )


@router.post("/login", response_model=LoginResponse)
async def login(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    """Check email and password, then set the session cookie."""
    try:
        user = authenticate_user(db, credentials.email, credentials.password)
    except (NotFound, BadCredential) as e:
        if settings.MASK_LOGIN_ERRORS:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=MASKED_LOGIN_ERROR
            )
        if isinstance(e, NotFound):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.detail)

    set_session_cookie(response, session_authenticator.issue(user))
    return {"success": True, "user": user}


@router.get("/profile", response_model=Optional[UserResponse])
async def profile(
    identity: Optional[IdentityReference] = Depends(get_optional_identity),
    db: Session = Depends(get_db)
):
    """Current user, or null when there is no session."""
    if identity is None:
        return None
    return get_user(db, identity.id)


@router.post("/logout")
async def logout(response: Response):
    """Overwrite the session cookie with an empty token."""
    set_session_cookie(response, session_authenticator.clear())
    return True
