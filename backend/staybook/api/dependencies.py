"""
Request dependencies that turn the session cookie into the current user.
"""
from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from typing import Optional
from staybook.core.config import settings
from staybook.core.exceptions import InvalidCredential, Unauthenticated
from staybook.core.security import IdentityReference, session_authenticator
from staybook.db.session import get_db
from staybook.models.user import User
from staybook.services.user_service import get_user


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def get_session_token(request: Request) -> Optional[str]:
    """Read the session token cookie; no other cookie is looked at."""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def set_session_cookie(response: Response, token: str) -> None:
    """Store the session token in an HTTP-only cookie."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE
    )


async def get_optional_identity(
    token: Optional[str] = Depends(get_session_token)
) -> Optional[IdentityReference]:
    """Identity for the request, or None when no session cookie is present."""
    if not token:
        return None
    try:
        return session_authenticator.verify(token)
    except InvalidCredential as e:
        raise _unauthorized(e.detail)


async def get_identity(
    identity: Optional[IdentityReference] = Depends(get_optional_identity)
) -> IdentityReference:
    """Identity for the request; a session cookie is required."""
    if identity is None:
        raise _unauthorized(Unauthenticated.detail)
    return identity


async def get_current_user(
    identity: IdentityReference = Depends(get_identity),
    db: Session = Depends(get_db)
) -> User:
    """Get the current authenticated user, re-checking that it still exists."""
    user = get_user(db, identity.id)
    if user is None:
        raise _unauthorized("User no longer exists")
    return user


async def get_current_identity(
    current_user: User = Depends(get_current_user)
) -> IdentityReference:
    """Identity of a user known to exist, for ownership and attribution checks."""
    return IdentityReference.from_user(current_user)
