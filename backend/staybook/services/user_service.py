"""
User service for registration, login and identity lookups.
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from functools import lru_cache
from typing import Any, Optional
import logging
from staybook.models.user import User
from staybook.schemas.user import UserCreate
from staybook.core.exceptions import BadCredential, DuplicateEmail, NotFound
from staybook.core.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    """Hash compared against when the email is unknown, so both login failures cost a bcrypt check."""
    return get_password_hash("staybook-dummy-password")


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user(db: Session, user_id: Any) -> Optional[User]:
    """Fetch a user by id; ids that are not integers never match."""
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == _normalize_email(email)).first()


def register_user(db: Session, user_data: UserCreate) -> User:
    """Create a new user, raising DuplicateEmail if the email is taken."""
    email = _normalize_email(user_data.email)
    if get_user_by_email(db, email):
        raise DuplicateEmail()

    new_user = User(
        name=user_data.name,
        email=email,
        hashed_password=get_password_hash(user_data.password)
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise DuplicateEmail()
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id}")
    return new_user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """
    Check an email/password pair.

    Raises NotFound for an unknown email and BadCredential for a wrong
    password. The route layer decides whether to tell them apart.
    """
    user = get_user_by_email(db, email)
    if not user:
        verify_password(password, _dummy_password_hash())
        logger.info("Login failed: unknown email")
        raise NotFound("User not found")

    if not verify_password(password, user.hashed_password):
        logger.info(f"Login failed: wrong password for user {user.id}")
        raise BadCredential()

    return user
