"""
Security utilities for session tokens and password hashing.

Sessions are stateless: a signed JWT carrying ``{id, email, iat}`` is handed
to the client in an HTTP-only cookie and verified on every request against
the process-wide secret. Nothing is stored server-side, so logout only
removes the client's copy of the token.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional, Union
import hashlib
import logging
import bcrypt
from jose import JWTError, jwt
from staybook.core.config import settings
from staybook.core.exceptions import InvalidCredential

logger = logging.getLogger(__name__)

# Sentinel written over the session cookie on logout
CLEARED_CREDENTIAL = ""


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt, returned as a string for storage."""
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


@dataclass(frozen=True)
class IdentityReference:
    """Verified identity recovered from a session token."""
    id: Union[int, str]
    email: str

    @classmethod
    def from_user(cls, user: Any) -> "IdentityReference":
        return cls(id=user.id, email=user.email)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionAuthenticator:
    """Issues and verifies signed session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self._clock = clock

    @classmethod
    def from_settings(cls, config=settings) -> "SessionAuthenticator":
        expires_delta = None
        if config.SESSION_EXPIRE_DAYS:
            expires_delta = timedelta(days=config.SESSION_EXPIRE_DAYS)
        return cls(config.SECRET_KEY, config.ALGORITHM, expires_delta)

    def issue(self, identity: Any) -> str:
        """
        Create a session token for a user whose password was already checked.

        Only ``id`` and ``email`` are embedded; no password material.
        """
        issued_at = self._clock()
        claims = {
            "id": identity.id,
            "email": identity.email,
            "iat": issued_at,
        }
        if self.expires_delta is not None:
            claims["exp"] = issued_at + self.expires_delta
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, credential: Optional[str]) -> IdentityReference:
        """Decode and check a session token, raising InvalidCredential on any failure."""
        if not credential:
            raise InvalidCredential("Missing session token")

        try:
            payload = jwt.decode(credential, self._secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            # The token and secret are never logged, only the failure class
            logger.info(f"Rejected session token: {type(e).__name__}")
            raise InvalidCredential() from e

        identity_id = payload.get("id")
        email = payload.get("email")
        if isinstance(identity_id, bool) or not isinstance(identity_id, (int, str)) or identity_id == "":
            logger.info("Rejected session token: malformed identity id")
            raise InvalidCredential()
        if not isinstance(email, str) or not email:
            logger.info("Rejected session token: malformed email")
            raise InvalidCredential()

        return IdentityReference(id=identity_id, email=email)

    def clear(self) -> str:
        """Return the empty credential used to overwrite the client's cookie."""
        return CLEARED_CREDENTIAL


session_authenticator = SessionAuthenticator.from_settings()
