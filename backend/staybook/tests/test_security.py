"""
Tests for session token issuing and verification.
"""
import pytest
from datetime import datetime, timedelta, timezone
from jose import jwt
from staybook.core.exceptions import InvalidCredential
from staybook.core.security import (
    IdentityReference, SessionAuthenticator, get_password_hash, verify_password
)

SECRET = "unit-test-secret"


@pytest.fixture()
def authenticator():
    return SessionAuthenticator(SECRET)


def _tamper_signature(token: str) -> str:
    """Flip one character inside the signature segment."""
    header, payload, signature = token.split(".")
    idx = len(signature) // 2
    replacement = "A" if signature[idx] != "A" else "B"
    return ".".join([header, payload, signature[:idx] + replacement + signature[idx + 1:]])


@pytest.mark.parametrize("identity", [
    IdentityReference(id=1, email="a@x.com"),
    IdentityReference(id=42, email="host@example.com"),
    IdentityReference(id="64b7f0c2e1a4", email="b@x.com"),
])
def test_verify_recovers_issued_identity(authenticator, identity):
    """verify(issue(identity)) returns the embedded id and email."""
    token = authenticator.issue(identity)
    assert authenticator.verify(token) == IdentityReference(id=identity.id, email=identity.email)


def test_token_carries_no_password_material(authenticator):
    """Only id, email and iat are embedded."""
    class UserRow:
        id = 7
        email = "a@x.com"
        hashed_password = "$2b$04$secret"

    claims = jwt.get_unverified_claims(authenticator.issue(UserRow()))
    assert set(claims) == {"id", "email", "iat"}


def test_tampered_signature_is_rejected(authenticator):
    """A modified signature never yields an identity."""
    token = authenticator.issue(IdentityReference(id=1, email="a@x.com"))
    with pytest.raises(InvalidCredential):
        authenticator.verify(_tamper_signature(token))


def test_tampered_payload_is_rejected(authenticator):
    """Swapping in another user's payload breaks the signature."""
    token_a = authenticator.issue(IdentityReference(id=1, email="a@x.com"))
    token_b = authenticator.issue(IdentityReference(id=2, email="b@x.com"))
    header, _, signature = token_a.split(".")
    forged = ".".join([header, token_b.split(".")[1], signature])
    with pytest.raises(InvalidCredential):
        authenticator.verify(forged)


def test_token_signed_with_other_secret_is_rejected(authenticator):
    other = SessionAuthenticator("another-secret")
    token = other.issue(IdentityReference(id=1, email="a@x.com"))
    with pytest.raises(InvalidCredential):
        authenticator.verify(token)


@pytest.mark.parametrize("credential", [None, "", "not-a-token", "a.b.c"])
def test_missing_or_malformed_credential_is_rejected(authenticator, credential):
    with pytest.raises(InvalidCredential):
        authenticator.verify(credential)


def test_cleared_credential_never_verifies(authenticator):
    """clear() followed by verify() always fails."""
    with pytest.raises(InvalidCredential):
        authenticator.verify(authenticator.clear())


@pytest.mark.parametrize("claims", [
    {"email": "a@x.com"},
    {"id": 1},
    {"id": "", "email": "a@x.com"},
    {"id": True, "email": "a@x.com"},
    {"id": {"nested": 1}, "email": "a@x.com"},
])
def test_malformed_identity_payload_is_rejected(authenticator, claims):
    """Correctly signed tokens must still decode to a well-formed identity."""
    token = jwt.encode(claims, SECRET, algorithm="HS256")
    with pytest.raises(InvalidCredential):
        authenticator.verify(token)


def test_no_expiry_by_default(authenticator):
    token = authenticator.issue(IdentityReference(id=1, email="a@x.com"))
    assert "exp" not in jwt.get_unverified_claims(token)


def test_expired_token_is_rejected():
    """With an expiry configured, tokens older than the window fail."""
    issued_at = datetime.now(timezone.utc) - timedelta(days=10)
    old = SessionAuthenticator(SECRET, expires_delta=timedelta(days=1), clock=lambda: issued_at)
    token = old.issue(IdentityReference(id=1, email="a@x.com"))
    with pytest.raises(InvalidCredential):
        SessionAuthenticator(SECRET, expires_delta=timedelta(days=1)).verify(token)


def test_unexpired_token_is_accepted():
    authenticator = SessionAuthenticator(SECRET, expires_delta=timedelta(days=1))
    token = authenticator.issue(IdentityReference(id=1, email="a@x.com"))
    assert "exp" in jwt.get_unverified_claims(token)
    assert authenticator.verify(token).id == 1


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        SessionAuthenticator("")


def test_password_hash_round_trip():
    """Hashes verify the original password only, including long passwords."""
    long_password = "p" * 100
    hashed = get_password_hash(long_password)
    assert hashed != long_password
    assert verify_password(long_password, hashed)
    assert not verify_password("p" * 99, hashed)
