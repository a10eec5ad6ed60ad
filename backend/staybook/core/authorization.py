"""
Ownership checks for places and attribution of newly created records.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
from staybook.core.exceptions import Forbidden
from staybook.core.security import IdentityReference

logger = logging.getLogger(__name__)

NOT_OWNER = "not_owner"


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check."""
    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed

    @classmethod
    def denied(cls, reason: str = NOT_OWNER) -> "Decision":
        return cls(allowed=False, reason=reason)

    def ensure(self) -> None:
        """Raise Forbidden unless the decision allows the mutation."""
        if not self.allowed:
            raise Forbidden()


ALLOWED = Decision(allowed=True)


def same_identity(left: Any, right: Any) -> bool:
    """Compare identifiers by canonical string value."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


def authorize_mutation(identity: IdentityReference, resource: Any) -> Decision:
    """Allow a mutation only when the identity is the resource's owner."""
    owner_id = getattr(resource, "owner_id", None)
    if same_identity(owner_id, identity.id):
        return ALLOWED

    logger.warning(
        f"Denied mutation of {type(resource).__name__} {getattr(resource, 'id', None)} "
        f"by user {identity.id}"
    )
    return Decision.denied(NOT_OWNER)


def attribute_creation(
    identity: IdentityReference,
    payload: Any,
    field: str = "owner_id"
) -> Dict[str, Any]:
    """
    Build the record for a new resource with ``field`` set to the caller.

    Any caller-supplied value for ``field`` (or for ``id``) is dropped; the
    trusted value comes only from the authenticated identity.
    """
    if hasattr(payload, "model_dump"):
        data = payload.model_dump()
    else:
        data = dict(payload)

    record = {key: value for key, value in data.items() if key not in (field, "id")}
    record[field] = identity.id
    return record
