"""
Error taxonomy for authentication, authorization and account operations.

Services raise these; the route layer maps each one to an HTTP status.
"""


class StaybookError(Exception):
    """Base class for classified application errors."""
    detail = "Request failed"

    def __init__(self, detail: str = None):
        super().__init__(detail or self.detail)
        self.detail = detail or self.detail


class InvalidCredential(StaybookError):
    """Session token is missing, empty, malformed or fails signature checks."""
    detail = "Invalid session token"


class Unauthenticated(StaybookError):
    """No credential was presented where one is required."""
    detail = "Not authenticated"


class Forbidden(StaybookError):
    """Credential is valid but the identity does not own the target resource."""
    detail = "Not the owner of this resource"


class NotFound(StaybookError):
    detail = "Not found"


class DuplicateEmail(StaybookError):
    detail = "Email already registered"


class BadCredential(StaybookError):
    """Login password does not match."""
    detail = "Incorrect password"


class InvalidUpload(StaybookError):
    """Uploaded file is missing, too large or not an allowed image type."""
    detail = "Invalid upload"


class DownloadFailed(StaybookError):
    detail = "Failed to download image"
