"""Error taxonomy shared by services, repositories and the HTTP layer.

Every error carries the HTTP status it maps to and renders as the common
`{"code": ..., "message": ...}` envelope.
"""

from typing import Any


class ShopfrontError(Exception):
    """Base class for errors that translate directly into an HTTP response."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Render the error envelope."""
        return {"code": self.code, "message": self.message}


class ValidationError(ShopfrontError):
    """The request payload is unusable."""

    status_code = 400
    code = "validation_error"


class MissingFieldError(ValidationError):
    """A required field is absent or counts as empty under its policy."""

    def __init__(self, field: str, label: str | None = None):
        super().__init__(f"The {label or field} field is required")
        self.field = field


class NotFoundError(ShopfrontError):
    """The addressed record does not exist."""

    status_code = 404
    code = "not_found"


class ConflictError(ShopfrontError):
    """A write violated a uniqueness constraint."""

    status_code = 409
    code = "conflict"


class PersistenceError(ShopfrontError):
    """The database failed for a reason other than a constraint violation.

    The message shown to clients is always generic; the cause is kept on
    `__cause__` for server-side logging.
    """

    status_code = 500
    code = "internal_error"
