"""Domain layer errors.

Every domain error carries a stable ``code`` that the interface layer
renders as ``{"success": false, "error": {"code", "message"}}``.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str = "Internal error"):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Malformed input (bad vote type, empty search query, ...)."""

    code = "VALIDATION_ERROR"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when the caller has no valid session."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a concurrent write collides with this one."""

    code = "CONFLICT"
