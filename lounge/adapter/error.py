"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class TransportError(AdapterError):
    """The API could not be reached or answered without a readable error body."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
