"""Client session state."""

from typing import Optional


class SessionContext:
    """Connection state shared by API calls of one client process.

    Holds the API base URL and the caller's access token. Passed explicitly
    to the client rather than kept in module globals.
    """

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")
        self.token: Optional[str] = None
        self.initialized = False

    def initialize(self, token: Optional[str] = None) -> None:
        """Load the session once; later calls are no-ops until ``clear()``."""
        if self.initialized:
            return
        self.token = token
        self.initialized = True

    def clear(self) -> None:
        """Forget the token (logout)."""
        self.token = None
        self.initialized = False

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
