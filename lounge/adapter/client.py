"""HTTP client for the Fandom Lounge API."""

from typing import Any, Optional

import httpx
import logfire

from lounge.adapter.error import TransportError
from lounge.adapter.session import SessionContext
from lounge.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from lounge.domain.model import VoteTally
from lounge.domain.value import SearchScope, VotableType, VoteType

# Error codes carried in {"success": false, "error": {"code", "message"}}
ERROR_TYPES: dict[str, type[DomainError]] = {
    ValidationError.code: ValidationError,
    UnauthorizedError.code: UnauthorizedError,
    ConflictError.code: ConflictError,
}


def error_from_payload(
    payload: Any, resource: str = "Resource", identifier: str = ""
) -> DomainError:
    """Rebuild the domain error described by an API error body.

    Raises:
        TransportError: If the body is not an API error payload
    """
    try:
        code = payload["error"]["code"]
        message = payload["error"]["message"]
    except (KeyError, TypeError):
        raise TransportError("Malformed error response")

    if code == NotFoundError.code:
        return NotFoundError(resource, identifier, message=message)
    error_type = ERROR_TYPES.get(code)
    if error_type is None:
        return DomainError(message)
    return error_type(message)


class LoungeClient:
    """Async client for the vote and search endpoints.

    Error responses are raised as the matching domain errors.
    """

    def __init__(
        self,
        session: SessionContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: Session holding base URL and access token
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
            timeout: Request timeout in seconds
        """
        self.session = session
        self.transport = transport
        self.timeout = timeout

    async def _request(
        self,
        method: str,
        path: str,
        resource: str = "Resource",
        identifier: str = "",
        **kwargs: Any,
    ) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.session.base_url,
                transport=self.transport,
                timeout=self.timeout,
            ) as client:
                response = await client.request(
                    method, path, headers=self.session.headers(), **kwargs
                )
        except httpx.HTTPError as e:
            logfire.error("Lounge API HTTP error", path=path, error=str(e))
            raise TransportError(f"HTTP error calling {path}: {e}")

        if response.is_success:
            try:
                return response.json()
            except ValueError:
                raise TransportError(
                    f"Unreadable response from {path}",
                    status_code=response.status_code,
                )

        try:
            payload = response.json()
        except ValueError:
            raise TransportError(
                f"Request to {path} failed: {response.status_code}",
                status_code=response.status_code,
            )

        error = error_from_payload(payload, resource=resource, identifier=identifier)
        logfire.warn(
            "Lounge API error",
            path=path,
            status_code=response.status_code,
            error=str(error),
        )
        raise error

    async def cast_vote(
        self, votable_type: VotableType, votable_id: str, vote_type: VoteType
    ) -> VoteTally:
        """Vote on a post or comment and return the authoritative tally."""
        data = await self._request(
            "POST",
            "/votes",
            resource=votable_type.value.title(),
            identifier=votable_id,
            json={
                "targetType": votable_type.value,
                "targetId": votable_id,
                "type": vote_type.value,
            },
        )
        try:
            return VoteTally(
                upvote_count=data["upvoteCount"],
                downvote_count=data["downvoteCount"],
                user_vote=data.get("userVote"),
            )
        except (KeyError, TypeError, AttributeError, ValueError):
            raise TransportError("Malformed vote response")

    async def search(
        self,
        q: str,
        scope: SearchScope = SearchScope.ALL,
        page: int = 1,
        limit: int = 20,
    ) -> dict[str, Any]:
        """Search lounges and posts; returns the decoded response body."""
        return await self._request(
            "GET",
            "/search",
            params={"q": q, "type": scope.value, "page": page, "limit": limit},
        )

    async def search_tags(self, q: Optional[str] = None, limit: int = 10) -> list[str]:
        """Autocomplete tags by prefix, or list popular tags without one."""
        params: dict[str, Any] = {"limit": limit}
        if q is not None:
            params["q"] = q
        return await self._request("GET", "/search/tags", params=params)
