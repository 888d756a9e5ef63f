"""Unit tests for the API client and session state."""

import json
from uuid import uuid4

import httpx
import pytest

from lounge.adapter.client import LoungeClient, error_from_payload
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

BASE_URL = "http://lounge.test/api/"


def make_client(handler, token: str | None = "token-123") -> LoungeClient:
    session = SessionContext(BASE_URL)
    session.initialize(token)
    return LoungeClient(session, transport=httpx.MockTransport(handler))


def error_response(status_code: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={"success": False, "error": {"code": code, "message": message}},
    )


class TestSessionContext:
    """Tests for SessionContext."""

    def test_initialize_is_idempotent(self):
        session = SessionContext(BASE_URL)

        session.initialize("first")
        session.initialize("second")

        assert session.token == "first"
        assert session.base_url == "http://lounge.test/api"

    def test_clear_allows_reinitialization(self):
        session = SessionContext(BASE_URL)
        session.initialize("first")

        session.clear()
        session.initialize("second")

        assert session.token == "second"

    def test_anonymous_session_sends_no_authorization(self):
        session = SessionContext(BASE_URL)
        session.initialize()

        assert not session.is_authenticated
        assert session.headers() == {}


class TestCastVote:
    """Tests for LoungeClient.cast_vote."""

    @pytest.mark.asyncio
    async def test_sends_camel_case_body_with_bearer_token(self):
        # Arrange
        captured = {}
        post_id = str(uuid4())

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("Authorization")
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"upvoteCount": 3, "downvoteCount": 1, "userVote": "UPVOTE"}
            )

        client = make_client(handler)

        # Act
        tally = await client.cast_vote(VotableType.POST, post_id, VoteType.UPVOTE)

        # Assert
        assert tally == VoteTally(
            upvote_count=3, downvote_count=1, user_vote=VoteType.UPVOTE
        )
        assert captured["url"] == "http://lounge.test/api/votes"
        assert captured["auth"] == "Bearer token-123"
        assert captured["body"] == {
            "targetType": "POST",
            "targetId": post_id,
            "type": "UPVOTE",
        }

    @pytest.mark.asyncio
    async def test_not_found_carries_resource_and_identifier(self):
        comment_id = str(uuid4())
        client = make_client(
            lambda request: error_response(404, "NOT_FOUND", "Comment not found")
        )

        with pytest.raises(NotFoundError) as exc_info:
            await client.cast_vote(VotableType.COMMENT, comment_id, VoteType.DOWNVOTE)

        assert exc_info.value.resource == "Comment"
        assert exc_info.value.identifier == comment_id
        assert exc_info.value.message == "Comment not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,code,error_type",
        [
            (400, "VALIDATION_ERROR", ValidationError),
            (401, "UNAUTHORIZED", UnauthorizedError),
            (409, "CONFLICT", ConflictError),
        ],
    )
    async def test_error_codes_map_to_domain_errors(self, status_code, code, error_type):
        client = make_client(lambda request: error_response(status_code, code, "nope"))

        with pytest.raises(error_type, match="nope"):
            await client.cast_vote(VotableType.POST, str(uuid4()), VoteType.UPVOTE)

    @pytest.mark.asyncio
    async def test_unreadable_error_body_is_transport_error(self):
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(TransportError) as exc_info:
            await client.cast_vote(VotableType.POST, str(uuid4()), VoteType.UPVOTE)

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(TransportError):
            await client.cast_vote(VotableType.POST, str(uuid4()), VoteType.UPVOTE)


class TestSearch:
    """Tests for LoungeClient search calls."""

    @pytest.mark.asyncio
    async def test_search_passes_query_parameters(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json={"query": "#kpop", "results": {}})

        client = make_client(handler, token=None)

        body = await client.search("#kpop", scope=SearchScope.POST, page=2, limit=5)

        assert body["query"] == "#kpop"
        assert captured["params"] == {
            "q": "#kpop",
            "type": "post",
            "page": "2",
            "limit": "5",
        }

    @pytest.mark.asyncio
    async def test_search_tags_omits_missing_prefix(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["path"] = request.url.path
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json=["kpop", "jpop"])

        client = make_client(handler)

        tags = await client.search_tags(limit=2)

        assert tags == ["kpop", "jpop"]
        assert captured["path"] == "/api/search/tags"
        assert captured["params"] == {"limit": "2"}


class TestErrorFromPayload:
    """Tests for error_from_payload."""

    def test_unknown_code_becomes_base_domain_error(self):
        error = error_from_payload(
            {"success": False, "error": {"code": "TEAPOT", "message": "short and stout"}}
        )

        assert type(error) is DomainError
        assert error.message == "short and stout"

    @pytest.mark.parametrize("payload", [None, [], {"error": {}}, {"detail": "x"}])
    def test_malformed_payload_is_transport_error(self, payload):
        with pytest.raises(TransportError):
            error_from_payload(payload)


class TestSuccessBodies:
    """Tests for unreadable 2xx responses."""

    @pytest.mark.asyncio
    async def test_non_json_success_is_transport_error(self):
        client = make_client(
            lambda request: httpx.Response(200, text="<html>proxy</html>")
        )

        with pytest.raises(TransportError) as exc_info:
            await client.search("aespa")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_vote_body_without_counters_is_transport_error(self):
        client = make_client(lambda request: httpx.Response(200, json=["unexpected"]))

        with pytest.raises(TransportError, match="Malformed vote response"):
            await client.cast_vote(VotableType.POST, str(uuid4()), VoteType.UPVOTE)
