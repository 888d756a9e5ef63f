"""Unit tests for the API error mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from lounge.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from lounge.domain.model import VoteTally
from lounge.interface.error import register_error_handlers, status_for


@pytest.fixture
def client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("Vote changed concurrently, please try again")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Post", "abc")

    @app.get("/typed")
    async def typed(limit: int):
        return {"limit": limit}

    @app.get("/corrupt")
    async def corrupt():
        return VoteTally(upvote_count=-1, downvote_count=0)

    return TestClient(app, raise_server_exceptions=False)


class TestStatusFor:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (ValidationError("bad"), 400),
            (UnauthorizedError(), 401),
            (NotFoundError("Post", "x"), 404),
            (ConflictError("again"), 409),
            (DomainError(), 500),
        ],
    )
    def test_status_by_error_type(self, error, status_code):
        assert status_for(error) == status_code


class TestErrorResponses:
    def test_domain_error_body(self, client):
        response = client.get("/conflict")

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": {
                "code": "CONFLICT",
                "message": "Vote changed concurrently, please try again",
            },
        }

    def test_not_found_message(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Post not found: abc"

    def test_request_validation_is_400_with_field_location(self, client):
        response = client.get("/typed", params={"limit": "many"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "query.limit" in error["message"]

    def test_internal_model_failure_is_500_not_validation_error(self, client):
        response = client.get("/corrupt")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "Internal error"},
        }
