"""End-to-end tests for the vote endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from lounge.config import AuthSettings
from lounge.domain.repository import CommentRepository, PostRepository
from lounge.interface.api.app import create_app
from lounge.util.jwt import create_token
from tests.di import build_test_container
from tests.e2e.api import auth_headers, seed
from tests.factories import make_comment, make_post


@pytest.fixture
def env():
    """Test client plus the container backing it."""
    test_container = build_test_container()
    with TestClient(create_app(test_container)) as client:
        yield client, test_container


class TestCastVote:
    """End-to-end tests for POST /votes."""

    def test_upvote_returns_camel_case_tally(self, env):
        # Arrange
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post(upvote_count=1))

        # Act
        response = client.post(
            "/votes",
            json={"targetType": "POST", "targetId": str(post.id), "type": "UPVOTE"},
            headers=auth_headers(),
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "upvoteCount": 2,
            "downvoteCount": 0,
            "userVote": "UPVOTE",
        }

    def test_same_vote_twice_toggles_off(self, env):
        # Arrange
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post())
        headers = auth_headers()
        body = {"targetType": "POST", "targetId": str(post.id), "type": "DOWNVOTE"}

        # Act
        client.post("/votes", json=body, headers=headers)
        response = client.post("/votes", json=body, headers=headers)

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "upvoteCount": 0,
            "downvoteCount": 0,
            "userVote": None,
        }

    def test_cookie_token_is_accepted(self, env):
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post())
        client.cookies.set("auth_token", create_token(str(uuid4()), AuthSettings()))

        response = client.post(
            "/votes",
            json={"targetType": "POST", "targetId": str(post.id), "type": "UPVOTE"},
        )

        assert response.status_code == 200

    def test_anonymous_vote_is_unauthorized(self, env):
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post())

        response = client.post(
            "/votes",
            json={"targetType": "POST", "targetId": str(post.id), "type": "UPVOTE"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": {"code": "UNAUTHORIZED", "message": "Authentication required"},
        }

    def test_unknown_post_is_not_found(self, env):
        client, _ = env

        response = client.post(
            "/votes",
            json={"targetType": "POST", "targetId": str(uuid4()), "type": "UPVOTE"},
            headers=auth_headers(),
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.parametrize(
        "body",
        [
            {"targetType": "POST", "targetId": "not-a-uuid", "type": "UPVOTE"},
            {"targetType": "USER", "targetId": str(uuid4()), "type": "UPVOTE"},
            {"targetType": "POST", "targetId": str(uuid4()), "type": "SIDEWAYS"},
            {"targetType": "POST"},
        ],
    )
    def test_malformed_body_is_validation_error(self, env, body):
        client, _ = env

        response = client.post("/votes", json=body, headers=auth_headers())

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"


class TestItemVoteRoutes:
    """End-to-end tests for the per-post and per-comment vote routes."""

    def test_comment_vote_and_status(self, env):
        # Arrange
        client, container = env
        (comment,) = seed(client, container, CommentRepository, make_comment())
        headers = auth_headers()

        # Act
        voted = client.post(
            f"/comments/{comment.id}/vote", json={"type": "UPVOTE"}, headers=headers
        )
        mine = client.get(f"/comments/{comment.id}/vote", headers=headers)
        anonymous = client.get(f"/comments/{comment.id}/vote")

        # Assert
        assert voted.status_code == 200
        assert mine.json()["userVote"] == "UPVOTE"
        assert anonymous.json() == {
            "upvoteCount": 1,
            "downvoteCount": 0,
            "userVote": None,
        }

    def test_flip_on_post_route(self, env):
        # Arrange
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post())
        headers = auth_headers()
        client.post(f"/posts/{post.id}/vote", json={"type": "UPVOTE"}, headers=headers)

        # Act
        response = client.post(
            f"/posts/{post.id}/vote", json={"type": "DOWNVOTE"}, headers=headers
        )

        # Assert
        assert response.json() == {
            "upvoteCount": 0,
            "downvoteCount": 1,
            "userVote": "DOWNVOTE",
        }

    def test_status_of_deleted_post_still_reports_counts(self, env):
        client, container = env
        (post,) = seed(
            client, container, PostRepository, make_post(upvote_count=4, deleted=True)
        )

        response = client.get(f"/posts/{post.id}/vote")

        assert response.status_code == 200
        assert response.json()["upvoteCount"] == 4

    def test_status_of_unknown_comment_is_not_found(self, env):
        client, _ = env

        response = client.get(f"/comments/{uuid4()}/vote")

        assert response.status_code == 404

    def test_invalid_token_reads_as_anonymous(self, env):
        client, container = env
        (post,) = seed(client, container, PostRepository, make_post(upvote_count=3))

        response = client.get(
            f"/posts/{post.id}/vote", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 200
        assert response.json()["userVote"] is None
