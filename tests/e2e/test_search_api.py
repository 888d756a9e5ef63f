"""End-to-end tests for the search endpoints."""

import pytest
from fastapi.testclient import TestClient

from lounge.domain.model import PopularTag
from lounge.domain.repository import LoungeRepository, PostRepository, TagRepository
from lounge.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.api import seed
from tests.factories import make_lounge, make_post


@pytest.fixture
def env():
    """Test client plus the container backing it."""
    test_container = build_test_container()
    with TestClient(create_app(test_container)) as client:
        yield client, test_container


class TestSearchEndpoint:
    """End-to-end tests for GET /search."""

    def test_all_scope_response(self, env):
        # Arrange
        client, container = env
        (lounge,) = seed(
            client,
            container,
            LoungeRepository,
            make_lounge(name="Blackpink Lounge", slug="blackpink"),
        )
        seed(
            client,
            container,
            PostRepository,
            make_post(lounge_id=lounge.id, title="Blackpink world tour"),
        )

        # Act
        response = client.get("/search", params={"q": "blackpink"})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "blackpink"
        assert data["type"] == "all"
        assert data["results"]["lounges"]["total"] == 1
        assert data["results"]["lounges"]["items"][0]["slug"] == "blackpink"
        post = data["results"]["posts"]["items"][0]
        assert post["title"] == "Blackpink world tour"
        assert post["lounge"]["slug"] == "blackpink"

    def test_tag_query_returns_only_posts(self, env):
        # Arrange
        client, container = env
        seed(client, container, LoungeRepository, make_lounge(name="kpop"))
        seed(client, container, PostRepository, make_post(tags=["kpop"]))

        # Act
        response = client.get("/search", params={"q": "#kpop"})

        # Assert
        results = response.json()["results"]
        assert results["lounges"] == {"items": [], "total": 0}
        assert results["posts"]["total"] == 1

    def test_post_scope_pagination(self, env):
        client, container = env
        seed(
            client,
            container,
            PostRepository,
            *[make_post(content="encore", minutes_ago=i) for i in range(5)],
        )

        response = client.get(
            "/search", params={"q": "encore", "type": "post", "page": 2, "limit": 2}
        )

        posts = response.json()["results"]["posts"]
        assert len(posts["items"]) == 2
        assert posts["total"] == 5

    @pytest.mark.parametrize("q", ["", "   ", "#"])
    def test_blank_query_is_validation_error(self, env, q):
        client, _ = env

        response = client.get("/search", params={"q": q})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize(
        "params",
        [{}, {"q": "x", "limit": 51}, {"q": "x", "page": 0}, {"q": "x", "type": "user"}],
    )
    def test_bad_parameters_are_validation_errors(self, env, params):
        client, _ = env

        response = client.get("/search", params=params)

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestSearchTagsEndpoint:
    """End-to-end tests for GET /search/tags."""

    def test_prefix_autocomplete(self, env):
        client, container = env
        seed(
            client,
            container,
            PostRepository,
            make_post(tags=["kpop"]),
            make_post(tags=["kpop", "dance"]),
        )

        response = client.get("/search/tags", params={"q": "kp"})

        assert response.status_code == 200
        assert response.json() == ["kpop"]

    def test_popular_tags_without_prefix(self, env):
        client, container = env
        tag_repo = client.portal.call(container.get, TagRepository)
        client.portal.call(tag_repo.save_popular, PopularTag(tag="twice", count=7))
        client.portal.call(tag_repo.save_popular, PopularTag(tag="itzy", count=9))

        response = client.get("/search/tags", params={"limit": 1})

        assert response.json() == ["itzy"]

    def test_limit_above_twenty_is_rejected(self, env):
        client, _ = env

        response = client.get("/search/tags", params={"limit": 21})

        assert response.status_code == 400


class TestHealthEndpoint:
    def test_health(self, env):
        client, _ = env

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
