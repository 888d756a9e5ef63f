"""Unit tests for SearchService."""

import pytest

from lounge.domain.error import ValidationError
from lounge.domain.model import PopularTag, SearchQuery
from lounge.domain.repository import LoungeRepository, PostRepository, TagRepository
from lounge.domain.service import SearchService
from lounge.domain.value import SearchScope
from tests.factories import make_lounge, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestSearch:
    """Tests for search."""

    @pytest.mark.asyncio
    async def test_all_scope_returns_capped_previews_with_full_totals(self, unit_env):
        """20 matching lounges and 3 posts yield 5 lounges, 3 posts and true totals."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        lounge_repo = await unit_env.get(LoungeRepository)
        post_repo = await unit_env.get(PostRepository)
        for i in range(20):
            await lounge_repo.save(make_lounge(name=f"query fans {i}", member_count=i))
        home = await lounge_repo.save(make_lounge(name="Home", slug="home"))
        for i in range(3):
            await post_repo.save(
                make_post(lounge_id=home.id, title=f"query post {i}", minutes_ago=i)
            )

        # Act
        result = await search_service.search(SearchQuery(text="query"))

        # Assert
        assert len(result.lounges.items) == 5
        assert result.lounges.total == 20
        assert len(result.posts.items) == 3
        assert result.posts.total == 3

    @pytest.mark.asyncio
    async def test_lounges_ordered_by_member_count(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        lounge_repo = await unit_env.get(LoungeRepository)
        await lounge_repo.save(make_lounge(name="Small Idol Club", member_count=10))
        await lounge_repo.save(make_lounge(name="Big Idol Club", member_count=900))
        await lounge_repo.save(make_lounge(name="Mid Idol Club", member_count=50))

        # Act
        result = await search_service.search(
            SearchQuery(text="idol", scope=SearchScope.LOUNGE)
        )

        # Assert
        assert [lounge.member_count for lounge in result.lounges.items] == [900, 50, 10]
        assert result.posts.total == 0

    @pytest.mark.asyncio
    async def test_inactive_lounges_are_excluded(self, unit_env):
        search_service = await unit_env.get(SearchService)
        lounge_repo = await unit_env.get(LoungeRepository)
        await lounge_repo.save(make_lounge(name="Idol Active"))
        await lounge_repo.save(make_lounge(name="Idol Closed", is_active=False))

        result = await search_service.search(SearchQuery(text="idol"))

        assert [lounge.name for lounge in result.lounges.items] == ["Idol Active"]
        assert result.lounges.total == 1

    @pytest.mark.asyncio
    async def test_posts_newest_first_with_lounge_attached(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        lounge_repo = await unit_env.get(LoungeRepository)
        post_repo = await unit_env.get(PostRepository)
        lounge = await lounge_repo.save(make_lounge(name="Dance", slug="dance"))
        old = await post_repo.save(
            make_post(lounge_id=lounge.id, content="cover dance", minutes_ago=30)
        )
        new = await post_repo.save(
            make_post(lounge_id=lounge.id, content="Cover Dance", minutes_ago=1)
        )

        # Act
        result = await search_service.search(
            SearchQuery(text="cover", scope=SearchScope.POST)
        )

        # Assert
        assert [hit.post.id for hit in result.posts.items] == [new.id, old.id]
        assert all(hit.lounge.slug == "dance" for hit in result.posts.items)

    @pytest.mark.asyncio
    async def test_deleted_posts_are_excluded(self, unit_env):
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(content="fancam"))
        await post_repo.save(make_post(content="fancam", deleted=True))

        result = await search_service.search(SearchQuery(text="fancam"))

        assert result.posts.total == 1

    @pytest.mark.asyncio
    async def test_tag_search_skips_lounges_and_matches_tags_exactly(self, unit_env):
        """A '#' query never returns lounges and matches whole tags only."""
        # Arrange
        search_service = await unit_env.get(SearchService)
        lounge_repo = await unit_env.get(LoungeRepository)
        post_repo = await unit_env.get(PostRepository)
        await lounge_repo.save(make_lounge(name="abc lounge"))
        tagged = await post_repo.save(make_post(title="abc", tags=["ABC"]))
        await post_repo.save(make_post(title="abc", tags=["abcd"]))

        # Act
        result = await search_service.search(SearchQuery(text="#abc"))

        # Assert
        assert result.lounges.items == []
        assert result.lounges.total == 0
        assert [hit.post.id for hit in result.posts.items] == [tagged.id]

    @pytest.mark.asyncio
    async def test_single_scope_paginates(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        posts = [
            await post_repo.save(make_post(content="stan", minutes_ago=i))
            for i in range(7)
        ]

        # Act
        result = await search_service.search(
            SearchQuery(text="stan", scope=SearchScope.POST, page=2, limit=3)
        )

        # Assert
        assert [hit.post.id for hit in result.posts.items] == [p.id for p in posts[3:6]]
        assert result.posts.total == 7

    @pytest.mark.asyncio
    async def test_all_scope_ignores_page(self, unit_env):
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        for i in range(4):
            await post_repo.save(make_post(content="stan", minutes_ago=i))

        result = await search_service.search(SearchQuery(text="stan", page=5, limit=1))

        assert len(result.posts.items) == 4

    @pytest.mark.asyncio
    async def test_like_wildcards_are_matched_literally(self, unit_env):
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(content="100% bias"))
        await post_repo.save(make_post(content="1000 bias"))

        result = await search_service.search(SearchQuery(text="100%"))

        assert result.posts.total == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    async def test_blank_query_is_rejected(self, unit_env, text):
        search_service = await unit_env.get(SearchService)

        with pytest.raises(ValidationError):
            await search_service.search(SearchQuery(text=text))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["#", "  #  "])
    async def test_bare_tag_marker_is_rejected(self, unit_env, text):
        search_service = await unit_env.get(SearchService)

        with pytest.raises(ValidationError):
            await search_service.search(SearchQuery(text=text))

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_rejected(self, unit_env):
        search_service = await unit_env.get(SearchService)

        with pytest.raises(ValidationError):
            await search_service.search(
                SearchQuery(text="x", scope=SearchScope.POST, limit=51)
            )


class TestSearchTags:
    """Tests for search_tags."""

    @pytest.mark.asyncio
    async def test_prefix_returns_distinct_tags(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(tags=["kpop"]))
        await post_repo.save(make_post(tags=["kpop", "dance"]))

        # Act
        tags = await search_service.search_tags(prefix="kp")

        # Assert
        assert tags == ["kpop"]

    @pytest.mark.asyncio
    async def test_prefix_is_case_insensitive(self, unit_env):
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(tags=["KPop"]))

        assert await search_service.search_tags(prefix="kp") == ["KPop"]

    @pytest.mark.asyncio
    async def test_no_prefix_reads_popular_cache(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        tag_repo = await unit_env.get(TagRepository)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(tags=["ignored"]))
        await tag_repo.save_popular(PopularTag(tag="bts", count=50))
        await tag_repo.save_popular(PopularTag(tag="aespa", count=80))

        # Act
        tags = await search_service.search_tags()

        # Assert
        assert tags == ["aespa", "bts"]

    @pytest.mark.asyncio
    async def test_lounge_scoped_cache_entries_are_not_global(self, unit_env):
        search_service = await unit_env.get(SearchService)
        tag_repo = await unit_env.get(TagRepository)
        lounge = make_lounge()
        await tag_repo.save_popular(
            PopularTag(tag="local", count=99, lounge_id=lounge.id)
        )
        await tag_repo.save_popular(PopularTag(tag="global", count=1))

        assert await search_service.search_tags() == ["global"]

    @pytest.mark.asyncio
    async def test_empty_cache_falls_back_to_frequency(self, unit_env):
        # Arrange
        search_service = await unit_env.get(SearchService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(tags=["dance", "kpop"]))
        await post_repo.save(make_post(tags=["kpop"]))
        await post_repo.save(make_post(tags=["kpop", "jpop"]))

        # Act
        tags = await search_service.search_tags(limit=1)

        # Assert
        assert tags == ["kpop"]

    @pytest.mark.asyncio
    async def test_blank_prefix_behaves_like_no_prefix(self, unit_env):
        search_service = await unit_env.get(SearchService)
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save_popular(PopularTag(tag="bts", count=5))

        assert await search_service.search_tags(prefix="   ") == ["bts"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 21])
    async def test_limit_out_of_range_is_rejected(self, unit_env, limit):
        search_service = await unit_env.get(SearchService)

        with pytest.raises(ValidationError):
            await search_service.search_tags(prefix="k", limit=limit)
