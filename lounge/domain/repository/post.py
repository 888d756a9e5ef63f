"""Post repository interface."""

from abc import abstractmethod
from typing import List, Optional

from lounge.domain.model.post import Post
from lounge.domain.repository.votable import VotableRepository
from lounge.domain.value import PostId


class PostRepository(VotableRepository[PostId, Post]):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update), including its tags.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def search(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find non-deleted posts, newest first.

        Args:
            text: Case-insensitive substring matched against title or content
            tag: Tag matched exactly, case-insensitively
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Matching posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_matching(
        self,
        text: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> int:
        """Count non-deleted posts matching the same filters as ``search``.

        Args:
            text: Case-insensitive substring matched against title or content
            tag: Tag matched exactly, case-insensitively

        Returns:
            Total number of matching posts
        """
        pass
