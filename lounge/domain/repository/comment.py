"""Comment repository interface."""

from abc import abstractmethod

from lounge.domain.model.comment import Comment
from lounge.domain.repository.votable import VotableRepository
from lounge.domain.value import CommentId


class CommentRepository(VotableRepository[CommentId, Comment]):
    """Repository for Comment entity."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
