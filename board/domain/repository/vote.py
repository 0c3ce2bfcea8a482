"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from board.domain.model.vote import UserVote
from board.domain.value import OpinionId, UserId


class VoteRepository(ABC):
    """Repository for UserVote entity.

    Holds at most one vote per (user, opinion) pair.
    """

    @abstractmethod
    async def find_by_user_and_opinion(
        self, user_id: UserId, opinion_id: OpinionId
    ) -> Optional[UserVote]:
        """Find a user's vote on a specific opinion.

        Args:
            user_id: The user's ID
            opinion_id: ID of the opinion

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[UserVote]:
        """Find all votes by a user, in the order they were first cast.

        Args:
            user_id: The user's ID

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def find_by_opinion(self, opinion_id: OpinionId) -> List[UserVote]:
        """Find all votes on an opinion.

        Args:
            opinion_id: ID of the opinion

        Returns:
            List of votes on the opinion
        """
        pass

    @abstractmethod
    async def count_by_opinion(self, opinion_id: OpinionId) -> int:
        """Count votes on an opinion.

        Args:
            opinion_id: ID of the opinion

        Returns:
            Number of vote records
        """
        pass

    @abstractmethod
    async def list_users(self) -> List[UserId]:
        """List users that have voted, in the order of their first vote."""
        pass

    @abstractmethod
    async def save(self, vote: UserVote) -> UserVote:
        """Save a vote, replacing the user's existing vote on the same opinion.

        Args:
            vote: The vote to save

        Returns:
            The saved vote
        """
        pass

    @abstractmethod
    async def replace_all(self, votes: Sequence[UserVote]) -> None:
        """Replace every stored vote (used when restoring a snapshot).

        Args:
            votes: Votes grouped by user in first-vote order
        """
        pass
