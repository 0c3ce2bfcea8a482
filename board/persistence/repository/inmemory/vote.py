"""In-memory vote repository."""

from typing import Optional, Sequence

from board.domain.model.vote import UserVote
from board.domain.repository.vote import VoteRepository
from board.domain.value import OpinionId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository.

    Votes are keyed by user, then by opinion, which makes the
    one-vote-per-pair rule structural.
    """

    def __init__(self) -> None:
        self._votes: dict[UserId, dict[OpinionId, UserVote]] = {}

    async def find_by_user_and_opinion(
        self, user_id: UserId, opinion_id: OpinionId
    ) -> Optional[UserVote]:
        """Find a vote by user and opinion."""
        return self._votes.get(user_id, {}).get(opinion_id)

    async def find_by_user(self, user_id: UserId) -> list[UserVote]:
        """Find all votes by a user."""
        return list(self._votes.get(user_id, {}).values())

    async def find_by_opinion(self, opinion_id: OpinionId) -> list[UserVote]:
        """Find all votes on an opinion."""
        return [
            votes[opinion_id]
            for votes in self._votes.values()
            if opinion_id in votes
        ]

    async def count_by_opinion(self, opinion_id: OpinionId) -> int:
        """Count votes on an opinion."""
        return sum(1 for votes in self._votes.values() if opinion_id in votes)

    async def list_users(self) -> list[UserId]:
        """List users that have voted."""
        return list(self._votes.keys())

    async def save(self, vote: UserVote) -> UserVote:
        """Save a vote, overwriting the user's previous vote on the opinion."""
        self._votes.setdefault(vote.user_id, {})[vote.opinion_id] = vote
        return vote

    async def replace_all(self, votes: Sequence[UserVote]) -> None:
        """Replace every stored vote."""
        self._votes = {}
        for vote in votes:
            self._votes.setdefault(vote.user_id, {})[vote.opinion_id] = vote
