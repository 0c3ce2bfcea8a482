"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime

import logfire

from board.domain.error import OpinionNotFoundError
from board.domain.model.opinion import Opinion
from board.domain.model.vote import UserVote
from board.domain.repository import VoteRepository
from board.domain.value import OpinionId, UserId, VoteOutcome, VoteType
from board.util.locks import KeyedLock

from .base import Service
from .opinion_service import OpinionService


def _counter_delta(vote: VoteType, amount: int) -> tuple[int, int]:
    """(up_delta, down_delta) adding amount to the counter for vote."""
    if vote == VoteType.UP:
        return amount, 0
    return 0, amount


@dataclass(frozen=True)
class VoteResult:
    """What a vote did, and the opinion as it stood when the lock was released."""

    outcome: VoteOutcome
    opinion: Opinion


class VoteService(Service):
    """Domain service for the vote ledger.

    Per (user, opinion) pair:
    - no prior vote: record it and increment the chosen counter
    - same choice again: no-op
    - other choice: decrement the old counter, increment the new one,
      overwrite the record

    The whole transition runs under the opinion's lock, which keeps
    upvotes + downvotes equal to the number of vote records on the opinion.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        opinion_service: OpinionService,
        locks: KeyedLock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            opinion_service: Opinion domain service
            locks: Shared per-entity locks
        """
        self.vote_repository = vote_repository
        self.opinion_service = opinion_service
        self.locks = locks

    async def vote(
        self, user_id: UserId, opinion_id: OpinionId, choice: VoteType
    ) -> VoteResult:
        """Cast or change a vote.

        Opinions are never deleted, so the existence check can run before the
        opinion's lock is taken. Unknown ids never get a lock.

        Args:
            user_id: Voting user
            opinion_id: Opinion being voted on
            choice: Up or down

        Returns:
            What the call did to the ledger, with the opinion's counters
            as of the end of the transition

        Raises:
            OpinionNotFoundError: If the opinion doesn't exist
        """
        with logfire.span(
            "vote_service.vote",
            user_id=user_id,
            opinion_id=opinion_id,
            choice=choice.value,
        ):
            if await self.opinion_service.get_opinion(opinion_id) is None:
                logfire.warn("Vote on non-existent opinion", opinion_id=opinion_id)
                raise OpinionNotFoundError(opinion_id)

            async with self.locks.hold(("opinion", opinion_id)):
                opinion = await self.opinion_service.get_opinion(opinion_id)

                existing = await self.vote_repository.find_by_user_and_opinion(
                    user_id, opinion_id
                )

                if existing is None:
                    now = datetime.now()
                    await self.vote_repository.save(
                        UserVote(
                            user_id=user_id,
                            opinion_id=opinion_id,
                            vote=choice,
                            created_at=now,
                            updated_at=now,
                        )
                    )
                    opinion = await self.opinion_service.apply_vote_delta(
                        opinion_id, *_counter_delta(choice, 1)
                    )
                    outcome = VoteOutcome.CREATED

                elif existing.vote == choice:
                    outcome = VoteOutcome.UNCHANGED

                else:
                    old_up, old_down = _counter_delta(existing.vote, -1)
                    new_up, new_down = _counter_delta(choice, 1)
                    await self.vote_repository.save(
                        existing.model_copy(
                            update={"vote": choice, "updated_at": datetime.now()}
                        )
                    )
                    opinion = await self.opinion_service.apply_vote_delta(
                        opinion_id, old_up + new_up, old_down + new_down
                    )
                    outcome = VoteOutcome.CHANGED

            logfire.info(
                "Vote processed",
                user_id=user_id,
                opinion_id=opinion_id,
                choice=choice.value,
                outcome=outcome.value,
            )
            return VoteResult(outcome=outcome, opinion=opinion)

    async def get_user_vote(
        self, user_id: UserId, opinion_id: OpinionId
    ) -> VoteType | None:
        """Get a user's current vote on an opinion.

        Args:
            user_id: User ID
            opinion_id: Opinion ID

        Returns:
            The vote, or None if the user hasn't voted on it
        """
        vote = await self.vote_repository.find_by_user_and_opinion(
            user_id, opinion_id
        )
        return vote.vote if vote else None

