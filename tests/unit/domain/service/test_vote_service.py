"""Unit tests for VoteService."""

import asyncio

import pytest

from board.domain.error import OpinionNotFoundError
from board.domain.repository import VoteRepository
from board.domain.service import OpinionService, VoteService
from board.domain.value import OpinionId, UserId, VoteOutcome, VoteType
from board.util.locks import KeyedLock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ALICE = UserId("alice")
BOB = UserId("bob")


class TestVote:
    """Tests for vote transitions."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_record_and_increments(self, unit_env):
        """A first vote records the choice and bumps its counter."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        opinion = await opinion_service.create_opinion("Votable")

        # Act
        result = await vote_service.vote(ALICE, opinion.id, VoteType.UP)

        # Assert
        assert result.outcome == VoteOutcome.CREATED
        assert (result.opinion.upvotes, result.opinion.downvotes) == (1, 0)
        updated = await opinion_service.get_opinion(opinion.id)
        assert updated == result.opinion
        assert await vote_service.get_user_vote(ALICE, opinion.id) == VoteType.UP

    @pytest.mark.asyncio
    async def test_repeated_vote_is_noop(self, unit_env):
        """Voting the same way twice changes nothing."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        opinion = await opinion_service.create_opinion("Votable")
        await vote_service.vote(ALICE, opinion.id, VoteType.DOWN)

        # Act
        result = await vote_service.vote(ALICE, opinion.id, VoteType.DOWN)

        # Assert
        assert result.outcome == VoteOutcome.UNCHANGED
        assert (result.opinion.upvotes, result.opinion.downvotes) == (0, 1)
        updated = await opinion_service.get_opinion(opinion.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_flip_moves_vote_between_counters(self, unit_env):
        """Flipping decrements the old counter and increments the new one."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        opinion = await opinion_service.create_opinion("Votable")
        await vote_service.vote(ALICE, opinion.id, VoteType.UP)
        original = await vote_repo.find_by_user_and_opinion(ALICE, opinion.id)

        # Act
        result = await vote_service.vote(ALICE, opinion.id, VoteType.DOWN)

        # Assert
        assert result.outcome == VoteOutcome.CHANGED
        assert (result.opinion.upvotes, result.opinion.downvotes) == (0, 1)
        updated = await opinion_service.get_opinion(opinion.id)
        assert (updated.upvotes, updated.downvotes) == (0, 1)
        record = await vote_repo.find_by_user_and_opinion(ALICE, opinion.id)
        assert record.vote == VoteType.DOWN
        assert record.created_at == original.created_at
        assert record.updated_at >= original.updated_at

    @pytest.mark.asyncio
    async def test_flip_and_flip_back_restores_counters(self, unit_env):
        """Up, down, then up again leaves the opinion as it was after the first vote."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        opinion = await opinion_service.create_opinion("Votable")
        await vote_service.vote(BOB, opinion.id, VoteType.DOWN)
        first = await vote_service.vote(ALICE, opinion.id, VoteType.UP)
        count_after_first = await vote_repo.count_by_opinion(opinion.id)

        # Act
        down = await vote_service.vote(ALICE, opinion.id, VoteType.DOWN)
        back = await vote_service.vote(ALICE, opinion.id, VoteType.UP)

        # Assert
        assert down.outcome == VoteOutcome.CHANGED
        assert back.outcome == VoteOutcome.CHANGED
        assert (down.opinion.upvotes, down.opinion.downvotes) == (0, 2)
        assert (back.opinion.upvotes, back.opinion.downvotes) == (
            first.opinion.upvotes,
            first.opinion.downvotes,
        )
        assert (back.opinion.upvotes, back.opinion.downvotes) == (1, 1)
        assert await vote_repo.count_by_opinion(opinion.id) == count_after_first == 2
        record = await vote_repo.find_by_user_and_opinion(ALICE, opinion.id)
        assert record.vote == VoteType.UP

    @pytest.mark.asyncio
    async def test_result_reflects_own_vote_under_concurrency(self, unit_env):
        """Each result carries the counters as its own vote left them."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        opinion = await opinion_service.create_opinion("Busy")
        users = [UserId(f"user-{i}") for i in range(5)]

        # Act
        results = await asyncio.gather(
            *(vote_service.vote(u, opinion.id, VoteType.UP) for u in users)
        )

        # Assert
        assert sorted(r.opinion.upvotes for r in results) == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_unknown_opinion_leaves_no_lock_behind(self, unit_env):
        """Votes on ids that don't exist never allocate a lock."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        locks = await unit_env.get(KeyedLock)
        before = len(locks)

        # Act
        for missing in range(100, 150):
            with pytest.raises(OpinionNotFoundError):
                await vote_service.vote(ALICE, OpinionId(missing), VoteType.UP)

        # Assert
        assert len(locks) == before
        assert not any(
            locks.locked(("opinion", OpinionId(missing)))
            for missing in range(100, 150)
        )

    @pytest.mark.asyncio
    async def test_vote_on_unknown_opinion_raises(self, unit_env):
        """Voting on an unknown opinion should fail without recording anything."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        # Act & Assert
        with pytest.raises(OpinionNotFoundError):
            await vote_service.vote(ALICE, OpinionId(99), VoteType.UP)

        assert await vote_repo.find_by_user(ALICE) == []

    @pytest.mark.asyncio
    async def test_counters_match_vote_records(self, unit_env):
        """upvotes + downvotes equals the number of distinct voters."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        opinion = await opinion_service.create_opinion("Votable")

        # Act
        await vote_service.vote(ALICE, opinion.id, VoteType.UP)
        await vote_service.vote(BOB, opinion.id, VoteType.UP)
        await vote_service.vote(ALICE, opinion.id, VoteType.DOWN)
        await vote_service.vote(BOB, opinion.id, VoteType.UP)

        # Assert
        updated = await opinion_service.get_opinion(opinion.id)
        assert (updated.upvotes, updated.downvotes) == (1, 1)
        assert await vote_repo.count_by_opinion(opinion.id) == 2

    @pytest.mark.asyncio
    async def test_concurrent_votes_keep_counters_consistent(self, unit_env):
        """Interleaved votes and flips never desynchronise the counters."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        opinion = await opinion_service.create_opinion("Contested")
        users = [UserId(f"user-{i}") for i in range(10)]

        # Act
        await asyncio.gather(
            *(vote_service.vote(u, opinion.id, VoteType.UP) for u in users),
            *(vote_service.vote(u, opinion.id, VoteType.DOWN) for u in users[:4]),
        )

        # Assert
        updated = await opinion_service.get_opinion(opinion.id)
        votes = await vote_repo.find_by_opinion(opinion.id)
        assert updated.upvotes + updated.downvotes == len(votes) == 10
        assert updated.upvotes == sum(1 for v in votes if v.vote == VoteType.UP)


class TestGetUserVote:
    """Tests for get_user_vote method."""

    @pytest.mark.asyncio
    async def test_no_vote_returns_none(self, unit_env):
        """A user who hasn't voted has no vote."""
        vote_service = await unit_env.get(VoteService)

        assert await vote_service.get_user_vote(ALICE, OpinionId(0)) is None
