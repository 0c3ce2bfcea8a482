"""Unit tests for SnapshotService."""

from datetime import datetime

import pytest

from board.domain.error import InvalidSnapshotError
from board.domain.model import Opinion, Snapshot, UserPointsTracker, UserVote
from board.domain.model.snapshot import SNAPSHOT_VERSION
from board.domain.service import (
    OpinionService,
    PointsService,
    SnapshotService,
    VoteService,
)
from board.domain.value import OpinionId, UserId, VoteType
from tests.conftest import make_opinion
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ALICE = UserId("alice")


def _vote(user: str, opinion_id: int, vote: VoteType) -> UserVote:
    now = datetime(2024, 1, 1, 12, 0, 0)
    return UserVote(
        user_id=UserId(user),
        opinion_id=OpinionId(opinion_id),
        vote=vote,
        created_at=now,
        updated_at=now,
    )


class TestExportState:
    """Tests for export_state method."""

    @pytest.mark.asyncio
    async def test_export_captures_all_tables(self, unit_env):
        """Opinions, votes, points and the id counter are exported."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        points_service = await unit_env.get(PointsService)
        snapshot_service = await unit_env.get(SnapshotService)

        parent = await opinion_service.create_opinion("Parent")
        await opinion_service.create_opinion("Reply", parent_id=parent.id)
        await vote_service.vote(ALICE, parent.id, VoteType.UP)
        await points_service.adjust(ALICE, earned=5, spent=0)

        # Act
        snapshot = await snapshot_service.export_state()

        # Assert
        assert snapshot.next_opinion_id == 2
        assert [key for key, _ in snapshot.opinions] == [0, 1]
        assert [user for user, _ in snapshot.votes] == [ALICE]
        assert snapshot.points[0][1].remaining_points == 55

    @pytest.mark.asyncio
    async def test_export_then_import_restores_state(self, unit_env):
        """Importing an export into an emptied store reproduces it."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        vote_service = await unit_env.get(VoteService)
        snapshot_service = await unit_env.get(SnapshotService)

        parent = await opinion_service.create_opinion("Parent")
        await vote_service.vote(ALICE, parent.id, VoteType.DOWN)
        snapshot = await snapshot_service.export_state()
        await snapshot_service.import_state(Snapshot(next_opinion_id=OpinionId(0)))

        # Act
        await snapshot_service.import_state(snapshot)

        # Assert
        restored = await opinion_service.get_opinion(parent.id)
        assert restored.downvotes == 1
        assert await vote_service.get_user_vote(ALICE, parent.id) == VoteType.DOWN
        next_opinion = await opinion_service.create_opinion("After restore")
        assert next_opinion.id == 1


class TestImportState:
    """Tests for import_state validation."""

    @pytest.mark.asyncio
    async def test_import_keeps_id_counter(self, unit_env):
        """Ids continue after the snapshot's counter, gaps included."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        snapshot_service = await unit_env.get(SnapshotService)
        snapshot = Snapshot(
            next_opinion_id=OpinionId(10),
            opinions=[(OpinionId(3), make_opinion(3))],
        )

        # Act
        await snapshot_service.import_state(snapshot)
        created = await opinion_service.create_opinion("New")

        # Assert
        assert created.id == 10

    @pytest.mark.asyncio
    async def test_mismatched_counters_are_rejected(self, unit_env):
        """Counters that disagree with the vote records invalidate the snapshot."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        snapshot_service = await unit_env.get(SnapshotService)
        existing = await opinion_service.create_opinion("Already here")
        snapshot = Snapshot(
            next_opinion_id=OpinionId(1),
            opinions=[(OpinionId(0), make_opinion(0, upvotes=2))],
            votes=[(UserId("alice"), [_vote("alice", 0, VoteType.UP)])],
        )

        # Act & Assert
        with pytest.raises(InvalidSnapshotError):
            await snapshot_service.import_state(snapshot)

        # Nothing was replaced
        assert await opinion_service.get_opinion(existing.id) == existing

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "snapshot",
        [
            # Key doesn't match the opinion id
            Snapshot(
                next_opinion_id=OpinionId(2),
                opinions=[(OpinionId(1), make_opinion(0))],
            ),
            # Id not below the counter
            Snapshot(
                next_opinion_id=OpinionId(0),
                opinions=[(OpinionId(0), make_opinion(0))],
            ),
            # Reply to a missing parent
            Snapshot(
                next_opinion_id=OpinionId(2),
                opinions=[(OpinionId(1), make_opinion(1, parent_id=0))],
            ),
            # Vote on a missing opinion
            Snapshot(
                next_opinion_id=OpinionId(0),
                votes=[(UserId("alice"), [_vote("alice", 4, VoteType.UP)])],
            ),
            # Vote stored under another user
            Snapshot(
                next_opinion_id=OpinionId(1),
                opinions=[(OpinionId(0), make_opinion(0, upvotes=1))],
                votes=[(UserId("bob"), [_vote("alice", 0, VoteType.UP)])],
            ),
            # Points stored under another user
            Snapshot(
                next_opinion_id=OpinionId(0),
                points=[
                    (
                        UserId("bob"),
                        UserPointsTracker(
                            user_id=UserId("alice"),
                            total_points=50,
                            remaining_points=50,
                        ),
                    )
                ],
            ),
        ],
    )
    async def test_inconsistent_snapshots_are_rejected(self, unit_env, snapshot):
        """Snapshots breaking a store rule are refused."""
        snapshot_service = await unit_env.get(SnapshotService)

        with pytest.raises(InvalidSnapshotError):
            await snapshot_service.import_state(snapshot)

    @pytest.mark.asyncio
    async def test_unknown_version_is_rejected(self, unit_env):
        """Snapshots written by another format version are refused untouched."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        snapshot_service = await unit_env.get(SnapshotService)
        existing = await opinion_service.create_opinion("Already here")
        snapshot = Snapshot(version=SNAPSHOT_VERSION + 1, next_opinion_id=OpinionId(0))

        # Act & Assert
        with pytest.raises(InvalidSnapshotError, match="version"):
            await snapshot_service.import_state(snapshot)

        assert await opinion_service.get_opinion(existing.id) == existing

    @pytest.mark.asyncio
    async def test_replies_deeper_than_limit_are_rejected(self, unit_env):
        """A reply to a reply can't sneak in through a snapshot."""
        # Arrange
        opinion_service = await unit_env.get(OpinionService)
        snapshot_service = await unit_env.get(SnapshotService)
        created_at = datetime(2024, 1, 1, 12, 0, 0)
        chain = [
            Opinion(id=OpinionId(0), content="Root", created_at=created_at),
            Opinion(
                id=OpinionId(1),
                content="Reply",
                created_at=created_at,
                parent_id=OpinionId(0),
                depth=1,
            ),
            Opinion(
                id=OpinionId(2),
                content="Reply to reply",
                created_at=created_at,
                parent_id=OpinionId(1),
                depth=2,
            ),
        ]
        snapshot = Snapshot(
            next_opinion_id=OpinionId(3),
            opinions=[(opinion.id, opinion) for opinion in chain],
        )

        # Act & Assert
        with pytest.raises(InvalidSnapshotError, match="depth"):
            await snapshot_service.import_state(snapshot)

        assert await opinion_service.get_top_level() == []
