"""Snapshot domain service.

Export and import of the full board state. Used only at lifecycle boundaries
(startup, shutdown, upgrades), never during normal operation.
"""

from collections import Counter
from datetime import datetime

import logfire

from board.config import OpinionSettings
from board.domain.error import InvalidSnapshotError
from board.domain.model.snapshot import SNAPSHOT_VERSION, Snapshot
from board.domain.model.vote import UserVote
from board.domain.repository import (
    OpinionRepository,
    PointsRepository,
    VoteRepository,
)
from board.domain.value import OpinionId, VoteType
from board.util.locks import KeyedLock

from .base import Service
from .opinion_service import STORE_LOCK


class SnapshotService(Service):
    """Domain service exporting and importing the whole store."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        vote_repository: VoteRepository,
        points_repository: PointsRepository,
        locks: KeyedLock,
        opinion_settings: OpinionSettings,
    ) -> None:
        """Initialize snapshot service.

        Args:
            opinion_repository: Opinion repository
            vote_repository: Vote repository
            points_repository: Points repository
            locks: Shared per-entity locks
            opinion_settings: Reply depth limit imported opinions must respect
        """
        self.opinion_repository = opinion_repository
        self.vote_repository = vote_repository
        self.points_repository = points_repository
        self.locks = locks
        self.opinion_settings = opinion_settings

    async def export_state(self) -> Snapshot:
        """Capture opinions, votes and points.

        Returns:
            Snapshot with every table as an ordered list of key/value pairs
        """
        with logfire.span("snapshot_service.export_state"):
            async with self.locks.hold(STORE_LOCK):
                opinions = await self.opinion_repository.find_all()
                next_id = await self.opinion_repository.peek_next_id()
                votes = [
                    (user_id, await self.vote_repository.find_by_user(user_id))
                    for user_id in await self.vote_repository.list_users()
                ]
                trackers = await self.points_repository.find_all()

            snapshot = Snapshot(
                exported_at=datetime.now(),
                next_opinion_id=next_id,
                opinions=[(opinion.id, opinion) for opinion in opinions],
                votes=votes,
                points=[(tracker.user_id, tracker) for tracker in trackers],
            )
            logfire.info(
                "State exported",
                opinions=len(snapshot.opinions),
                voters=len(snapshot.votes),
                users_with_points=len(snapshot.points),
            )
            return snapshot

    async def import_state(self, snapshot: Snapshot) -> None:
        """Replace the whole store with the snapshot's contents.

        The snapshot is validated first; nothing is touched if it's
        inconsistent.

        Args:
            snapshot: Snapshot to restore

        Raises:
            InvalidSnapshotError: If the snapshot breaks a store invariant
        """
        with logfire.span(
            "snapshot_service.import_state",
            opinions=len(snapshot.opinions),
            voters=len(snapshot.votes),
        ):
            votes = self._validate(snapshot)

            async with self.locks.hold(STORE_LOCK):
                await self.opinion_repository.replace_all(
                    [opinion for _, opinion in snapshot.opinions],
                    snapshot.next_opinion_id,
                )
                await self.vote_repository.replace_all(votes)
                await self.points_repository.replace_all(
                    [tracker for _, tracker in snapshot.points]
                )

            logfire.info(
                "State imported",
                opinions=len(snapshot.opinions),
                votes=len(votes),
                users_with_points=len(snapshot.points),
            )

    def _validate(self, snapshot: Snapshot) -> list[UserVote]:
        """Check the snapshot and return its votes flattened."""
        if snapshot.version != SNAPSHOT_VERSION:
            raise InvalidSnapshotError(
                f"unsupported snapshot version {snapshot.version}, expected {SNAPSHOT_VERSION}"
            )

        opinions = {}
        for key, opinion in snapshot.opinions:
            if key != opinion.id:
                raise InvalidSnapshotError(
                    f"opinion stored under key {key} has id {opinion.id}"
                )
            if opinion.id in opinions:
                raise InvalidSnapshotError(f"duplicate opinion id {opinion.id}")
            if opinion.id >= snapshot.next_opinion_id:
                raise InvalidSnapshotError(
                    f"opinion id {opinion.id} is not below next id {snapshot.next_opinion_id}"
                )
            if opinion.depth > self.opinion_settings.max_reply_depth:
                raise InvalidSnapshotError(
                    f"opinion {opinion.id} has depth {opinion.depth}, limit is "
                    f"{self.opinion_settings.max_reply_depth}"
                )
            opinions[opinion.id] = opinion

        for opinion in opinions.values():
            if opinion.parent_id is None:
                continue
            parent = opinions.get(opinion.parent_id)
            if parent is None:
                raise InvalidSnapshotError(
                    f"opinion {opinion.id} replies to missing opinion {opinion.parent_id}"
                )
            if opinion.depth != parent.depth + 1:
                raise InvalidSnapshotError(
                    f"opinion {opinion.id} has depth {opinion.depth}, parent has {parent.depth}"
                )

        votes: list[UserVote] = []
        seen: set[tuple[str, OpinionId]] = set()
        ups: Counter[OpinionId] = Counter()
        downs: Counter[OpinionId] = Counter()
        for user_id, user_votes in snapshot.votes:
            for vote in user_votes:
                if vote.user_id != user_id:
                    raise InvalidSnapshotError(
                        f"vote by {vote.user_id} stored under user {user_id}"
                    )
                if vote.opinion_id not in opinions:
                    raise InvalidSnapshotError(
                        f"vote on missing opinion {vote.opinion_id}"
                    )
                pair = (vote.user_id, vote.opinion_id)
                if pair in seen:
                    raise InvalidSnapshotError(
                        f"duplicate vote by {vote.user_id} on opinion {vote.opinion_id}"
                    )
                seen.add(pair)
                if vote.vote == VoteType.UP:
                    ups[vote.opinion_id] += 1
                else:
                    downs[vote.opinion_id] += 1
                votes.append(vote)

        for opinion in opinions.values():
            if (opinion.upvotes, opinion.downvotes) != (
                ups[opinion.id],
                downs[opinion.id],
            ):
                raise InvalidSnapshotError(
                    f"counters of opinion {opinion.id} don't match its votes"
                )

        users = [user_id for user_id, _ in snapshot.points]
        for key, tracker in snapshot.points:
            if key != tracker.user_id:
                raise InvalidSnapshotError(
                    f"points of {tracker.user_id} stored under user {key}"
                )
        if len(set(users)) != len(users):
            raise InvalidSnapshotError("duplicate points tracker")

        return votes
