"""Snapshot of the whole board state.

Used to carry state across restarts and upgrades. Each table is an ordered
list of key/value pairs so the snapshot maps directly onto stable-storage
formats that only know about lists.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.opinion import Opinion
from board.domain.model.points import UserPointsTracker
from board.domain.model.vote import UserVote
from board.domain.value import OpinionId, UserId

SNAPSHOT_VERSION = 1


class Snapshot(DomainModel):
    """Full contents of the opinion store, vote ledger and points ledger."""

    version: int = SNAPSHOT_VERSION
    exported_at: datetime = Field(default_factory=datetime.now)
    next_opinion_id: OpinionId = Field(ge=0)
    opinions: list[tuple[OpinionId, Opinion]] = []
    votes: list[tuple[UserId, list[UserVote]]] = []
    points: list[tuple[UserId, UserPointsTracker]] = []
