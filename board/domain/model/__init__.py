"""Domain model entities for the opinion board."""

from board.domain.model.opinion import Opinion
from board.domain.model.points import UserPointsTracker
from board.domain.model.snapshot import Snapshot
from board.domain.model.vote import UserVote

__all__ = [
    "Opinion",
    "Snapshot",
    "UserPointsTracker",
    "UserVote",
]
