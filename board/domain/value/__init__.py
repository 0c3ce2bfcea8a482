"""Domain value objects for the opinion board."""

from board.domain.value.identifiers import OpinionId, UserId
from board.domain.value.types import Media, MediaKind, VoteOutcome, VoteType

__all__ = [
    # Identifiers
    "OpinionId",
    "UserId",
    # Types
    "Media",
    "MediaKind",
    "VoteOutcome",
    "VoteType",
]
