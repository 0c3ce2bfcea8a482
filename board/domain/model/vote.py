"""User vote entity.

A user's current stance on one opinion. There is at most one per
(user, opinion) pair; it's overwritten on flip and never removed.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import OpinionId, UserId, VoteType


class UserVote(DomainModel):
    """User vote entity."""

    user_id: UserId
    opinion_id: OpinionId
    vote: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
