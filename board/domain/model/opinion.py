"""Opinion entity.

Opinions are short anonymous texts. A top-level opinion can collect replies;
replies can't be replied to (nesting is bounded by the store's max depth).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from board.domain.model.common import DomainModel
from board.domain.value import Media, OpinionId


class Opinion(DomainModel):
    """Opinion entity.

    Threading is managed through:
    - parent_id: Parent opinion (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    Everything except the vote counters is immutable once stored, and the
    counters are only adjusted by vote transitions.
    """

    id: OpinionId = Field(ge=0)
    content: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    media: Optional[Media] = None
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    parent_id: Optional[OpinionId] = None
    depth: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_threading(self) -> "Opinion":
        """Top-level opinions sit at depth 0 and replies below it."""
        if self.parent_id is None and self.depth != 0:
            raise ValueError("Top-level opinions must have depth 0")
        if self.parent_id is not None and self.depth == 0:
            raise ValueError("Replies must have depth of at least 1")
        return self

    @property
    def is_reply(self) -> bool:
        """Whether this opinion replies to another one."""
        return self.parent_id is not None

    @property
    def score(self) -> int:
        """Net votes."""
        return self.upvotes - self.downvotes
