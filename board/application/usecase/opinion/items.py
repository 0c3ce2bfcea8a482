"""Opinion response items shared by the opinion use cases."""

import base64
from datetime import datetime

from pydantic import BaseModel

from board.domain.model.opinion import Opinion
from board.domain.value import MediaKind


class MediaItem(BaseModel):
    """Media attachment in response."""

    kind: MediaKind
    data: str  # base64


class OpinionItem(BaseModel):
    """Opinion item in response."""

    opinion_id: int
    content: str
    created_at: datetime
    media: MediaItem | None
    upvotes: int
    downvotes: int
    parent_id: int | None
    depth: int

    @classmethod
    def from_opinion(cls, opinion: Opinion) -> "OpinionItem":
        """Build a response item from a domain opinion."""
        media = None
        if opinion.media is not None:
            media = MediaItem(
                kind=opinion.media.kind,
                data=base64.b64encode(opinion.media.data).decode("ascii"),
            )
        return cls(
            opinion_id=opinion.id,
            content=opinion.content,
            created_at=opinion.created_at,
            media=media,
            upvotes=opinion.upvotes,
            downvotes=opinion.downvotes,
            parent_id=opinion.parent_id,
            depth=opinion.depth,
        )
