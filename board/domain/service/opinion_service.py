"""Opinion domain service."""

from datetime import datetime

import logfire

from board.config import OpinionSettings
from board.domain.error import (
    EmptyContentError,
    MaxDepthExceededError,
    OpinionNotFoundError,
    ParentNotFoundError,
)
from board.domain.model.opinion import Opinion
from board.domain.repository import OpinionRepository
from board.domain.value import Media, OpinionId
from board.util.locks import KeyedLock

from .base import Service

# Lock key guarding id allocation and inserts
STORE_LOCK = ("opinions",)


class OpinionService(Service):
    """Domain service for the opinion store."""

    def __init__(
        self,
        opinion_repository: OpinionRepository,
        opinion_settings: OpinionSettings,
        locks: KeyedLock,
    ) -> None:
        """Initialize opinion service.

        Args:
            opinion_repository: Opinion repository
            opinion_settings: Store configuration (reply depth limit)
            locks: Shared per-entity locks
        """
        self.opinion_repository = opinion_repository
        self.settings = opinion_settings
        self.locks = locks

    async def validate_new(self, content: str, parent_id: OpinionId | None) -> int:
        """Validate a new opinion without storing anything.

        Args:
            content: Opinion text
            parent_id: Parent opinion ID for replies (None for top-level)

        Returns:
            Depth the opinion would be stored at

        Raises:
            EmptyContentError: If content is empty or whitespace only
            ParentNotFoundError: If the parent doesn't exist
            MaxDepthExceededError: If the reply would nest too deep
        """
        if not content.strip():
            raise EmptyContentError()

        if parent_id is None:
            return 0

        parent = await self.opinion_repository.find_by_id(parent_id)
        if parent is None:
            logfire.warn("Parent opinion not found", parent_id=parent_id)
            raise ParentNotFoundError(parent_id)

        depth = parent.depth + 1
        if depth > self.settings.max_reply_depth:
            logfire.warn(
                "Reply depth exceeded",
                parent_id=parent_id,
                parent_depth=parent.depth,
                max_depth=self.settings.max_reply_depth,
            )
            raise MaxDepthExceededError(parent_id, self.settings.max_reply_depth)

        return depth

    async def create_opinion(
        self,
        content: str,
        media: Media | None = None,
        parent_id: OpinionId | None = None,
    ) -> Opinion:
        """Store a new opinion.

        Validation and id allocation happen under the store lock, and the id
        is only allocated once validation has passed, so failed attempts
        never consume an id.

        Args:
            content: Opinion text
            media: Optional attachment
            parent_id: Parent opinion ID for replies (None for top-level)

        Returns:
            Created opinion

        Raises:
            EmptyContentError: If content is empty or whitespace only
            ParentNotFoundError: If the parent doesn't exist
            MaxDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "opinion_service.create_opinion",
            parent_id=parent_id,
            has_media=media is not None,
        ):
            async with self.locks.hold(STORE_LOCK):
                depth = await self.validate_new(content, parent_id)

                opinion = Opinion(
                    id=await self.opinion_repository.peek_next_id(),
                    content=content,
                    created_at=datetime.now(),
                    media=media,
                    upvotes=0,
                    downvotes=0,
                    parent_id=parent_id,
                    depth=depth,
                )
                # Built successfully, the id can be consumed now
                await self.opinion_repository.allocate_id()
                saved = await self.opinion_repository.save(opinion)

            logfire.info(
                "Opinion created",
                opinion_id=saved.id,
                parent_id=parent_id,
                depth=depth,
            )
            return saved

    async def get_opinion(self, opinion_id: OpinionId) -> Opinion | None:
        """Get an opinion by ID.

        Args:
            opinion_id: Opinion ID

        Returns:
            Opinion if found, None otherwise
        """
        return await self.opinion_repository.find_by_id(opinion_id)

    async def get_top_level(self) -> list[Opinion]:
        """Get all top-level opinions, oldest first."""
        with logfire.span("opinion_service.get_top_level"):
            opinions = await self.opinion_repository.find_top_level()
            logfire.info("Top-level opinions retrieved", count=len(opinions))
            return opinions

    async def get_replies(self, opinion_id: OpinionId) -> list[Opinion]:
        """Get direct replies to an opinion, oldest first.

        Args:
            opinion_id: Parent opinion ID

        Returns:
            Replies (empty if there are none or the opinion doesn't exist)
        """
        return await self.opinion_repository.find_replies(opinion_id)

    async def get_thread(
        self, opinion_id: OpinionId
    ) -> tuple[Opinion, list[Opinion]] | None:
        """Get an opinion together with its replies.

        Args:
            opinion_id: Opinion ID

        Returns:
            (opinion, replies) if the opinion exists, None otherwise
        """
        opinion = await self.opinion_repository.find_by_id(opinion_id)
        if opinion is None:
            return None
        replies = await self.opinion_repository.find_replies(opinion_id)
        return opinion, replies

    async def apply_vote_delta(
        self, opinion_id: OpinionId, up_delta: int, down_delta: int
    ) -> Opinion:
        """Adjust vote counters.

        Only the vote ledger calls this, while holding the opinion's lock.

        Args:
            opinion_id: Opinion ID
            up_delta: Change to upvotes
            down_delta: Change to downvotes

        Returns:
            Updated opinion

        Raises:
            OpinionNotFoundError: If the opinion doesn't exist
        """
        updated = await self.opinion_repository.adjust_votes(
            opinion_id, up_delta, down_delta
        )
        if updated is None:
            raise OpinionNotFoundError(opinion_id)
        return updated
