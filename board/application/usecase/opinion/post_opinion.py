"""Post opinion use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.config import PointsSettings
from board.domain.error import InappropriateContentError
from board.domain.service import ModerationService, OpinionService, PointsService
from board.domain.value import Media, OpinionId, UserId


class PostOpinionRequest(BaseModel):
    """Post opinion request."""

    user_id: str  # Opaque caller identity
    content: str
    media: Media | None = None
    parent_id: int | None = None  # Parent opinion ID for replies


class PostOpinionResponse(BaseModel):
    """Post opinion response."""

    opinion_id: int
    parent_id: int | None
    depth: int
    created_at: datetime
    remaining_points: int


class PostOpinionUseCase(BaseUseCase):
    """Use case for posting an opinion or a reply."""

    def __init__(
        self,
        opinion_service: OpinionService,
        moderation_service: ModerationService,
        points_service: PointsService,
        points_settings: PointsSettings,
    ) -> None:
        """Initialize post opinion use case.

        Args:
            opinion_service: Opinion domain service
            moderation_service: Moderation domain service
            points_service: Points domain service
            points_settings: Post costs and reply reward
        """
        self.opinion_service = opinion_service
        self.moderation_service = moderation_service
        self.points_service = points_service
        self.points_settings = points_settings

    async def execute(self, request: PostOpinionRequest) -> PostOpinionResponse:
        """Execute post opinion flow.

        Steps:
        1. Validate content and parent (nothing is mutated on failure)
        2. Reserve the post cost (balance checked before the debit)
        3. Moderate; if the opinion is not stored (rejection, error or
           cancellation) the reservation is released
        4. Store the opinion
        5. Credit the reply reward for replies

        Args:
            request: Post opinion request

        Returns:
            Created opinion details and the caller's remaining balance

        Raises:
            EmptyContentError: If content is empty
            InputTooLongError: If content is too long
            ParentNotFoundError: If the parent doesn't exist
            MaxDepthExceededError: If the parent is itself a reply
            InsufficientPointsError: If the caller can't afford the post
            InappropriateContentError: If moderation rejects the content
        """
        user_id = UserId(request.user_id)
        parent_id = OpinionId(request.parent_id) if request.parent_id is not None else None

        with logfire.span(
            "post_opinion.execute",
            user_id=user_id,
            parent_id=parent_id,
            length=len(request.content),
        ):
            self.moderation_service.check_length(request.content)
            await self.opinion_service.validate_new(request.content, parent_id)

            cost = (
                self.points_settings.reply_cost
                if parent_id is not None
                else self.points_settings.post_cost
            )
            reservation = await self.points_service.reserve(user_id, cost)

            # Refund unless the opinion was stored, cancellation included
            opinion = None
            try:
                if await self.moderation_service.moderate(request.content):
                    logfire.info("Opinion rejected by moderation", user_id=user_id)
                    raise InappropriateContentError()

                opinion = await self.opinion_service.create_opinion(
                    content=request.content,
                    media=request.media,
                    parent_id=parent_id,
                )
            finally:
                if opinion is None:
                    await self.points_service.release(reservation)

            if opinion.is_reply and self.points_settings.reply_reward:
                tracker = await self.points_service.adjust(
                    user_id, earned=self.points_settings.reply_reward, spent=0
                )
            else:
                tracker = await self.points_service.get_or_create(user_id)

            return PostOpinionResponse(
                opinion_id=opinion.id,
                parent_id=opinion.parent_id,
                depth=opinion.depth,
                created_at=opinion.created_at,
                remaining_points=tracker.remaining_points,
            )
