"""Get replies use case."""

from pydantic import BaseModel

from board.application.usecase.opinion.items import OpinionItem
from board.domain.service import OpinionService
from board.domain.value import OpinionId


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    opinion_id: int


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    opinion_id: int
    replies: list[OpinionItem]
    total: int


class GetRepliesUseCase:
    """Use case for listing the replies to an opinion."""

    def __init__(self, opinion_service: OpinionService) -> None:
        """Initialize get replies use case.

        Args:
            opinion_service: Opinion domain service
        """
        self.opinion_service = opinion_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Unknown opinions simply have no replies.

        Args:
            request: Get replies request

        Returns:
            Replies, oldest first
        """
        replies = await self.opinion_service.get_replies(OpinionId(request.opinion_id))
        items = [OpinionItem.from_opinion(reply) for reply in replies]
        return GetRepliesResponse(
            opinion_id=request.opinion_id, replies=items, total=len(items)
        )
