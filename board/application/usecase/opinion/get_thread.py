"""Get opinion thread use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.opinion.items import OpinionItem
from board.domain.service import OpinionService
from board.domain.value import OpinionId


class GetOpinionThreadRequest(BaseModel):
    """Get opinion thread request."""

    opinion_id: int


class GetOpinionThreadResponse(BaseModel):
    """An opinion with its replies."""

    opinion: OpinionItem
    replies: list[OpinionItem]


class GetOpinionThreadUseCase:
    """Use case for retrieving an opinion together with its replies."""

    def __init__(self, opinion_service: OpinionService) -> None:
        """Initialize get opinion thread use case.

        Args:
            opinion_service: Opinion domain service
        """
        self.opinion_service = opinion_service

    async def execute(
        self, request: GetOpinionThreadRequest
    ) -> Optional[GetOpinionThreadResponse]:
        """Execute get thread flow.

        Args:
            request: Get thread request

        Returns:
            Thread if the opinion exists, None otherwise
        """
        thread = await self.opinion_service.get_thread(OpinionId(request.opinion_id))
        if thread is None:
            return None

        opinion, replies = thread
        return GetOpinionThreadResponse(
            opinion=OpinionItem.from_opinion(opinion),
            replies=[OpinionItem.from_opinion(reply) for reply in replies],
        )
