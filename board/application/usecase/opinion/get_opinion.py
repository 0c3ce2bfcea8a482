"""Get opinion use case."""

from typing import Optional

from pydantic import BaseModel

from board.application.usecase.opinion.items import OpinionItem
from board.domain.service import OpinionService
from board.domain.value import OpinionId


class GetOpinionRequest(BaseModel):
    """Get opinion request."""

    opinion_id: int


class GetOpinionUseCase:
    """Use case for retrieving a single opinion."""

    def __init__(self, opinion_service: OpinionService) -> None:
        """Initialize get opinion use case.

        Args:
            opinion_service: Opinion domain service
        """
        self.opinion_service = opinion_service

    async def execute(self, request: GetOpinionRequest) -> Optional[OpinionItem]:
        """Execute get opinion flow.

        Args:
            request: Get opinion request

        Returns:
            Opinion if found, None otherwise
        """
        opinion = await self.opinion_service.get_opinion(OpinionId(request.opinion_id))
        if opinion is None:
            return None
        return OpinionItem.from_opinion(opinion)
