"""Get all (top-level) opinions use case."""

from pydantic import BaseModel

from board.application.usecase.opinion.items import OpinionItem
from board.domain.service import OpinionService


class GetAllOpinionsResponse(BaseModel):
    """Get all opinions response."""

    opinions: list[OpinionItem]
    total: int


class GetAllOpinionsUseCase:
    """Use case for listing top-level opinions, oldest first."""

    def __init__(self, opinion_service: OpinionService) -> None:
        """Initialize get all opinions use case.

        Args:
            opinion_service: Opinion domain service
        """
        self.opinion_service = opinion_service

    async def execute(self) -> GetAllOpinionsResponse:
        """Execute get all opinions flow.

        Returns:
            Top-level opinions (replies are fetched per opinion)
        """
        opinions = await self.opinion_service.get_top_level()
        items = [OpinionItem.from_opinion(opinion) for opinion in opinions]
        return GetAllOpinionsResponse(opinions=items, total=len(items))
