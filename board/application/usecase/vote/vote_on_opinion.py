"""Vote on opinion use case."""

from pydantic import BaseModel

from board.domain.service import VoteService
from board.domain.value import OpinionId, UserId, VoteOutcome, VoteType


class VoteOnOpinionRequest(BaseModel):
    """Vote on opinion request."""

    user_id: str  # Opaque caller identity
    opinion_id: int
    vote: VoteType


class VoteOnOpinionResponse(BaseModel):
    """Vote on opinion response."""

    opinion_id: int
    vote: VoteType
    outcome: VoteOutcome
    upvotes: int
    downvotes: int


class VoteOnOpinionUseCase:
    """Use case for casting or changing a vote on an opinion."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteOnOpinionRequest) -> VoteOnOpinionResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            Outcome and the opinion's counters after the vote

        Raises:
            OpinionNotFoundError: If the opinion doesn't exist
        """
        result = await self.vote_service.vote(
            UserId(request.user_id), OpinionId(request.opinion_id), request.vote
        )
        opinion = result.opinion

        return VoteOnOpinionResponse(
            opinion_id=opinion.id,
            vote=request.vote,
            outcome=result.outcome,
            upvotes=opinion.upvotes,
            downvotes=opinion.downvotes,
        )
