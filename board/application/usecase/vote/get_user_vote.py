"""Get user vote use case."""

from pydantic import BaseModel

from board.domain.service import VoteService
from board.domain.value import OpinionId, UserId, VoteType


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    user_id: str
    opinion_id: int


class GetUserVoteResponse(BaseModel):
    """Get user vote response."""

    opinion_id: int
    vote: VoteType | None  # None if the user hasn't voted


class GetUserVoteUseCase:
    """Use case for reading the caller's vote on an opinion."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get user vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        """Execute get user vote flow.

        Args:
            request: Get user vote request

        Returns:
            The user's vote, if any
        """
        vote = await self.vote_service.get_user_vote(
            UserId(request.user_id), OpinionId(request.opinion_id)
        )
        return GetUserVoteResponse(opinion_id=request.opinion_id, vote=vote)
