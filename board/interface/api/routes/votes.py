"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from board.application.usecase.vote import (
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
    VoteOnOpinionRequest,
    VoteOnOpinionResponse,
    VoteOnOpinionUseCase,
)
from board.domain.error import OpinionNotFoundError
from board.domain.value import VoteType
from board.interface.api.caller import require_caller_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    vote: VoteType


@router.post("/opinions/{opinion_id}/vote", response_model=VoteOnOpinionResponse)
async def vote_on_opinion(
    opinion_id: int,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteOnOpinionUseCase],
    caller_id: str = Depends(require_caller_id),
) -> VoteOnOpinionResponse:
    """Cast or change a vote on an opinion.

    Voting the same way twice is a no-op; voting the other way flips the vote.

    Args:
        opinion_id: Opinion ID
        request: Vote choice
        vote_use_case: Vote use case from DI
        caller_id: Caller identity from the X-Caller-Id header

    Returns:
        Outcome and the opinion's counters

    Raises:
        HTTPException: 404 if the opinion doesn't exist
    """
    try:
        return await vote_use_case.execute(
            VoteOnOpinionRequest(
                user_id=caller_id,
                opinion_id=opinion_id,
                vote=request.vote,
            )
        )
    except OpinionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get("/opinions/{opinion_id}/vote", response_model=GetUserVoteResponse)
async def get_user_vote(
    opinion_id: int,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    caller_id: str = Depends(require_caller_id),
) -> GetUserVoteResponse:
    """Get the caller's vote on an opinion (null if none)."""
    return await get_user_vote_use_case.execute(
        GetUserVoteRequest(user_id=caller_id, opinion_id=opinion_id)
    )
