"""Vote use cases."""

from .get_user_vote import GetUserVoteRequest, GetUserVoteResponse, GetUserVoteUseCase
from .vote_on_opinion import (
    VoteOnOpinionRequest,
    VoteOnOpinionResponse,
    VoteOnOpinionUseCase,
)

__all__ = [
    "GetUserVoteRequest",
    "GetUserVoteResponse",
    "GetUserVoteUseCase",
    "VoteOnOpinionRequest",
    "VoteOnOpinionResponse",
    "VoteOnOpinionUseCase",
]
