"""Opinion use cases."""

from .get_opinion import GetOpinionRequest, GetOpinionUseCase
from .get_opinions import GetAllOpinionsResponse, GetAllOpinionsUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .get_thread import (
    GetOpinionThreadRequest,
    GetOpinionThreadResponse,
    GetOpinionThreadUseCase,
)
from .items import MediaItem, OpinionItem
from .post_opinion import PostOpinionRequest, PostOpinionResponse, PostOpinionUseCase

__all__ = [
    "GetAllOpinionsResponse",
    "GetAllOpinionsUseCase",
    "GetOpinionRequest",
    "GetOpinionThreadRequest",
    "GetOpinionThreadResponse",
    "GetOpinionThreadUseCase",
    "GetOpinionUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "MediaItem",
    "OpinionItem",
    "PostOpinionRequest",
    "PostOpinionResponse",
    "PostOpinionUseCase",
]
