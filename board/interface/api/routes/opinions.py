"""Opinion routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import Base64Bytes, BaseModel

from board.application.usecase.opinion import (
    GetAllOpinionsResponse,
    GetAllOpinionsUseCase,
    GetOpinionRequest,
    GetOpinionThreadRequest,
    GetOpinionThreadResponse,
    GetOpinionThreadUseCase,
    GetOpinionUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    OpinionItem,
    PostOpinionRequest,
    PostOpinionResponse,
    PostOpinionUseCase,
)
from board.domain.error import (
    InappropriateContentError,
    InsufficientPointsError,
    ValidationError,
)
from board.domain.value import Media, MediaKind
from board.interface.api.caller import require_caller_id

router = APIRouter(prefix="/opinions", tags=["opinions"], route_class=DishkaRoute)


class MediaAPIRequest(BaseModel):
    """Media attachment, base64 encoded."""

    kind: MediaKind
    data: Base64Bytes


class PostOpinionAPIRequest(BaseModel):
    """API request for posting an opinion or a reply."""

    content: str
    media: MediaAPIRequest | None = None
    parent_id: int | None = None


@router.post(
    "", response_model=PostOpinionResponse, status_code=status.HTTP_201_CREATED
)
async def post_opinion(
    request: PostOpinionAPIRequest,
    post_opinion_use_case: FromDishka[PostOpinionUseCase],
    caller_id: str = Depends(require_caller_id),
) -> PostOpinionResponse:
    """Post a new opinion, or a reply when parent_id is given.

    Args:
        request: Opinion data
        post_opinion_use_case: Post opinion use case from DI
        caller_id: Caller identity from the X-Caller-Id header

    Returns:
        Created opinion details

    Raises:
        HTTPException: 400 on invalid content or parent, 403 when the caller
            can't afford the post, 422 when moderation rejects the content
    """
    media = None
    if request.media is not None:
        media = Media(kind=request.media.kind, data=request.media.data)

    try:
        return await post_opinion_use_case.execute(
            PostOpinionRequest(
                user_id=caller_id,
                content=request.content,
                media=media,
                parent_id=request.parent_id,
            )
        )
    except ValidationError as e:
        logfire.warn("Opinion validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except InsufficientPointsError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        )
    except InappropriateContentError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


@router.get("", response_model=GetAllOpinionsResponse)
async def get_all_opinions(
    get_all_opinions_use_case: FromDishka[GetAllOpinionsUseCase],
) -> GetAllOpinionsResponse:
    """List top-level opinions, oldest first."""
    return await get_all_opinions_use_case.execute()


@router.get("/{opinion_id}", response_model=OpinionItem)
async def get_opinion(
    opinion_id: int,
    get_opinion_use_case: FromDishka[GetOpinionUseCase],
) -> OpinionItem:
    """Get a single opinion.

    Raises:
        HTTPException: 404 if the opinion doesn't exist
    """
    opinion = await get_opinion_use_case.execute(
        GetOpinionRequest(opinion_id=opinion_id)
    )
    if opinion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Opinion {opinion_id} not found",
        )
    return opinion


@router.get("/{opinion_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    opinion_id: int,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """List direct replies to an opinion, oldest first.

    An unknown opinion simply has no replies.
    """
    return await get_replies_use_case.execute(GetRepliesRequest(opinion_id=opinion_id))


@router.get("/{opinion_id}/thread", response_model=GetOpinionThreadResponse)
async def get_opinion_thread(
    opinion_id: int,
    get_thread_use_case: FromDishka[GetOpinionThreadUseCase],
) -> GetOpinionThreadResponse:
    """Get an opinion together with its replies.

    Raises:
        HTTPException: 404 if the opinion doesn't exist
    """
    thread = await get_thread_use_case.execute(
        GetOpinionThreadRequest(opinion_id=opinion_id)
    )
    if thread is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Opinion {opinion_id} not found",
        )
    return thread
