"""Points routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from board.application.usecase.points import (
    GetUserPointsRequest,
    GetUserPointsResponse,
    GetUserPointsUseCase,
)

router = APIRouter(prefix="/users", tags=["points"], route_class=DishkaRoute)


@router.get("/{user_id}/points", response_model=GetUserPointsResponse)
async def get_user_points(
    user_id: str,
    get_user_points_use_case: FromDishka[GetUserPointsUseCase],
) -> GetUserPointsResponse:
    """Get a user's points balance.

    Reading never creates a balance, so users who never posted are unknown.

    Raises:
        HTTPException: 404 if the user has no points record yet
    """
    points = await get_user_points_use_case.execute(
        GetUserPointsRequest(user_id=user_id)
    )
    if points is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No points recorded for user {user_id}",
        )
    return points
