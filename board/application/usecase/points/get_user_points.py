"""Get user points use case."""

from typing import Optional

from pydantic import BaseModel

from board.domain.service import PointsService
from board.domain.value import UserId


class GetUserPointsRequest(BaseModel):
    """Get user points request."""

    user_id: str


class GetUserPointsResponse(BaseModel):
    """Get user points response."""

    user_id: str
    total_points: int
    remaining_points: int


class GetUserPointsUseCase:
    """Use case for reading a user's points without creating a tracker."""

    def __init__(self, points_service: PointsService) -> None:
        """Initialize get user points use case.

        Args:
            points_service: Points domain service
        """
        self.points_service = points_service

    async def execute(
        self, request: GetUserPointsRequest
    ) -> Optional[GetUserPointsResponse]:
        """Execute get user points flow.

        Args:
            request: Get user points request

        Returns:
            Points if the user has interacted before, None otherwise
        """
        tracker = await self.points_service.get_points(UserId(request.user_id))
        if tracker is None:
            return None

        return GetUserPointsResponse(
            user_id=tracker.user_id,
            total_points=tracker.total_points,
            remaining_points=tracker.remaining_points,
        )
