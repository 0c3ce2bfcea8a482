"""Points use cases."""

from .get_user_points import (
    GetUserPointsRequest,
    GetUserPointsResponse,
    GetUserPointsUseCase,
)

__all__ = [
    "GetUserPointsRequest",
    "GetUserPointsResponse",
    "GetUserPointsUseCase",
]
