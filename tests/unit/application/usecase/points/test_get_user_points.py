"""Unit tests for GetUserPointsUseCase."""

import pytest

from board.application.usecase.points import (
    GetUserPointsRequest,
    GetUserPointsUseCase,
)
from board.domain.service import PointsService
from board.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserPoints:
    """Tests for GetUserPointsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, unit_env):
        """Users who never interacted have no balance."""
        use_case = await unit_env.get(GetUserPointsUseCase)

        assert await use_case.execute(GetUserPointsRequest(user_id="nobody")) is None

    @pytest.mark.asyncio
    async def test_known_user_balance(self, unit_env):
        """The response mirrors the tracker."""
        # Arrange
        points_service = await unit_env.get(PointsService)
        use_case = await unit_env.get(GetUserPointsUseCase)
        await points_service.adjust(UserId("alice"), earned=5, spent=0)

        # Act
        response = await use_case.execute(GetUserPointsRequest(user_id="alice"))

        # Assert
        assert response.user_id == "alice"
        assert response.total_points == 55
        assert response.remaining_points == 55
