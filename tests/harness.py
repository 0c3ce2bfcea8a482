"""Test harness for unit and E2E tests.

Everything runs in-process; no external services are needed unless a test
unmocks the classifier. Settings are loaded from environment variables.
"""

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_post_opinion(unit_env):
            use_case = await unit_env.get(PostOpinionUseCase)
            response = await use_case.execute(PostOpinionRequest(...))
            assert response.opinion_id == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
