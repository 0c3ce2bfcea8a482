"""Persistence infrastructure providers."""

from dishka import Scope, provide

from board.domain.repository import (
    OpinionRepository,
    PointsRepository,
    VoteRepository,
)
from board.persistence.repository import (
    InMemoryOpinionRepository,
    InMemoryPointsRepository,
    InMemoryVoteRepository,
)
from board.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    The in-memory tables are the live store, shared by every request for
    the lifetime of the process. Snapshots carry them across restarts.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_opinion_repository(self) -> OpinionRepository:
        """Provide Opinion repository."""
        return InMemoryOpinionRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide Vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_points_repository(self) -> PointsRepository:
        """Provide Points repository."""
        return InMemoryPointsRepository()
