"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import ModerationSettings, OpinionSettings, PointsSettings
from board.domain.repository import (
    OpinionRepository,
    PointsRepository,
    VoteRepository,
)
from board.domain.service import (
    ModerationService,
    OpinionService,
    PointsService,
    SnapshotService,
    TextClassifier,
    VoteService,
)
from board.util.di.base import ProviderBase
from board.util.locks import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped and cheap to build. The state they
    touch (repositories, locks) is APP-scoped so every request sees the same
    tables and contends on the same locks.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_locks(self) -> KeyedLock:
        """Provide the process-wide per-entity locks."""
        return KeyedLock()

    @provide
    def get_moderation_service(
        self, classifier: TextClassifier, moderation_settings: ModerationSettings
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            classifier=classifier, moderation_settings=moderation_settings
        )

    @provide
    def get_points_service(
        self,
        points_repository: PointsRepository,
        points_settings: PointsSettings,
        locks: KeyedLock,
    ) -> PointsService:
        """Provide points domain service."""
        return PointsService(
            points_repository=points_repository,
            points_settings=points_settings,
            locks=locks,
        )

    @provide
    def get_opinion_service(
        self,
        opinion_repository: OpinionRepository,
        opinion_settings: OpinionSettings,
        locks: KeyedLock,
    ) -> OpinionService:
        """Provide opinion domain service."""
        return OpinionService(
            opinion_repository=opinion_repository,
            opinion_settings=opinion_settings,
            locks=locks,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        opinion_service: OpinionService,
        locks: KeyedLock,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            opinion_service=opinion_service,
            locks=locks,
        )

    @provide
    def get_snapshot_service(
        self,
        opinion_repository: OpinionRepository,
        vote_repository: VoteRepository,
        points_repository: PointsRepository,
        locks: KeyedLock,
        opinion_settings: OpinionSettings,
    ) -> SnapshotService:
        """Provide snapshot domain service."""
        return SnapshotService(
            opinion_repository=opinion_repository,
            vote_repository=vote_repository,
            points_repository=points_repository,
            locks=locks,
            opinion_settings=opinion_settings,
        )
