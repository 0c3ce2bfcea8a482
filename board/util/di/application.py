"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.opinion import (
    GetAllOpinionsUseCase,
    GetOpinionThreadUseCase,
    GetOpinionUseCase,
    GetRepliesUseCase,
    PostOpinionUseCase,
)
from board.application.usecase.points import GetUserPointsUseCase
from board.application.usecase.state import ExportStateUseCase, ImportStateUseCase
from board.application.usecase.vote import GetUserVoteUseCase, VoteOnOpinionUseCase
from board.config import PointsSettings
from board.domain.service import (
    ModerationService,
    OpinionService,
    PointsService,
    SnapshotService,
    VoteService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Opinion use cases
    @provide(scope=Scope.REQUEST)
    def get_post_opinion_use_case(
        self,
        opinion_service: OpinionService,
        moderation_service: ModerationService,
        points_service: PointsService,
        points_settings: PointsSettings,
    ) -> PostOpinionUseCase:
        """Provide post opinion use case."""
        return PostOpinionUseCase(
            opinion_service=opinion_service,
            moderation_service=moderation_service,
            points_service=points_service,
            points_settings=points_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_all_opinions_use_case(
        self, opinion_service: OpinionService
    ) -> GetAllOpinionsUseCase:
        """Provide get all opinions use case."""
        return GetAllOpinionsUseCase(opinion_service=opinion_service)

    @provide(scope=Scope.REQUEST)
    def get_opinion_use_case(self, opinion_service: OpinionService) -> GetOpinionUseCase:
        """Provide get opinion use case."""
        return GetOpinionUseCase(opinion_service=opinion_service)

    @provide(scope=Scope.REQUEST)
    def get_replies_use_case(self, opinion_service: OpinionService) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(opinion_service=opinion_service)

    @provide(scope=Scope.REQUEST)
    def get_opinion_thread_use_case(
        self, opinion_service: OpinionService
    ) -> GetOpinionThreadUseCase:
        """Provide get opinion thread use case."""
        return GetOpinionThreadUseCase(opinion_service=opinion_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_on_opinion_use_case(
        self, vote_service: VoteService
    ) -> VoteOnOpinionUseCase:
        """Provide vote on opinion use case."""
        return VoteOnOpinionUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_user_vote_use_case(self, vote_service: VoteService) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_service=vote_service)

    # Points use cases
    @provide(scope=Scope.REQUEST)
    def get_user_points_use_case(
        self, points_service: PointsService
    ) -> GetUserPointsUseCase:
        """Provide get user points use case."""
        return GetUserPointsUseCase(points_service=points_service)

    # State use cases
    @provide(scope=Scope.REQUEST)
    def get_export_state_use_case(
        self, snapshot_service: SnapshotService
    ) -> ExportStateUseCase:
        """Provide export state use case."""
        return ExportStateUseCase(snapshot_service=snapshot_service)

    @provide(scope=Scope.REQUEST)
    def get_import_state_use_case(
        self, snapshot_service: SnapshotService
    ) -> ImportStateUseCase:
        """Provide import state use case."""
        return ImportStateUseCase(snapshot_service=snapshot_service)
