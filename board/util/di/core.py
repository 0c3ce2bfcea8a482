"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    ClassifierSettings,
    ModerationSettings,
    OpinionSettings,
    PointsSettings,
    Settings,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation settings."""
        return settings.moderation

    @provide(scope=Scope.APP)
    def provide_classifier_settings(self, settings: Settings) -> ClassifierSettings:
        """Provide classifier settings."""
        return settings.classifier

    @provide(scope=Scope.APP)
    def provide_points_settings(self, settings: Settings) -> PointsSettings:
        """Provide points settings."""
        return settings.points

    @provide(scope=Scope.APP)
    def provide_opinion_settings(self, settings: Settings) -> OpinionSettings:
        """Provide opinion store settings."""
        return settings.opinions
