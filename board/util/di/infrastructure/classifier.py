"""Text classifier infrastructure providers."""

from dishka import Scope, provide

from board.adapter.classifier import OpenAICompatibleClassifier
from board.config import ClassifierSettings
from board.domain.service import TextClassifier
from board.util.di.base import ProviderBase
from board.util.error import ConfigurationError


class ClassifierProvider(ProviderBase):
    """Classifier component base."""

    __mock_component__ = "classifier"


class ProdClassifierProvider(ClassifierProvider):
    """Production classifier provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_text_classifier(
        self, classifier_settings: ClassifierSettings
    ) -> TextClassifier:
        """Provide text classifier.

        Returns:
            OpenAI-compatible chat completions classifier

        Raises:
            ConfigurationError: If the classifier endpoint or model is not configured
        """
        if not classifier_settings.base_url:
            raise ConfigurationError("Classifier base URL must be configured")
        if not classifier_settings.model:
            raise ConfigurationError("Classifier model must be configured")

        return OpenAICompatibleClassifier(
            base_url=classifier_settings.base_url,
            model=classifier_settings.model,
            api_key=classifier_settings.api_key,
            timeout=classifier_settings.timeout_seconds,
        )
