"""Content moderation domain service."""

import logfire

from board.config import ModerationSettings
from board.domain.error import InputTooLongError

from .base import Service


class TextClassifier:
    """External text classifier interface.

    Implementations send a prompt to a model and return its raw answer.
    Any failure (timeout, transport, malformed response) is raised.
    """

    async def classify(self, prompt: str) -> str:
        """Classify a prompt.

        Args:
            prompt: Instruction template followed by the content

        Returns:
            Raw classifier response text
        """
        raise NotImplementedError


class ModerationService(Service):
    """Domain service deciding whether content may be published.

    The pipeline short-circuits in this order:
    1. Length check (raises, it's a validation error rather than a verdict)
    2. Denylist substring match on the lowercased content
    3. External classifier, rejecting when its answer contains the flag token

    If the classifier fails the content is accepted: moderation degrades to
    the denylist alone rather than blocking every post while the classifier
    is down. Each fallback is logged as a warning.
    """

    def __init__(
        self, classifier: TextClassifier, moderation_settings: ModerationSettings
    ) -> None:
        """Initialize moderation service.

        Args:
            classifier: External text classifier
            moderation_settings: Length limit, denylist and prompt template
        """
        self.classifier = classifier
        self.settings = moderation_settings
        self._denylist = [word.lower() for word in moderation_settings.denylist]

    def check_length(self, content: str) -> None:
        """Raise if content is longer than allowed.

        Args:
            content: Content to check

        Raises:
            InputTooLongError: If content exceeds the maximum length
        """
        if len(content) > self.settings.max_length:
            raise InputTooLongError(len(content), self.settings.max_length)

    def matches_denylist(self, content: str) -> bool:
        """Whether the lowercased content contains a denylisted substring."""
        lowered = content.lower()
        return any(word in lowered for word in self._denylist)

    def build_prompt(self, content: str) -> str:
        """Concatenate the instruction template with the content."""
        return self.settings.prompt_template + content

    async def moderate(self, content: str) -> bool:
        """Run the moderation pipeline.

        Args:
            content: Content to moderate

        Returns:
            True if the content must be rejected, False if it's accepted

        Raises:
            InputTooLongError: If content exceeds the maximum length
        """
        with logfire.span("moderation_service.moderate", length=len(content)):
            self.check_length(content)

            if self.matches_denylist(content):
                logfire.info("Content rejected by denylist")
                return True

            try:
                response = await self.classifier.classify(self.build_prompt(content))
            except Exception as e:
                # Deliberate fallback: classifier outages must not block posting
                logfire.warn(
                    "Classifier unavailable, accepting content",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return False

            rejected = self.settings.flag_token in response
            logfire.info(
                "Content classified",
                rejected=rejected,
                response=response[:20],
            )
            return rejected
