"""Text classifier adapter."""

from .client import (
    ClassifierError,
    MockTextClassifier,
    OpenAICompatibleClassifier,
)

__all__ = ["ClassifierError", "MockTextClassifier", "OpenAICompatibleClassifier"]
