"""Repository implementations."""

from .inmemory import (
    InMemoryOpinionRepository,
    InMemoryPointsRepository,
    InMemoryVoteRepository,
)

__all__ = [
    "InMemoryOpinionRepository",
    "InMemoryPointsRepository",
    "InMemoryVoteRepository",
]
