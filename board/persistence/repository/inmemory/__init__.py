"""In-memory repository implementations.

These tables are the board's source of truth while it runs; durable storage
only happens through snapshots at startup and shutdown.
"""

from .opinion import InMemoryOpinionRepository
from .points import InMemoryPointsRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryOpinionRepository",
    "InMemoryPointsRepository",
    "InMemoryVoteRepository",
]
