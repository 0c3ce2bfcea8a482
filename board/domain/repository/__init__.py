"""Repository interfaces for the opinion board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.opinion import OpinionRepository
from board.domain.repository.points import PointsRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "OpinionRepository",
    "PointsRepository",
    "VoteRepository",
]
