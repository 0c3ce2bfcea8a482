"""Domain services."""

from .base import Service
from .moderation_service import ModerationService, TextClassifier
from .opinion_service import OpinionService
from .points_service import PointsReservation, PointsService
from .snapshot_service import SnapshotService
from .vote_service import VoteResult, VoteService

__all__ = [
    "ModerationService",
    "OpinionService",
    "PointsReservation",
    "PointsService",
    "Service",
    "SnapshotService",
    "TextClassifier",
    "VoteResult",
    "VoteService",
]
