"""In-memory points repository."""

from typing import Optional, Sequence

from board.domain.model.points import UserPointsTracker
from board.domain.repository.points import PointsRepository
from board.domain.value import UserId


class InMemoryPointsRepository(PointsRepository):
    """In-memory implementation of PointsRepository."""

    def __init__(self) -> None:
        self._trackers: dict[UserId, UserPointsTracker] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[UserPointsTracker]:
        """Find a user's tracker."""
        return self._trackers.get(user_id)

    async def find_all(self) -> list[UserPointsTracker]:
        """Find every tracker."""
        return list(self._trackers.values())

    async def save(self, tracker: UserPointsTracker) -> UserPointsTracker:
        """Save or update a tracker."""
        self._trackers[tracker.user_id] = tracker
        return tracker

    async def replace_all(self, trackers: Sequence[UserPointsTracker]) -> None:
        """Replace every stored tracker."""
        self._trackers = {t.user_id: t for t in trackers}
