"""Points repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from board.domain.model.points import UserPointsTracker
from board.domain.value import UserId


class PointsRepository(ABC):
    """Repository for UserPointsTracker entity."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[UserPointsTracker]:
        """Find a user's points tracker.

        Args:
            user_id: The user's ID

        Returns:
            The tracker if the user has interacted before, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[UserPointsTracker]:
        """Find every tracker in creation order."""
        pass

    @abstractmethod
    async def save(self, tracker: UserPointsTracker) -> UserPointsTracker:
        """Save a tracker (create or update).

        Args:
            tracker: The tracker to save

        Returns:
            The saved tracker
        """
        pass

    @abstractmethod
    async def replace_all(self, trackers: Sequence[UserPointsTracker]) -> None:
        """Replace every stored tracker (used when restoring a snapshot)."""
        pass
