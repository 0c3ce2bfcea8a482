"""Opinion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from board.domain.model.opinion import Opinion
from board.domain.value import OpinionId


class OpinionRepository(ABC):
    """Repository for Opinion entity.

    Defines the contract for opinion storage operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, opinion_id: OpinionId) -> Optional[Opinion]:
        """Find an opinion by ID.

        Args:
            opinion_id: The opinion's identifier

        Returns:
            The opinion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(self) -> List[Opinion]:
        """Find all opinions without a parent, in insertion order.

        Returns:
            List of top-level opinions
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: OpinionId) -> List[Opinion]:
        """Find direct replies to an opinion, in insertion order.

        Args:
            parent_id: The parent opinion ID

        Returns:
            List of replies (empty if none or parent unknown)
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Opinion]:
        """Find every opinion in insertion order.

        Returns:
            All stored opinions
        """
        pass

    @abstractmethod
    async def peek_next_id(self) -> OpinionId:
        """Return the id the next allocation will hand out, without consuming it."""
        pass

    @abstractmethod
    async def allocate_id(self) -> OpinionId:
        """Consume and return the next opinion id.

        Ids start at 0, strictly increase and are never reused. Callers only
        allocate once the opinion is certain to be stored.
        """
        pass

    @abstractmethod
    async def save(self, opinion: Opinion) -> Opinion:
        """Save an opinion (create or update).

        Args:
            opinion: The opinion to save

        Returns:
            The saved opinion
        """
        pass

    @abstractmethod
    async def adjust_votes(
        self, opinion_id: OpinionId, up_delta: int, down_delta: int
    ) -> Optional[Opinion]:
        """Add deltas to the vote counters of an opinion.

        Args:
            opinion_id: The opinion ID
            up_delta: Change to apply to upvotes
            down_delta: Change to apply to downvotes

        Returns:
            Updated opinion, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def replace_all(
        self, opinions: Sequence[Opinion], next_id: OpinionId
    ) -> None:
        """Replace the whole store (used when restoring a snapshot).

        Args:
            opinions: Opinions in insertion order
            next_id: Id the next allocation should hand out
        """
        pass
