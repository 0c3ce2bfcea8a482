"""In-memory opinion repository."""

from typing import Optional, Sequence

from board.domain.model.opinion import Opinion
from board.domain.repository.opinion import OpinionRepository
from board.domain.value import OpinionId


class InMemoryOpinionRepository(OpinionRepository):
    """In-memory implementation of OpinionRepository.

    Dicts keep insertion order, and ids are allocated in increasing order,
    so iterating the table yields opinions oldest first.
    """

    def __init__(self) -> None:
        self._opinions: dict[OpinionId, Opinion] = {}
        self._next_id = OpinionId(0)

    async def find_by_id(self, opinion_id: OpinionId) -> Optional[Opinion]:
        """Find an opinion by ID."""
        return self._opinions.get(opinion_id)

    async def find_top_level(self) -> list[Opinion]:
        """Find all top-level opinions."""
        return [o for o in self._opinions.values() if o.parent_id is None]

    async def find_replies(self, parent_id: OpinionId) -> list[Opinion]:
        """Find direct replies to an opinion."""
        return [o for o in self._opinions.values() if o.parent_id == parent_id]

    async def find_all(self) -> list[Opinion]:
        """Find every opinion."""
        return list(self._opinions.values())

    async def peek_next_id(self) -> OpinionId:
        """Return the next id without consuming it."""
        return self._next_id

    async def allocate_id(self) -> OpinionId:
        """Consume and return the next id."""
        opinion_id = self._next_id
        self._next_id = OpinionId(opinion_id + 1)
        return opinion_id

    async def save(self, opinion: Opinion) -> Opinion:
        """Save or update an opinion."""
        self._opinions[opinion.id] = opinion
        if opinion.id >= self._next_id:
            self._next_id = OpinionId(opinion.id + 1)
        return opinion

    async def adjust_votes(
        self, opinion_id: OpinionId, up_delta: int, down_delta: int
    ) -> Optional[Opinion]:
        """Add deltas to the vote counters."""
        opinion = self._opinions.get(opinion_id)
        if opinion is None:
            return None

        upvotes = opinion.upvotes + up_delta
        downvotes = opinion.downvotes + down_delta
        if upvotes < 0 or downvotes < 0:
            raise ValueError(
                f"Vote counters of opinion {opinion_id} would go negative"
            )

        # Opinions are immutable, store an updated copy
        updated = opinion.model_copy(
            update={"upvotes": upvotes, "downvotes": downvotes}
        )
        self._opinions[opinion_id] = updated
        return updated

    async def replace_all(
        self, opinions: Sequence[Opinion], next_id: OpinionId
    ) -> None:
        """Replace the whole store."""
        self._opinions = {o.id: o for o in opinions}
        self._next_id = next_id
