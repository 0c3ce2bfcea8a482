"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from board.domain.model.opinion import Opinion
from board.domain.value import OpinionId

# Console-only, nothing leaves the process
logfire.configure(send_to_logfire=False, console=False)


def make_opinion(
    opinion_id: int,
    content: str = "Pineapple belongs on pizza",
    parent_id: int | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
) -> Opinion:
    """Helper function to build test opinions.

    Replies are placed at depth 1.

    Args:
        opinion_id: Opinion ID
        content: Opinion text
        parent_id: Parent opinion ID for replies
        upvotes: Initial upvotes
        downvotes: Initial downvotes

    Returns:
        Opinion entity
    """
    return Opinion(
        id=OpinionId(opinion_id),
        content=content,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        parent_id=OpinionId(parent_id) if parent_id is not None else None,
        depth=0 if parent_id is None else 1,
        upvotes=upvotes,
        downvotes=downvotes,
    )
